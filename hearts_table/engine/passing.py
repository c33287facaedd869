from collections.abc import Sequence
from typing import TYPE_CHECKING

from .constants import PLAYER_COUNT, CARDS_TO_PASS_COUNT, PassDirection

if TYPE_CHECKING:
    from .hand import Hand

_SEAT_OFFSETS = {
    PassDirection.LEFT: 1,
    PassDirection.RIGHT: PLAYER_COUNT - 1,
    PassDirection.ACROSS: 2,
    PassDirection.NO_PASSING: 0,
}


def seat_in_direction(position: int, direction: PassDirection) -> int:
    """
    Args:
        position: Seat position, from 1 to 4 (clockwise)
        direction: Direction to look in. ``NO_PASSING`` returns the same seat

    Returns:
        Position of the seat in the given direction, from 1 to 4
    """
    if not 1 <= position <= PLAYER_COUNT:
        raise ValueError(f'Seat position should be in range 1-{PLAYER_COUNT}, got {position}')
    return (position - 1 + _SEAT_OFFSETS[direction]) % PLAYER_COUNT + 1


def pass_direction_for_round(round_no: int) -> PassDirection:
    """
    Pass directions cycle every 4 rounds: across, left, right, no passing

    Args:
        round_no: Round number, starting from 1
    """
    if round_no < 1:
        raise ValueError(f'Round numbers start from 1, got {round_no}')
    return {
        1: PassDirection.ACROSS,
        2: PassDirection.LEFT,
        3: PassDirection.RIGHT,
        0: PassDirection.NO_PASSING,
    }[round_no % 4]


def exchange_pass_cards(hands: Sequence['Hand'], direction: PassDirection) -> None:
    """
    Delivers every hand's staged cards to the hand sitting in the given
    direction. Nothing is delivered until all hands have staged their cards.

    Raises:
        RuntimeError: if not all hands have their cards staged
    """
    if direction == PassDirection.NO_PASSING:
        return

    if any(len(hand.pass_cards) != CARDS_TO_PASS_COUNT for hand in hands):
        raise RuntimeError('Cannot pass the cards if not all players selected '
                           f'their {CARDS_TO_PASS_COUNT} cards to pass.')

    hands_by_position = {hand.position: hand for hand in hands}
    outgoing = [(hand, hand.take_pass_cards()) for hand in hands]
    for hand, cards in outgoing:
        target = hands_by_position[seat_in_direction(hand.position, direction)]
        target.receive_passed_cards(cards)
