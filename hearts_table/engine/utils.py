from collections.abc import Iterable, Sequence

from .card import Card
from .constants import (
    HEART_POINTS, Q_SPADES_POINTS, Q_SPADES_IDX, STARTING_CARD_IDX, Suit,
)


def is_heart(card: Card) -> bool:
    return card.suit == Suit.HEART


def is_q_spades(card: Card) -> bool:
    return card.idx == Q_SPADES_IDX


def is_starting_card(card: Card) -> bool:
    """Is it the 2 of clubs"""
    return card.idx == STARTING_CARD_IDX


def points_for_card(card: Card) -> int:
    if is_heart(card):
        return HEART_POINTS
    if is_q_spades(card):
        return Q_SPADES_POINTS
    return 0


def points_for_cards(cards: Iterable[Card]) -> int:
    return sum(points_for_card(card) for card in cards)


def sorted_cards(cards: Iterable[Card]) -> list[Card]:
    """Cards sorted by suit (clubs, diamonds, spades, hearts) and then by rank"""
    return sorted(cards, key=lambda card: card.value)


def get_winning_card_argmax(cards: Sequence[Card], leading_suit: Suit) -> int:
    """
    Returns:
        Index (within ``cards``) of the highest card of the leading suit.
        Cards of other suits never win, regardless of their rank.
    """
    matching = [i for i, card in enumerate(cards) if card.suit == leading_suit]
    if not matching:
        raise ValueError(f'No card of the leading suit {leading_suit.value} in {list(cards)}')
    return max(matching, key=lambda i: cards[i].rank_value)


def get_valid_plays(hand: Iterable[Card],
                    leading_suit: Suit | None,
                    are_hearts_broken: bool,
                    is_first_trick: bool,
                    no_points_on_first_trick: bool = False) -> list[Card]:
    """
    Returns:
        Cards from the hand which can be played now, sorted
    """
    hand = sorted_cards(hand)

    if is_first_trick:
        starting_card = [card for card in hand if is_starting_card(card)]
        if len(starting_card) > 0:
            # the opening lead is forced
            return starting_card

    if leading_suit is None:
        if not are_hearts_broken:
            non_points = [card for card in hand if not is_heart(card) and not is_q_spades(card)]
            if len(non_points) > 0:
                return non_points
        return hand

    matching_suit = [card for card in hand if card.suit == leading_suit]
    if len(matching_suit) > 0:
        return matching_suit

    if is_first_trick and no_points_on_first_trick:
        non_points = [card for card in hand if points_for_card(card) == 0]
        if len(non_points) > 0:
            return non_points

    return hand
