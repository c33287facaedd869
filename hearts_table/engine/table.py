from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from .card import Card
from .constants import PLAYER_COUNT, CARDS_PER_PLAYER_COUNT, Suit
from .utils import is_heart, get_winning_card_argmax, get_valid_plays


class TrickState(Enum):
    EMPTY = 0
    LED = 1
    FOLLOWING = 2
    COMPLETE = 3


@dataclass(frozen=True)
class TableState:
    """
    What a player can see on the table when choosing a card to play

    Args:
        trick: Cards played in the current trick, in the order they were played
        leading_suit: Suit of the first card in the trick, or ``None``
        are_hearts_broken: Has any heart been played in this round
        trick_no: Number of the current trick, from 1 to 13
        no_points_on_first_trick: The house rule from :class:`HeartsRules`
    """
    trick: tuple[Card, ...]
    leading_suit: Suit | None
    are_hearts_broken: bool
    trick_no: int
    no_points_on_first_trick: bool = False

    @property
    def is_first_trick(self) -> bool:
        return self.trick_no == 1

    @property
    def is_leading(self) -> bool:
        return len(self.trick) == 0

    def valid_plays(self, hand: Iterable[Card]) -> list[Card]:
        """Cards from the hand which can be played now, sorted"""
        return get_valid_plays(
            hand=hand,
            leading_suit=self.leading_suit,
            are_hearts_broken=self.are_hearts_broken,
            is_first_trick=self.is_first_trick,
            no_points_on_first_trick=self.no_points_on_first_trick,
        )


class Table:
    """
    State of the trick being played: cards on the table, the leading suit
    and whether hearts are broken.
    """

    def __init__(self):
        self._played: list[tuple[int, Card]] = []
        self.are_hearts_broken = False
        self.trick_no = 1

    def reset(self) -> None:
        """Prepares the table for a new round"""
        self._played = []
        self.are_hearts_broken = False
        self.trick_no = 1

    @property
    def played_cards(self) -> list[Card]:
        """Cards in the current trick, in the order they were played"""
        return [card for _, card in self._played]

    @property
    def leading_suit(self) -> Suit | None:
        """Leading suit in the current trick, or None if the trick is empty"""
        if len(self._played) == 0:
            return None
        return self._played[0][1].suit

    @property
    def state(self) -> TrickState:
        if len(self._played) == 0:
            return TrickState.EMPTY
        if len(self._played) == 1:
            return TrickState.LED
        if len(self._played) < PLAYER_COUNT:
            return TrickState.FOLLOWING
        return TrickState.COMPLETE

    @property
    def is_first_trick(self) -> bool:
        return self.trick_no == 1

    @property
    def is_round_finished(self) -> bool:
        return self.trick_no == CARDS_PER_PLAYER_COUNT + 1

    def snapshot(self, no_points_on_first_trick: bool = False) -> TableState:
        return TableState(
            trick=tuple(self.played_cards),
            leading_suit=self.leading_suit,
            are_hearts_broken=self.are_hearts_broken,
            trick_no=self.trick_no,
            no_points_on_first_trick=no_points_on_first_trick,
        )

    def play(self, player_idx: int, card: Card) -> None:
        """
        Puts a card on the table. The rules are not checked here.
        """
        if self.is_round_finished:
            raise RuntimeError('The round has ended. The trick cannot be played')
        if self.state == TrickState.COMPLETE:
            raise RuntimeError('Cannot play card because the trick is full. '
                               'Complete the trick before playing the next card')

        self._played.append((player_idx, card))

        if is_heart(card) and not self.are_hearts_broken:
            self.are_hearts_broken = True

    def complete(self) -> tuple[list[Card], int]:
        """
        Complete the current trick and prepare for the next one

        Returns:
            A tuple of two elements, the first one is the trick content in
            the order the cards were played, and the second is the index of
            a player who took the trick.
        """
        if self.state != TrickState.COMPLETE:
            raise RuntimeError('The trick is not full and therefore cannot be completed')

        trick = self.played_cards
        winning_pos = get_winning_card_argmax(trick, self.leading_suit)
        winner_idx = self._played[winning_pos][0]

        self._played = []
        self.trick_no += 1
        return trick, winner_idx
