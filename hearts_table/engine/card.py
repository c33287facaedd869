from functools import total_ordering
from typing import Self

from .constants import Suit, CARDS_IN_DECK_COUNT


@total_ordering
class Card:
    """
    Args:
        idx: Value from the range 0-51 representing the index of the card.
            The cards are ordered by suit: clubs, diamonds, spades, hearts;
            and within each suit by rank: from 2 to Ace
    """

    __slots__ = ['_idx']

    ranks_str = ('2', '3', '4', '5', '6', '7', '8', '9', '10', 'J', 'Q', 'K', 'A')

    def __init__(self, idx: int):
        idx = int(idx)
        if not 0 <= idx < CARDS_IN_DECK_COUNT:
            raise ValueError(f'Card index should be in range 0-51, got {idx}')
        self._idx = idx

    @classmethod
    def of(cls, rank: str, suit: Suit) -> Self:
        suit_order = list(Suit).index(suit)
        rank_order = Card.ranks_str.index(rank)
        return cls(suit_order * 13 + rank_order)

    @classmethod
    def from_str(cls, card_str: str) -> Self:
        """
        Parses a card written either with a suit symbol or with a suit letter,
        e.g. ``10♥``, ``10h``, ``Qs`` or ``qs``

        Raises:
            ValueError: if the string does not describe a card
        """
        card_str = card_str.strip()
        rank_str, suit_str = card_str[:-1].upper(), card_str[-1:].lower()
        for suit in Suit:
            if suit_str in (suit.value, suit.letter) and rank_str in Card.ranks_str:
                return cls.of(rank_str, suit)
        raise ValueError(f'Not a card: {card_str!r}')

    @property
    def idx(self) -> int:
        return self._idx

    @property
    def rank(self) -> str:
        return Card.ranks_str[self._idx % 13]

    @property
    def rank_value(self) -> int:
        """
        Returns:
            Value from 2 to 14, where 14 = Ace
        """
        return self._idx % 13 + 2

    @property
    def suit(self) -> Suit:
        return list(Suit)[self._idx // 13]

    @property
    def value(self) -> int:
        """
        Rank value shifted by the suit offset (0, 13, 26, 39), so that
        every card in the deck has a unique value
        """
        return self.rank_value + Suit.order(self.suit) * 13

    def __str__(self) -> str:
        return f'{self.rank}{self.suit.value}'

    def __repr__(self) -> str:
        return str(self)

    def __hash__(self):
        return hash(self._idx)

    def __index__(self):
        return self._idx

    def __eq__(self, other):
        if type(other) != Card:
            return False
        return self._idx == other._idx

    def __lt__(self, other):
        if type(other) != Card:
            return NotImplemented
        return self.value < other.value
