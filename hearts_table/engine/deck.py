from typing import Self

import numpy as np

from .card import Card
from .constants import CARDS_IN_DECK_COUNT
from .errors import EmptyDeckError


class Deck:
    """
    Standard 52 cards deck.
    Upon creating the object the deck is automatically shuffled

    Args:
        random_state: Random seed for reproducibility
    """

    __slots__ = ['_rng', '_cards', '_cards_left']

    def __init__(self, random_state: int | np.integer | None = None):
        self._rng = np.random.default_rng(random_state)
        self._cards: list[Card] = []
        self._cards_left = 0
        self.reset()

    @property
    def cards_left(self) -> int:
        return self._cards_left

    def reset(self) -> Self:
        """
        Brings back all 52 cards to the deck and shuffles it
        """
        self._cards = [Card(i) for i in range(CARDS_IN_DECK_COUNT)]
        self._rng.shuffle(self._cards)
        self._cards_left = len(self._cards)
        return self

    def deal(self) -> Card:
        """
        Deals a single card from the top

        Raises:
            EmptyDeckError: if all cards have already been dealt
        """
        if self._cards_left == 0:
            raise EmptyDeckError('Not enough cards left in the deck')

        card = self._cards[len(self._cards) - self._cards_left]
        self._cards_left -= 1
        return card

    def deal_many(self, n: int) -> list[Card]:
        """
        Deals n cards from the top
        """
        return [self.deal() for _ in range(n)]
