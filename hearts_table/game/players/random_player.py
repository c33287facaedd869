import numpy as np

from hearts_table.engine import Card, PassDirection, TableState
from hearts_table.engine.constants import CARDS_TO_PASS_COUNT
from .base import BasePlayer


class RandomPlayer(BasePlayer):
    """Plays a random valid card and passes random cards"""

    def __init__(self, random_state: int | None = None):
        self._rng = np.random.default_rng(random_state)

    def play_card(self, hand: list[Card], table: TableState) -> Card:
        valid_plays = table.valid_plays(hand)
        chosen_card_idx = self._rng.integers(len(valid_plays))
        return valid_plays[chosen_card_idx]

    def select_cards_to_pass(self, hand: list[Card], direction: PassDirection) -> list[Card]:
        chosen_cards_idx = self._rng.choice(len(hand), size=CARDS_TO_PASS_COUNT, replace=False)
        return [hand[i] for i in chosen_cards_idx]
