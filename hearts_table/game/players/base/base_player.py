from abc import ABC, abstractmethod

from hearts_table.engine import Card, PassDirection, TableState, HeartsError


class BasePlayer(ABC):
    """Abstract base class for all Hearts players"""

    @abstractmethod
    def play_card(self, hand: list[Card], table: TableState) -> Card:
        """
        Args:
            hand: Cards held by the player, sorted
            table: What is on the table right now

        Returns:
            A card from the hand. If it cannot be played, the method is
            called again (after :meth:`on_illegal_play`)
        """
        raise NotImplementedError()

    @abstractmethod
    def select_cards_to_pass(self, hand: list[Card], direction: PassDirection) -> list[Card]:
        """
        Returns:
            3 distinct cards from the hand. If the selection is invalid, the
            method is called again (after :meth:`on_illegal_play`)
        """
        raise NotImplementedError()

    def on_illegal_play(self, error: HeartsError) -> None:
        """A method which is called when the chosen card or cards were rejected"""
        pass

    def post_trick_callback(self, trick: list[Card], is_trick_taken: bool) -> None:
        """A method which is called after every trick to inform a player about its outcome"""
        pass

    def post_round_callback(self, score: int) -> None:
        """A method which is called after every round to inform a player about their score"""
        pass
