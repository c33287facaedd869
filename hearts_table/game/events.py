from dataclasses import dataclass

from hearts_table.engine import Card, PassDirection, Suit


@dataclass(frozen=True)
class RoundStarted:
    round_no: int
    pass_direction: PassDirection


@dataclass(frozen=True)
class CardsPassed:
    round_no: int
    pass_direction: PassDirection


@dataclass(frozen=True)
class CardPlayed:
    player_idx: int
    player_name: str
    card: Card
    trick: tuple[Card, ...]
    leading_suit: Suit | None
    are_hearts_broken: bool


@dataclass(frozen=True)
class TrickCompleted:
    trick_no: int
    trick: tuple[Card, ...]
    winner_idx: int
    winner_name: str
    points: int


@dataclass(frozen=True)
class RoundScored:
    round_no: int
    scores: tuple[int, ...]
    totals: tuple[int, ...]
    moon_shooter_idx: int | None


@dataclass(frozen=True)
class GameOver:
    totals: tuple[int, ...]
    winner_idx: int
    winner_name: str


class GameObserver:
    """
    Receives the events of a game, e.g. to display them.
    Every method does nothing by default.
    """

    def on_round_started(self, event: RoundStarted) -> None:
        pass

    def on_cards_passed(self, event: CardsPassed) -> None:
        pass

    def on_card_played(self, event: CardPlayed) -> None:
        pass

    def on_trick_completed(self, event: TrickCompleted) -> None:
        pass

    def on_round_scored(self, event: RoundScored) -> None:
        pass

    def on_game_over(self, event: GameOver) -> None:
        pass
