from collections.abc import Sequence

from .events import (
    GameObserver, RoundStarted, CardsPassed, CardPlayed, TrickCompleted, RoundScored, GameOver,
)

_COLUMN_WIDTH = 10


class ConsoleObserver(GameObserver):
    """
    Prints the table and the scoreboard to the console

    Args:
        names: Names of the players, ordered by seat position
    """

    def __init__(self, names: Sequence[str]):
        self.names = list(names)
        self.rounds: list[tuple[int, ...]] = []
        self.totals: tuple[int, ...] = (0,) * len(self.names)

    def _horizontal_line(self) -> str:
        return '+-------+' + ('-' * _COLUMN_WIDTH + '+') * len(self.names)

    def _row(self, label: str, values: Sequence) -> str:
        return f'|{label:^7}|' + ''.join(f'{str(v)[:_COLUMN_WIDTH]:^{_COLUMN_WIDTH}}|' for v in values)

    def format_scoreboard(self) -> str:
        lines = [self._horizontal_line(), self._row('', self.names), self._horizontal_line()]
        for round_no, scores in enumerate(self.rounds, start=1):
            lines.append(self._row(str(round_no), scores))
            lines.append(self._horizontal_line())
        lines.append(self._row('Total', self.totals))
        lines.append(self._horizontal_line())
        return '\n'.join(lines)

    def on_round_started(self, event: RoundStarted) -> None:
        print()
        print(f'Round {event.round_no} ({event.pass_direction.name.lower().replace("_", " ")})')

    def on_cards_passed(self, event: CardsPassed) -> None:
        print(f'Cards passed {event.pass_direction.name.lower()}.')

    def on_card_played(self, event: CardPlayed) -> None:
        suit = event.leading_suit.name.lower() if event.leading_suit is not None else '-'
        hearts = ' (hearts broken)' if event.are_hearts_broken else ''
        print(f'{event.player_name} plays {event.card}. '
              f'Leading suit: {suit}{hearts}. On the table: {" ".join(str(c) for c in event.trick)}')

    def on_trick_completed(self, event: TrickCompleted) -> None:
        print(f'{event.winner_name} won the trick {event.trick_no} ({event.points} pts)')

    def on_round_scored(self, event: RoundScored) -> None:
        self.rounds.append(event.scores)
        self.totals = event.totals
        if event.moon_shooter_idx is not None:
            print(f'{self.names[event.moon_shooter_idx]} shot the moon!')
        print(self.format_scoreboard())

    def on_game_over(self, event: GameOver) -> None:
        print(f'{event.winner_name} won!')

    def reset(self) -> None:
        self.rounds = []
        self.totals = (0,) * len(self.names)
