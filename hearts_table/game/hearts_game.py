from collections.abc import Sequence

import numpy as np

from hearts_table.engine import (
    HeartsRound, HeartsRules, Hand, Scoreboard, IllegalPlayError, InvalidPassSelectionError,
)
from hearts_table.engine.constants import PLAYER_COUNT, CARDS_PER_PLAYER_COUNT
from hearts_table.engine.utils import points_for_cards
from hearts_table.logging_utils import get_logger
from hearts_table.settings import CHECK_INVARIANTS
from .events import (
    GameObserver, RoundStarted, CardsPassed, CardPlayed, TrickCompleted, RoundScored, GameOver,
)
from .players.base import BasePlayer

logger = get_logger(__name__)

DEFAULT_NAMES = ('Player 1', 'Player 2', 'Player 3', 'Player 4')


class HeartsGame:
    """
    Args:
        players: List of exactly 4 player 'brains', ordered by seat position
        names: Names of the players. Defaults to "Player 1" etc.
        rules: Toggleable rules of the engine. Set to ``None`` for default
            rules (see :class:`HeartsRules` for defaults)
        observers: Objects notified about everything that happens at the table
        random_state: Random seed for reproducibility. Does not control the
            randomness of players.
        check_invariants: Verify after every play that no card was lost or
            duplicated. Defaults to the ``HEARTS_CHECK_INVARIANTS`` switch
    """

    def __init__(self,
                 players: Sequence[BasePlayer],
                 names: Sequence[str] | None = None,
                 rules: HeartsRules | None = None,
                 observers: Sequence[GameObserver] = (),
                 random_state: int | None = None,
                 check_invariants: bool = CHECK_INVARIANTS):

        if len(players) != PLAYER_COUNT:
            raise ValueError(f'There should be exactly {PLAYER_COUNT} players')
        if names is None:
            names = DEFAULT_NAMES
        if len(names) != PLAYER_COUNT:
            raise ValueError(f'There should be exactly {PLAYER_COUNT} names')

        self.players = list(players)
        self.rules = rules if rules is not None else HeartsRules()
        self.observers = list(observers)
        self.check_invariants = check_invariants
        self.hands = [Hand(name, position) for position, name in enumerate(names, start=1)]

        self._rng = np.random.default_rng(random_state)
        self.scoreboard = Scoreboard(ending_score=self.rules.ending_score)
        self.round: HeartsRound | None = None
        self._is_round_scored = False

    @property
    def names(self) -> list[str]:
        return [hand.name for hand in self.hands]

    @property
    def round_no(self) -> int:
        return 0 if self.round is None else self.round.round_no

    @property
    def is_game_over(self) -> bool:
        return self.scoreboard.is_game_over

    def _notify(self, method_name: str, event) -> None:
        for observer in self.observers:
            getattr(observer, method_name)(event)

    def _verify(self) -> None:
        if self.check_invariants:
            self.round.check_card_conservation()

    def reset(self) -> None:
        """Clears the scoreboard to play another game with the same players"""
        self.scoreboard.reset()
        self.round = None
        self._is_round_scored = False

    def start_round(self) -> None:
        """Shuffles and deals the cards for the next round"""
        if self.is_game_over:
            raise RuntimeError('The game is over. Reset it to play again')
        if self.round is None:
            self.round = HeartsRound(
                hands=self.hands,
                rules=self.rules,
                random_state=self._rng.integers(999999),
            )
        else:
            self.round = self.round.next()
        self._is_round_scored = False

        logger.info('Round %d starts, passing: %s', self.round.round_no, self.round.pass_direction.name)
        self._notify('on_round_started', RoundStarted(self.round.round_no, self.round.pass_direction))
        self._verify()

    def pass_cards(self):
        if self.round.are_cards_passed:
            return

        for player_idx, player in enumerate(self.players):
            while True:
                selected_cards = player.select_cards_to_pass(
                    self.hands[player_idx].sorted_cards,
                    self.round.pass_direction,
                )
                try:
                    self.round.pick_cards_to_pass(player_idx, selected_cards)
                    break
                except InvalidPassSelectionError as e:
                    logger.info('%s: invalid cards to pass: %s', self.hands[player_idx].name, e)
                    player.on_illegal_play(e)
            self._verify()

        self.round.perform_cards_passing()
        self._notify('on_cards_passed', CardsPassed(self.round.round_no, self.round.pass_direction))
        self._verify()

    def play_trick(self):
        for _ in range(PLAYER_COUNT):
            player_idx = self.round.current_player_idx
            player = self.players[player_idx]
            hand = self.hands[player_idx]
            while True:
                card = player.play_card(hand.sorted_cards, self.round.table_state)
                try:
                    self.round.play_card(card)
                    break
                except IllegalPlayError as e:
                    logger.info('%s: illegal play: %s', hand.name, e)
                    player.on_illegal_play(e)

            table = self.round.table_state
            self._notify('on_card_played', CardPlayed(
                player_idx=player_idx,
                player_name=hand.name,
                card=card,
                trick=table.trick,
                leading_suit=table.leading_suit,
                are_hearts_broken=table.are_hearts_broken,
            ))
            self._verify()

        trick_no = self.round.trick_no
        trick, winner_idx = self.round.complete_trick()
        self._verify()
        for i, player in enumerate(self.players):
            player.post_trick_callback(trick, i == winner_idx)
        self._notify('on_trick_completed', TrickCompleted(
            trick_no=trick_no,
            trick=tuple(trick),
            winner_idx=winner_idx,
            winner_name=self.hands[winner_idx].name,
            points=points_for_cards(trick),
        ))

    def score_round(self) -> list[int]:
        """
        Adds the scores of the finished round to the scoreboard

        Returns:
            Scores of the round, with the moon shot taken into account
        """
        if not self.round.is_finished:
            raise RuntimeError('The round is not finished and cannot be scored')
        if self._is_round_scored:
            raise RuntimeError('The round has already been scored')

        # points were added trick by trick, only the moon shot can change them here
        for hand, score in zip(self.hands, self.round.scores):
            hand.round_score = score
        scores = [hand.round_score for hand in self.hands]
        self.scoreboard.add_round(scores)
        for hand in self.hands:
            hand.round_score = 0
        self._is_round_scored = True

        logger.info('Round %d scores: %s, totals: %s', self.round.round_no, scores, self.scoreboard.totals)
        for player, score in zip(self.players, scores):
            player.post_round_callback(score)
        self._notify('on_round_scored', RoundScored(
            round_no=self.round.round_no,
            scores=tuple(scores),
            totals=tuple(self.scoreboard.totals),
            moon_shooter_idx=self.round.moon_shooter_idx,
        ))
        return scores

    def play_round(self) -> list[int]:
        """
        Plays a whole round: dealing, passing, 13 tricks and scoring

        Returns:
            Scores of the round
        """
        self.start_round()
        self.pass_cards()
        for _ in range(CARDS_PER_PLAYER_COUNT):
            self.play_trick()
        scores = self.score_round()

        if self.is_game_over:
            self._finish()
        return scores

    def _finish(self) -> None:
        winner_idx = self.scoreboard.winner_idx
        logger.info('Game over after %d rounds. %s wins with %d points',
                    self.round_no, self.hands[winner_idx].name, self.scoreboard.totals[winner_idx])
        self._notify('on_game_over', GameOver(
            totals=tuple(self.scoreboard.totals),
            winner_idx=winner_idx,
            winner_name=self.hands[winner_idx].name,
        ))

    def play(self) -> int:
        """
        Plays rounds until any player reaches the ending score

        Returns:
            Index of the winner, i.e. the player with the lowest total
        """
        while not self.is_game_over:
            self.play_round()
        return self.scoreboard.winner_idx
