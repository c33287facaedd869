import unittest
from unittest.mock import MagicMock, patch

import numpy as np

from hearts_table.engine import (
    Card, HeartsRules, PassDirection, TableState, HeartsError, IllegalPlayError, InvalidPassSelectionError,
)
from hearts_table.engine.utils import points_for_card
from hearts_table.game import HeartsGame, GameObserver
from hearts_table.game.events import GameOver, RoundScored
from hearts_table.game.players import RandomPlayer


def get_game_with_random_players(rules: HeartsRules = HeartsRules(moon_shot=False),
                                 observers=(),
                                 players=None) -> HeartsGame:
    if players is None:
        players = [
            RandomPlayer(random_state=1),
            RandomPlayer(random_state=2),
            RandomPlayer(random_state=3),
            RandomPlayer(random_state=4),
        ]
    game = HeartsGame(
        players,
        rules=rules,
        observers=observers,
        random_state=5,
        check_invariants=True,
    )
    return game


class OnceWrongPlayer(RandomPlayer):
    """Answers with a card it does not hold, and with too few cards to pass, once each"""

    def __init__(self, random_state: int | None = None):
        super().__init__(random_state)
        self.wrong_play_pending = True
        self.wrong_pass_pending = True
        self.errors: list[HeartsError] = []

    def play_card(self, hand: list[Card], table: TableState) -> Card:
        if self.wrong_play_pending:
            self.wrong_play_pending = False
            return next(Card(i) for i in range(52) if Card(i) not in hand)
        return super().play_card(hand, table)

    def select_cards_to_pass(self, hand: list[Card], direction: PassDirection) -> list[Card]:
        if self.wrong_pass_pending:
            self.wrong_pass_pending = False
            return hand[:2]
        return super().select_cards_to_pass(hand, direction)

    def on_illegal_play(self, error: HeartsError) -> None:
        self.errors.append(error)


class MalformedAnswerPlayer(RandomPlayer):
    """Answers once with None instead of cards to pass, and once with a list instead of a card"""

    def __init__(self, random_state: int | None = None):
        super().__init__(random_state)
        self.malformed_play_pending = True
        self.malformed_pass_pending = True
        self.errors: list[HeartsError] = []

    def play_card(self, hand: list[Card], table: TableState) -> Card:
        if self.malformed_play_pending:
            self.malformed_play_pending = False
            return [hand[0]]  # type: ignore
        return super().play_card(hand, table)

    def select_cards_to_pass(self, hand: list[Card], direction: PassDirection) -> list[Card]:
        if self.malformed_pass_pending:
            self.malformed_pass_pending = False
            return None  # type: ignore
        return super().select_cards_to_pass(hand, direction)

    def on_illegal_play(self, error: HeartsError) -> None:
        self.errors.append(error)


class PointsDumpingPlayer(RandomPlayer):
    """Tries to throw a points card into the first trick whenever it cannot follow suit"""

    def __init__(self, random_state: int | None = None):
        super().__init__(random_state)
        self.first_trick_hand: list[Card] | None = None
        self.rejected = False

    def play_card(self, hand: list[Card], table: TableState) -> Card:
        if not table.is_first_trick:
            return super().play_card(hand, table)
        if self.first_trick_hand is None:
            self.first_trick_hand = hand
        points_cards = [card for card in hand if points_for_card(card) > 0]
        can_follow = any(card.suit == table.leading_suit for card in hand)
        if not table.is_leading and not can_follow and points_cards and not self.rejected:
            return points_cards[0]
        return super().play_card(hand, table)

    def on_illegal_play(self, error: HeartsError) -> None:
        self.rejected = True


class TestHeartsGame(unittest.TestCase):
    def test_play_round(self):
        # arrange
        game = get_game_with_random_players()
        # act
        scores = game.play_round()
        # assert
        self.assertEqual(26, np.sum(scores), 'Sum of all points should be equal to 26')
        self.assertEqual(26, np.sum(game.scoreboard.totals), 'Scoreboard should be updated')
        self.assertEqual([0] * 4, [len(hand.cards) for hand in game.hands],
                         'All players should have empty hands')
        self.assertEqual(52, sum(len(hand.collected_cards) for hand in game.hands),
                         'There should be 52 cards across all tricks taken')
        self.assertEqual([0] * 4, [hand.round_score for hand in game.hands])

    def test_round_with_moon_shot_enabled(self):
        game = get_game_with_random_players(rules=HeartsRules())
        scores = game.play_round()
        points = game.round.points_collected
        if game.round.moon_shooter_idx is None:
            self.assertEqual(points, scores)
            self.assertEqual(26, sum(scores))
        else:
            self.assertEqual(26, points[game.round.moon_shooter_idx])
            self.assertEqual(0, scores[game.round.moon_shooter_idx])
            self.assertEqual([0, 26, 26, 26], sorted(scores))
        self.assertEqual(scores, game.scoreboard.totals)

    def test_passing_cards_changes(self):
        game = get_game_with_random_players(rules=HeartsRules(moon_shot=False, ending_score=1000))
        expected = [
            PassDirection.ACROSS,
            PassDirection.LEFT,
            PassDirection.RIGHT,
            PassDirection.NO_PASSING,
            PassDirection.ACROSS,
        ]
        for pass_direction in expected:
            game.play_round()
            self.assertEqual(pass_direction, game.round.pass_direction)

    def test_play_until_game_over(self):
        # arrange
        game = get_game_with_random_players()
        # act
        winner_idx = game.play()
        # assert
        totals = game.scoreboard.totals
        self.assertTrue(game.is_game_over)
        self.assertGreaterEqual(max(totals), 100)
        self.assertEqual(min(totals), totals[winner_idx], 'The lowest total wins')
        previous_totals = np.cumsum(game.scoreboard.rounds, axis=0)[:-1]
        self.assertTrue(np.all(previous_totals < 100), 'The game should end as soon as 100 is reached')
        with self.assertRaises(RuntimeError):
            game.play_round()

    def test_reset(self):
        game = get_game_with_random_players()
        game.play()
        game.reset()
        self.assertFalse(game.is_game_over)
        self.assertEqual(0, game.scoreboard.rounds_played)
        game.play_round()
        self.assertEqual(1, game.round_no)

    def test_illegal_answers_are_requested_again(self):
        # arrange
        wrong_player = OnceWrongPlayer(random_state=1)
        players = [wrong_player] + [RandomPlayer(random_state=i) for i in range(2, 5)]
        game = get_game_with_random_players(players=players)
        # act
        game.play_round()
        # assert
        self.assertEqual(2, len(wrong_player.errors))
        self.assertIsInstance(wrong_player.errors[0], InvalidPassSelectionError)
        self.assertIsInstance(wrong_player.errors[1], IllegalPlayError)
        self.assertEqual(52, sum(len(hand.collected_cards) for hand in game.hands))

    def test_score_round_twice(self):
        game = get_game_with_random_players()
        game.play_round()
        with self.assertRaises(RuntimeError):
            game.score_round()

    def test_observers_notified(self):
        # arrange
        observer = MagicMock(spec=GameObserver)
        game = get_game_with_random_players(observers=[observer])
        # act
        game.play_round()
        # assert
        self.assertEqual(1, observer.on_round_started.call_count)
        self.assertEqual(1, observer.on_cards_passed.call_count)
        self.assertEqual(52, observer.on_card_played.call_count)
        self.assertEqual(13, observer.on_trick_completed.call_count)
        self.assertEqual(1, observer.on_round_scored.call_count)
        observer.on_game_over.assert_not_called()

        round_scored: RoundScored = observer.on_round_scored.call_args.args[0]
        self.assertEqual(tuple(game.scoreboard.totals), round_scored.totals)
        self.assertEqual(1, round_scored.round_no)

        first_card = observer.on_card_played.call_args_list[0].args[0]
        self.assertEqual('2♣', str(first_card.card))
        self.assertEqual((first_card.card,), first_card.trick)

    def test_game_over_notified(self):
        observer = MagicMock(spec=GameObserver)
        game = get_game_with_random_players(observers=[observer])
        winner_idx = game.play()
        observer.on_game_over.assert_called_once()
        event: GameOver = observer.on_game_over.call_args.args[0]
        self.assertEqual(winner_idx, event.winner_idx)
        self.assertEqual(game.names[winner_idx], event.winner_name)
        self.assertEqual(tuple(game.scoreboard.totals), event.totals)

    def test_post_trick_callbacks_called(self):
        with patch.object(RandomPlayer, 'post_trick_callback') as mocked_callback:
            # arrange
            game = get_game_with_random_players()
            # act
            game.play_round()
            # assert
            self.assertEqual(4 * 13, len(mocked_callback.mock_calls))

    def test_post_round_callbacks_called(self):
        with patch.object(RandomPlayer, 'post_round_callback') as mocked_callback:
            # arrange
            game = get_game_with_random_players()
            # act
            game.play_round()
            # assert
            self.assertEqual(4, len(mocked_callback.mock_calls))

    def test_wrong_number_of_players(self):
        with self.assertRaises(ValueError):
            HeartsGame([RandomPlayer()] * 3)
        with self.assertRaises(ValueError):
            HeartsGame([RandomPlayer()] * 4, names=['A', 'B'])

    def test_no_points_on_first_trick(self):
        # arrange
        players = [PointsDumpingPlayer(random_state=i) for i in range(1, 5)]
        observer = MagicMock(spec=GameObserver)
        game = get_game_with_random_players(
            rules=HeartsRules(moon_shot=False, no_points_on_first_trick=True, ending_score=1000),
            observers=[observer],
            players=players,
        )
        # act
        for _ in range(4):
            observer.reset_mock()
            for player in players:
                player.first_trick_hand = None
                player.rejected = False
            game.play_round()
            # assert
            first_trick = [call.args[0] for call in observer.on_card_played.call_args_list[:4]]
            leading_suit = first_trick[0].card.suit
            for event in first_trick[1:]:
                if points_for_card(event.card) == 0:
                    continue
                hand = players[event.player_idx].first_trick_hand
                self.assertFalse(any(card.suit == leading_suit for card in hand))
                self.assertTrue(all(points_for_card(card) > 0 for card in hand),
                                f'{event.card} should only be discarded from a hand of points cards')

    def test_points_discarded_on_first_trick_by_default(self):
        players = [PointsDumpingPlayer(random_state=i) for i in range(1, 5)]
        game = get_game_with_random_players(players=players)
        game.play_round()
        self.assertFalse(any(player.rejected for player in players),
                         'Points cards can be discarded on the first trick by default')

    def test_malformed_answers_are_requested_again(self):
        # arrange
        malformed_player = MalformedAnswerPlayer(random_state=1)
        players = [malformed_player] + [RandomPlayer(random_state=i) for i in range(2, 5)]
        game = get_game_with_random_players(players=players)
        # act
        game.play_round()
        # assert
        self.assertEqual(2, len(malformed_player.errors))
        self.assertIsInstance(malformed_player.errors[0], InvalidPassSelectionError)
        self.assertIsInstance(malformed_player.errors[1], IllegalPlayError)
        self.assertEqual(52, sum(len(hand.collected_cards) for hand in game.hands))

    def test_round_score_collected_trick_by_trick(self):
        # arrange
        game = get_game_with_random_players()
        game.start_round()
        game.pass_cards()
        # act & assert
        for _ in range(13):
            game.play_trick()
            self.assertEqual([hand.round_points() for hand in game.hands],
                             [hand.round_score for hand in game.hands])
        scores = game.score_round()
        self.assertEqual(game.round.points_collected, scores)
        self.assertEqual([0] * 4, [hand.round_score for hand in game.hands],
                         'Round scores should be reset once added to the totals')
