from collections import Counter
from collections.abc import Iterable, Sequence

import numpy as np

from ..logging_utils import get_logger
from .card import Card
from .constants import (
    PLAYER_COUNT, CARDS_IN_DECK_COUNT, CARDS_PER_PLAYER_COUNT, MAX_POINTS, PassDirection, Suit,
)
from .deck import Deck
from .errors import IllegalPlayError, InvariantViolationError
from .hand import Hand
from .passing import pass_direction_for_round, exchange_pass_cards
from .rules import HeartsRules
from .table import Table, TableState, TrickState
from .utils import points_for_cards
from .scoring import apply_moon_shot, is_moon_shot

logger = get_logger(__name__)


class HeartsRound:
    """
    A single round of the standard 4-player game of Hearts: dealing, passing
    cards and 13 tricks.

    The round is dealt upon creation. If cards are to be passed in this
    round, every player has to pick their cards with
    :meth:`pick_cards_to_pass` before :meth:`perform_cards_passing` is
    called. After that, cards are played one by one with :meth:`play_card`,
    and every full trick is closed with :meth:`complete_trick`.

    Args:
        hands: Hands of the 4 players, ordered by seat position. They are
            emptied and dealt anew
        round_no: Number of this round, starting from 1. It determines the
            pass direction
        rules: Toggleable rules of the engine (see :class:`HeartsRules`
            for defaults)
        random_state: Random seed for reproducibility
    """

    def __init__(self,
                 hands: Sequence[Hand],
                 round_no: int = 1,
                 rules: HeartsRules = HeartsRules(),
                 random_state: int | np.integer | None = None):

        if len(hands) != PLAYER_COUNT:
            raise ValueError(f'There should be exactly {PLAYER_COUNT} hands')

        rng = np.random.default_rng(random_state)
        self._next_seed = lambda: rng.integers(999999)

        self.rules = rules
        self.round_no = round_no
        self.hands = list(hands)
        self.deck = Deck(random_state=self._next_seed())
        self.table = Table()

        if self.rules.passing_cards:
            self._pass_direction = pass_direction_for_round(round_no)
        else:
            self._pass_direction = PassDirection.NO_PASSING

        self._trick_starting_player_idx = 0
        self.deal()

        self.are_cards_passed = self._pass_direction == PassDirection.NO_PASSING

    @property
    def pass_direction(self) -> PassDirection:
        return self._pass_direction

    @property
    def trick_no(self) -> int:
        return self.table.trick_no

    @property
    def are_hearts_broken(self) -> bool:
        return self.table.are_hearts_broken

    @property
    def leading_suit(self) -> Suit | None:
        return self.table.leading_suit

    @property
    def trick_starting_player_idx(self) -> int | None:
        if not self.are_cards_passed:
            return None
        return self._trick_starting_player_idx

    @property
    def current_player_idx(self) -> int:
        """ID of the player that is expected to throw the next card"""
        return (self._trick_starting_player_idx + len(self.table.played_cards)) % PLAYER_COUNT

    @property
    def current_hand(self) -> Hand:
        return self.hands[self.current_player_idx]

    @property
    def table_state(self) -> TableState:
        return self.table.snapshot(self.rules.no_points_on_first_trick)

    @property
    def is_finished(self) -> bool:
        return self.table.is_round_finished

    @property
    def points_collected(self) -> list[int]:
        """
        The number of points collected by each player in the round.
        Does not take the moon shot into account.
        """
        return [hand.round_points() for hand in self.hands]

    @property
    def is_moon_shot_triggered(self) -> bool:
        """Check if any of the players have shot the moon in this round"""
        return is_moon_shot(self.points_collected)

    @property
    def moon_shooter_idx(self) -> int | None:
        if not self.rules.moon_shot or not self.is_moon_shot_triggered:
            return None
        return self.points_collected.index(MAX_POINTS)

    @property
    def scores(self) -> list[int]:
        """
        The score of each player in the round.
        Takes the moon shot into account.
        """
        return apply_moon_shot(self.points_collected, self.rules.moon_shot).tolist()

    def deal(self) -> None:
        """
        Resets the deck and the table, and deals 13 cards to every player
        """
        self.deck.reset()
        self.table.reset()
        for hand in self.hands:
            hand.reset()
        for _ in range(CARDS_PER_PLAYER_COUNT):
            for hand in self.hands:
                hand.receive_cards([self.deck.deal()])
        self.set_starting_player()

    def set_starting_player(self) -> None:
        """
        Set the starting player to the player with 2 of clubs on hand
        """
        for player_idx, hand in enumerate(self.hands):
            if hand.has_two_of_clubs():
                self._set_turn(player_idx)
                return

    def _set_turn(self, player_idx: int) -> None:
        self._trick_starting_player_idx = player_idx
        for i, hand in enumerate(self.hands):
            hand.turn = i == player_idx

    def __can_perform_card_passing(self) -> bool:
        """
        Returns ``True`` if a passing cards can be performed
        """
        if self.pass_direction == PassDirection.NO_PASSING:
            return False
        return not self.are_cards_passed

    def pick_cards_to_pass(self, player_idx: int, cards: Iterable[Card]) -> None:
        """
        Stages the cards the player is going to pass. They leave the hand now
        but are delivered only in :meth:`perform_cards_passing`

        Raises:
            InvalidPassSelectionError: if the selection is not 3 distinct
                cards from the player's hand
        """
        if not self.__can_perform_card_passing():
            raise RuntimeError('Cards cannot be passed in this round')
        self.hands[player_idx].stage_pass_cards(cards)

    def perform_cards_passing(self) -> None:
        if not self.__can_perform_card_passing():
            return

        exchange_pass_cards(self.hands, self.pass_direction)
        logger.debug('Cards passed %s in round %d', self.pass_direction.name, self.round_no)

        self.are_cards_passed = True
        # just in case 2 of clubs was passed
        self.set_starting_player()

    def get_valid_plays(self) -> list[Card]:
        """Cards which the current player may play now"""
        return self.table_state.valid_plays(self.current_hand.cards)

    def play_card(self, card: Card) -> None:
        """
        Play a card in the current trick as the current player

        Raises:
            IllegalPlayError: if the player does not hold the card or is
                not allowed to play it now
        """
        if not self.are_cards_passed:
            raise RuntimeError('Cannot play any cards before cards are passed.')
        if self.is_finished:
            raise RuntimeError('The round has ended. The trick cannot be played')
        if self.table.state == TrickState.COMPLETE:
            raise RuntimeError('Cannot play card because the trick is full. '
                               'Complete the trick before playing the next card')

        hand = self.current_hand
        if not isinstance(card, Card):
            raise IllegalPlayError(f'Expected a card, got {card!r}')
        if card not in hand.cards:
            raise IllegalPlayError(f'{hand.name} does not hold {card}')
        valid_plays = self.get_valid_plays()
        if card not in valid_plays:
            raise IllegalPlayError(f'{card} cannot be played now. Valid plays: '
                                   f'{", ".join(str(c) for c in valid_plays)}')

        player_idx = self.current_player_idx
        self.table.play(player_idx, card)
        hand.play_card(card)
        self._set_turn_only((player_idx + 1) % PLAYER_COUNT)
        logger.debug('%s plays %s', hand.name, card)

    def _set_turn_only(self, player_idx: int) -> None:
        for i, hand in enumerate(self.hands):
            hand.turn = i == player_idx

    def complete_trick(self) -> tuple[list[Card], int]:
        """
        Complete the current trick and prepare for the next one.
        The winner collects the cards and starts the next trick.

        Returns:
            A tuple of two elements, the first one is the trick content in
            the order the cards were played, and the second is the index of
            a player who took the trick.
        """
        trick, winner_idx = self.table.complete()
        winner = self.hands[winner_idx]
        winner.collect_trick(trick)
        winner.round_score += points_for_cards(trick)
        self._set_turn(winner_idx)
        if self.is_finished:
            self._set_turn_only(-1)
        logger.info('%s takes the trick %s', self.hands[winner_idx].name, ', '.join(str(c) for c in trick))
        return trick, winner_idx

    def check_card_conservation(self) -> None:
        """
        Raises:
            InvariantViolationError: if the cards in hands, pass buffers,
                on the table and in collected piles are not exactly one
                full deck
        """
        all_cards = list(self.table.played_cards)
        for hand in self.hands:
            all_cards.extend(hand.cards)
            all_cards.extend(hand.pass_cards)
            all_cards.extend(hand.collected_cards)

        duplicates = [card for card, count in Counter(all_cards).items() if count > 1]
        if duplicates:
            raise InvariantViolationError(f'Duplicated cards: {duplicates}')
        if len(all_cards) != CARDS_IN_DECK_COUNT:
            raise InvariantViolationError(
                f'There should be {CARDS_IN_DECK_COUNT} cards in play, found {len(all_cards)}')

    def next(self) -> 'HeartsRound':
        """
        Get the next round object, with the same hands and rules.
        """
        return HeartsRound(
            hands=self.hands,
            round_no=self.round_no + 1,
            rules=self.rules,
            random_state=self._next_seed(),
        )
