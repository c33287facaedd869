from collections.abc import Iterable

from .card import Card
from .constants import CARDS_TO_PASS_COUNT, PassDirection
from .errors import InvalidPassSelectionError
from .passing import seat_in_direction
from .utils import is_heart, is_q_spades, is_starting_card, points_for_cards, sorted_cards


class Hand:
    """
    Cards of a single player at the table

    Args:
        name: Name of the player
        position: Seat position, from 1 to 4 (clockwise)
    """

    def __init__(self, name: str, position: int):
        self.name = name
        self.position = position
        self.cards: set[Card] = set()
        self.collected_cards: list[Card] = []
        self.pass_cards: list[Card] = []
        self.round_score = 0
        self.turn = False

    def __repr__(self) -> str:
        return f'Hand({self.name!r}, position={self.position}, cards={self.sorted_cards})'

    @property
    def sorted_cards(self) -> list[Card]:
        return sorted_cards(self.cards)

    def reset(self) -> None:
        """Empties the hand before a new round"""
        self.cards = set()
        self.collected_cards = []
        self.pass_cards = []
        self.round_score = 0
        self.turn = False

    def receive_cards(self, cards: Iterable[Card]) -> None:
        self.cards.update(cards)

    def play_card(self, card: Card) -> None:
        if card not in self.cards:
            raise ValueError(f'{self.name} does not hold {card}')
        self.cards.remove(card)

    def stage_pass_cards(self, cards: Iterable[Card]) -> None:
        """
        Moves the cards selected for passing from the hand to the pass buffer

        Raises:
            InvalidPassSelectionError: if the selection is not exactly 3
                distinct cards from this hand
        """
        try:
            cards = list(cards)
        except TypeError:
            raise InvalidPassSelectionError(f'Cards to pass should be a list of cards, got {cards!r}') from None
        if any(not isinstance(card, Card) for card in cards):
            raise InvalidPassSelectionError(f'Only cards can be passed, got {cards!r}')
        if len(cards) != CARDS_TO_PASS_COUNT:
            raise InvalidPassSelectionError(
                f'Exactly {CARDS_TO_PASS_COUNT} cards should be passed, got {len(cards)}')
        if len(set(cards)) != len(cards):
            raise InvalidPassSelectionError('Cards selected to pass should be unique')
        not_held = [card for card in cards if card not in self.cards]
        if not_held:
            raise InvalidPassSelectionError(f'{self.name} does not hold {not_held}')
        if self.pass_cards:
            raise InvalidPassSelectionError(f'{self.name} has already selected cards to pass')

        self.cards.difference_update(cards)
        self.pass_cards = cards

    def take_pass_cards(self) -> list[Card]:
        cards, self.pass_cards = self.pass_cards, []
        return cards

    def receive_passed_cards(self, cards: Iterable[Card]) -> None:
        cards = list(cards)
        if len(cards) != CARDS_TO_PASS_COUNT:
            raise ValueError(f'Exactly {CARDS_TO_PASS_COUNT} cards should be received, got {len(cards)}')
        self.cards.update(cards)

    def collect_trick(self, cards: Iterable[Card]) -> None:
        self.collected_cards.extend(cards)

    def has_two_of_clubs(self) -> bool:
        return any(is_starting_card(card) for card in self.cards)

    def round_points(self) -> int:
        """
        Points collected in this round. Does not take the moon shot into account.
        """
        return points_for_cards(self.collected_cards)

    @property
    def hearts_collected(self) -> int:
        return sum(1 for card in self.collected_cards if is_heart(card))

    @property
    def has_q_spades_collected(self) -> bool:
        return any(is_q_spades(card) for card in self.collected_cards)

    def left_of(self) -> int:
        return seat_in_direction(self.position, PassDirection.LEFT)

    def right_of(self) -> int:
        return seat_in_direction(self.position, PassDirection.RIGHT)

    def across_of(self) -> int:
        return seat_in_direction(self.position, PassDirection.ACROSS)
