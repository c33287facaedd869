from hearts_table.engine import Card, PassDirection, TableState, HeartsError
from hearts_table.engine.constants import CARDS_TO_PASS_COUNT
from hearts_table.engine.utils import points_for_cards
from .base import BasePlayer


class InputPlayer(BasePlayer):
    """
    A player with console input. Cards are chosen either by their number
    in the printed hand or by their name (e.g. ``10h``, ``Qs``)
    """

    @staticmethod
    def pretty_print_hand(hand: list[Card], valid_cards: list[Card] | None = None) -> None:
        if valid_cards is None:
            valid_cards = hand

        numbers_row = ' | '.join(
            f'{i + 1:^3}' if card in valid_cards else ' ' * 3
            for i, card in enumerate(hand)
        )
        cards_row = ' | '.join(f'{str(card):^3}' for card in hand)

        print(numbers_row)
        print(cards_row)

    @staticmethod
    def _parse_choice(choice: str, hand: list[Card]) -> Card:
        """
        Raises:
            ValueError: if the choice is neither a card nor its number
        """
        choice = choice.strip()
        if choice.isdigit():
            idx = int(choice) - 1
            if not 0 <= idx < len(hand):
                raise ValueError(f'Choice out of range: {choice}')
            return hand[idx]
        return Card.from_str(choice)

    def play_card(self, hand: list[Card], table: TableState) -> Card:
        print()

        if table.is_leading:
            print('You are leading the trick')
        else:
            print(f'Current trick: {", ".join(str(card) for card in table.trick)}')

        print('Your hand:')
        self.pretty_print_hand(hand, table.valid_plays(hand))

        while True:
            try:
                return self._parse_choice(input(f'Choose a card (1-{len(hand)} or e.g. Qs): '), hand)
            except ValueError as e:
                print(f'{e}. Please try again.')

    def select_cards_to_pass(self, hand: list[Card], direction: PassDirection) -> list[Card]:
        print()

        if direction == PassDirection.LEFT:
            print('Passing cards to the left.')
        if direction == PassDirection.RIGHT:
            print('Passing cards to the right.')
        if direction == PassDirection.ACROSS:
            print('Passing cards across.')
        print('Your hand:')
        self.pretty_print_hand(hand)

        while True:
            input_raw = input(f'Select {CARDS_TO_PASS_COUNT} cards (1-{len(hand)}), '
                              'separated by commas (e.g. 1,3,6): ')
            try:
                return [self._parse_choice(choice, hand) for choice in input_raw.split(',')]
            except ValueError as e:
                print(f'{e}. Please try again.')

    def on_illegal_play(self, error: HeartsError) -> None:
        print(f'{error}. Please try again.')

    def post_trick_callback(self, trick: list[Card], is_trick_taken: bool) -> None:
        print(f'Trick outcome: {", ".join(str(card) for card in trick)} '
              f'({points_for_cards(trick)} pts)')
        if is_trick_taken:
            print('You take this trick.')

    def post_round_callback(self, score: int) -> None:
        print('=====')
        print(f'Round finished. Your score: {score}')
        print('=====')
