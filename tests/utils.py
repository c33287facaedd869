"""
Utilities for tests
"""
from hearts_table.engine import Card, Hand, Suit


def c(card_str: str) -> Card:
    """
    A quick way to parse a Card object from a string e.g. "10♥"
    """
    return Card.from_str(card_str)


def cl(cards_str: list[str]) -> list[Card]:
    """
    A quick way to parse a list of Card object from a string e.g. ["10♥", "Q♣"]
    """
    return [c(s) for s in cards_str]


def suit_cards(suit: Suit) -> set[Card]:
    return {Card(i) for i in range(52) if Card(i).suit == suit}


def make_hands() -> list[Hand]:
    return [Hand(f'Player {i}', i) for i in range(1, 5)]
