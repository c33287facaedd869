class HeartsError(Exception):
    """Base class for all errors raised by the engine"""


class IllegalPlayError(HeartsError):
    """
    A card cannot be played in the current state of the trick.
    The game asks the player for another card.
    """


class InvalidPassSelectionError(HeartsError):
    """
    Cards selected to pass are not exactly 3 distinct cards from the hand.
    The game asks the player for another selection.
    """


class EmptyDeckError(HeartsError):
    """Dealing from an empty deck. This means a bug in dealing."""


class InvariantViolationError(HeartsError):
    """Cards on the table do not add up to a single full deck"""
