"""
This module contains the core classes of the Hearts engine: cards, hands,
the trick and passing rules, scoring, and a single round in the form of
the :class:`HeartsRound` class.
"""

from .card import Card
from .constants import Suit, PassDirection
from .deck import Deck
from .errors import (
    HeartsError, IllegalPlayError, InvalidPassSelectionError, EmptyDeckError, InvariantViolationError,
)
from .hand import Hand
from .round import HeartsRound
from .rules import HeartsRules
from .scoring import Scoreboard
from .table import Table, TableState, TrickState
