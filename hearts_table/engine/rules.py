from dataclasses import dataclass

from .constants import ENDING_SCORE


@dataclass(frozen=True)
class HeartsRules:
    """
    Args:
        moon_shot: Determines whether shooting the moon is enabled
        passing_cards: Determines whether passing cards is enabled
        no_points_on_first_trick: Determines whether a player who cannot
            follow suit in the first trick is forbidden from discarding
            hearts or the queen of spades (unless they hold nothing else)
        ending_score: The game ends after the round in which any player's
            total reaches this score
    """
    moon_shot: bool = True
    passing_cards: bool = True
    no_points_on_first_trick: bool = False
    ending_score: int = ENDING_SCORE
