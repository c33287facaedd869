from collections.abc import Sequence

import numpy as np

from .constants import MAX_POINTS, PLAYER_COUNT, ENDING_SCORE


def is_moon_shot(points: Sequence[int] | np.ndarray) -> bool:
    """Check if any of the players have collected all 26 points"""
    return MAX_POINTS in list(points)


def apply_moon_shot(points: Sequence[int] | np.ndarray, moon_shot: bool = True) -> np.ndarray:
    """
    Args:
        points: Points collected in the round by each player
        moon_shot: Whether shooting the moon is enabled

    Returns:
        The score of each player in the round. If someone shot the moon,
        they score 0 and everyone else scores 26.
    """
    points = np.asarray(points, dtype=np.int64)
    if moon_shot and is_moon_shot(points):
        return MAX_POINTS - points
    return points


class Scoreboard:
    """
    Scores of every round played so far and the running totals

    Args:
        ending_score: The game is over once any total reaches this value
    """

    def __init__(self, ending_score: int = ENDING_SCORE):
        self.ending_score = ending_score
        self._rounds = np.zeros((0, PLAYER_COUNT), dtype=np.int64)

    @property
    def rounds(self) -> list[list[int]]:
        return self._rounds.tolist()

    @property
    def totals(self) -> list[int]:
        return self._rounds.sum(axis=0).tolist()

    @property
    def rounds_played(self) -> int:
        return len(self._rounds)

    def add_round(self, scores: Sequence[int] | np.ndarray) -> None:
        scores = np.asarray(scores, dtype=np.int64)
        if scores.shape != (PLAYER_COUNT,):
            raise ValueError(f'There should be exactly {PLAYER_COUNT} scores, got {scores.tolist()}')
        self._rounds = np.vstack([self._rounds, scores])

    @property
    def is_game_over(self) -> bool:
        return bool(np.any(np.array(self.totals) >= self.ending_score))

    @property
    def winner_idx(self) -> int:
        """
        Index of the player with the lowest total.
        On ties, the player with the lowest index.
        """
        return int(np.argmin(self.totals))

    def reset(self) -> None:
        self._rounds = np.zeros((0, PLAYER_COUNT), dtype=np.int64)
