"""
Score tracking for BrickBreaker.

This module implements the ScoreTracker class which manages scoring
using an immutable state pattern. All score operations return new
instances rather than modifying existing state, and the only operation
is an increase: a session's score never goes down.

Examples:
    >>> tracker = ScoreTracker()
    >>> tracker2 = tracker.record_brick()
    >>> tracker2.points
    10
    >>> tracker.points  # Original unchanged
    0
"""

from typing import Optional

from models import ScoreData

from games.BrickBreaker.config import POINTS_PER_BRICK


class ScoreTracker:
    """Tracks scoring with immutable state pattern.

    Uses the ScoreData Pydantic model for validated, immutable score
    state.

    Attributes:
        _score: Internal ScoreData model (private, immutable)
        _points_per_brick: Fixed increment per destroyed brick
    """

    def __init__(
        self,
        score: Optional[ScoreData] = None,
        points_per_brick: int = POINTS_PER_BRICK,
    ):
        """Initialize score tracker.

        Args:
            score: Initial score data. If None, starts with zeros.
            points_per_brick: Points added per destroyed brick
        """
        if points_per_brick < 0:
            raise ValueError(f'points_per_brick must be non-negative, got {points_per_brick}')
        self._score = score if score is not None else ScoreData()
        self._points_per_brick = points_per_brick

    @property
    def points(self) -> int:
        """Get current points."""
        return self._score.points

    def record_brick(self) -> 'ScoreTracker':
        """Record one destroyed brick.

        Returns:
            New ScoreTracker with points increased by points_per_brick
            and bricks_destroyed increased by 1
        """
        new_score = ScoreData(
            points=self._score.points + self._points_per_brick,
            bricks_destroyed=self._score.bricks_destroyed + 1,
        )
        return ScoreTracker(new_score, self._points_per_brick)

    def get_stats(self) -> ScoreData:
        """Get current score data."""
        return self._score
