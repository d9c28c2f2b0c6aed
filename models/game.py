"""
Generic game data models.

Score and session state shared by the games and their UI layer. All
models are frozen: an update produces a new instance.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from arcadekit.games.game_state import GameStatus


class EventType(str, Enum):
    """Types of pointer input events.

    Attributes:
        MOVE: Pointer moved to a new position
        PRESS: Primary button pressed at a position
    """
    MOVE = "move"
    PRESS = "press"


class ScoreData(BaseModel):
    """Immutable score state for one session.

    Attributes:
        points: Points earned this session (non-negative)
        bricks_destroyed: Bricks destroyed this session (non-negative)

    Examples:
        >>> score = ScoreData(points=30, bricks_destroyed=3)
        >>> ScoreData().points
        0
    """
    points: int = 0
    bricks_destroyed: int = 0

    model_config = ConfigDict(frozen=True)

    @field_validator('points', 'bricks_destroyed')
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """Validate score values are non-negative.

        Raises:
            ValueError: If value is negative
        """
        if v < 0:
            raise ValueError(f'Score values must be non-negative, got {v}')
        return v


class GameState(BaseModel):
    """Authoritative session status: score plus GameStatus.

    Attributes:
        score: Current score data
        status: Current session status

    Examples:
        >>> state = GameState()
        >>> state.status
        <GameStatus.WAITING: 'waiting'>
        >>> state.with_status(GameStatus.PLAYING).status.value
        'playing'
    """
    score: ScoreData = Field(default_factory=ScoreData)
    status: GameStatus = GameStatus.WAITING

    model_config = ConfigDict(frozen=True)

    def with_status(self, status: GameStatus) -> 'GameState':
        """Return a copy with a new status."""
        return self.model_copy(update={'status': status})

    def with_score(self, score: ScoreData) -> 'GameState':
        """Return a copy with a new score."""
        return self.model_copy(update={'score': score})
