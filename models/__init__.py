"""
Unified models library for the arcade games.

This package provides the Pydantic data models shared across the system:
- Primitives: Basic geometric types (Point2D, Vector2D, Resolution)
- Game: Input event types, score and session state

Usage:
    >>> from models import Point2D, Resolution, GameState
    >>> from models.game import ScoreData
"""

from .primitives import (
    Point2D,
    Vector2D,  # Alias for Point2D
    Resolution,
)

from .game import (
    EventType,
    ScoreData,
    GameState,
)

__all__ = [
    # Primitives
    "Point2D",
    "Vector2D",
    "Resolution",
    # Game
    "EventType",
    "ScoreData",
    "GameState",
]
