"""
Shared primitive data types.

This module provides the basic geometric types used by the platform and
the games: pointer positions and arena dimensions.
"""

from pydantic import BaseModel, Field, computed_field, ConfigDict


class Point2D(BaseModel):
    """Immutable 2D point/vector for positions and offsets.

    Coordinates can be positive, negative, or zero; a pointer dragged
    outside the arena produces coordinates outside [0, width].

    Attributes:
        x: X coordinate (horizontal)
        y: Y coordinate (vertical)

    Examples:
        >>> pos = Point2D(x=100.0, y=200.0)
        >>> outside = Point2D(x=-50.0, y=25.0)  # Left of the arena
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)  # Immutable

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


Vector2D = Point2D


class Resolution(BaseModel):
    """Arena or display size in pixels.

    Attributes:
        width: Width in pixels (must be positive)
        height: Height in pixels (must be positive)

    Examples:
        >>> arena = Resolution(width=1200, height=750)
        >>> arena.aspect_ratio
        1.6
    """
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    @computed_field
    @property
    def aspect_ratio(self) -> float:
        """Calculate aspect ratio (width / height)."""
        return self.width / self.height

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Resolution({self.width}x{self.height})"
