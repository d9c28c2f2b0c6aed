"""Paddle entity and the controller that moves it.

The paddle follows the pointer: its center goes where the pointer is,
clamped so the paddle never leaves the arena. Pointer events arrive
independently of frames and are applied immediately.
"""

from dataclasses import dataclass, replace
from typing import Tuple


@dataclass(frozen=True)
class Paddle:
    """Immutable paddle rectangle.

    Attributes:
        x: Left edge X position
        y: Top edge Y position
        width: Paddle width
        height: Paddle height
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def center_x(self) -> float:
        """Get paddle center X position."""
        return self.x + self.width / 2

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Get paddle bounding rectangle (x, y, width, height)."""
        return (self.x, self.y, self.width, self.height)


class PaddleController:
    """Applies pointer positions to the paddle, clamped to the arena."""

    def __init__(self, arena_width: float):
        """Initialize controller.

        Args:
            arena_width: Arena width in pixels
        """
        self._arena_width = arena_width

    def clamp_x(self, pointer_x: float, paddle_width: float) -> float:
        """Compute the paddle's left edge for a pointer X.

        Args:
            pointer_x: Pointer X in arena coordinates
            paddle_width: Paddle width

        Returns:
            pointer_x - width / 2 clamped to [0, arena_width - width]
        """
        return max(0.0, min(pointer_x - paddle_width / 2, self._arena_width - paddle_width))

    def track(self, paddle: Paddle, pointer_x: float) -> Paddle:
        """Move paddle under the pointer.

        Args:
            paddle: Current paddle
            pointer_x: Pointer X in arena coordinates

        Returns:
            New Paddle centered on the pointer where the arena allows
        """
        return replace(paddle, x=self.clamp_x(pointer_x, paddle.width))
