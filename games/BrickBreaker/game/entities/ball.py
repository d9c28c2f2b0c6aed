"""Ball entity with per-frame velocity.

The ball moves by (dx, dy) pixels every frame and bounces off walls,
the paddle and bricks. Ball angle after a paddle hit depends on where
it hits the paddle.
"""

from dataclasses import dataclass, replace
from typing import Tuple


@dataclass(frozen=True)
class Ball:
    """Immutable ball; every operation returns a new Ball.

    Attributes:
        x: Center X position
        y: Center Y position
        dx: X velocity (pixels/frame)
        dy: Y velocity (pixels/frame)
        radius: Ball radius, constant for the whole session
    """

    x: float
    y: float
    dx: float
    dy: float
    radius: float

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """Get the bounding square (x, y, width, height) centered on the ball."""
        return (
            self.x - self.radius,
            self.y - self.radius,
            self.radius * 2,
            self.radius * 2,
        )

    def move(self) -> 'Ball':
        """Advance position by one frame of velocity.

        Returns:
            New Ball with updated position
        """
        return replace(self, x=self.x + self.dx, y=self.y + self.dy)

    def bounce_horizontal(self) -> 'Ball':
        """Bounce off vertical surface (reverse X velocity)."""
        return replace(self, dx=-self.dx)

    def bounce_vertical(self) -> 'Ball':
        """Bounce off horizontal surface (reverse Y velocity)."""
        return replace(self, dy=-self.dy)

    def bounce_off_paddle(
        self,
        paddle_x: float,
        paddle_width: float,
        deflection: float,
    ) -> 'Ball':
        """Bounce off paddle with angle based on hit position.

        hit_pos runs from 0 at the paddle's left edge to 1 at its right
        edge. A center hit goes straight up; edge hits leave with
        dx = -deflection / 2 or +deflection / 2. The ball always leaves
        moving up, whatever direction it arrived from.

        Args:
            paddle_x: Paddle left edge X position
            paddle_width: Paddle width
            deflection: Horizontal speed range across the paddle

        Returns:
            New Ball with new velocity based on paddle hit position
        """
        hit_pos = (self.x - paddle_x) / paddle_width
        return replace(
            self,
            dx=(hit_pos - 0.5) * deflection,
            dy=-abs(self.dy),
        )
