"""Brick entity.

Bricks are laid out once per session in a fixed grid. Their geometry
and color never change; a hit only hides them.
"""

from dataclasses import dataclass, replace
from typing import Tuple


@dataclass(frozen=True)
class Brick:
    """A destructible brick.

    Attributes:
        x: Left edge X position
        y: Top edge Y position
        width: Brick width
        height: Brick height
        color: Display color (hex string, opaque to the simulation)
        row: Grid row
        col: Grid column
        visible: False once the brick has been destroyed
    """

    x: float
    y: float
    width: float
    height: float
    color: str
    row: int = 0
    col: int = 0
    visible: bool = True

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Get bounding rectangle (x, y, width, height)."""
        return (self.x, self.y, self.width, self.height)

    @property
    def grid_position(self) -> Tuple[int, int]:
        """Get grid position (row, col)."""
        return (self.row, self.col)

    def hide(self) -> 'Brick':
        """Return the destroyed version of this brick."""
        return replace(self, visible=False)
