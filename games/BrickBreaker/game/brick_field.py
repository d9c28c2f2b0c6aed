"""Brick field - the fixed grid of destructible bricks.

The field is immutable: hiding a brick returns a new field. Bricks are
stored row-major (row 0 left to right, then row 1, ...), which is also
the order collisions are resolved in.
"""

from typing import Iterator, Optional, Tuple

from games.BrickBreaker.config import BrickLayout

from .entities.brick import Brick
from .physics.collision import Rect, check_collision


class BrickField:
    """Ordered, immutable collection of bricks."""

    def __init__(self, bricks: Tuple[Brick, ...]):
        """Initialize field.

        Args:
            bricks: Bricks in row-major order
        """
        self._bricks = tuple(bricks)

    @classmethod
    def from_layout(cls, layout: BrickLayout) -> 'BrickField':
        """Lay out a full grid of visible bricks.

        Args:
            layout: Grid geometry and row colors

        Returns:
            New BrickField with rows * cols visible bricks
        """
        bricks = []
        for row in range(layout.rows):
            color = layout.color_for_row(row)
            for col in range(layout.cols):
                bricks.append(Brick(
                    x=layout.offset_x + col * (layout.brick_width + layout.gap),
                    y=layout.offset_y + row * (layout.brick_height + layout.gap),
                    width=layout.brick_width,
                    height=layout.brick_height,
                    color=color,
                    row=row,
                    col=col,
                ))
        return cls(tuple(bricks))

    @property
    def bricks(self) -> Tuple[Brick, ...]:
        """Get all bricks, visible or not, in row-major order."""
        return self._bricks

    def __len__(self) -> int:
        return len(self._bricks)

    def __iter__(self) -> Iterator[Brick]:
        return iter(self._bricks)

    def __getitem__(self, index: int) -> Brick:
        return self._bricks[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BrickField):
            return NotImplemented
        return self._bricks == other._bricks

    def __hash__(self) -> int:
        return hash(self._bricks)

    def __repr__(self) -> str:
        return f"BrickField(visible={self.visible_count}/{len(self._bricks)})"

    @property
    def visible_bricks(self) -> Tuple[Brick, ...]:
        """Get bricks still in play."""
        return tuple(brick for brick in self._bricks if brick.visible)

    @property
    def visible_count(self) -> int:
        """Count bricks still in play."""
        return sum(1 for brick in self._bricks if brick.visible)

    @property
    def all_destroyed(self) -> bool:
        """True once every brick is hidden."""
        return not any(brick.visible for brick in self._bricks)

    def first_hit(self, rect: Rect) -> Optional[int]:
        """Find the first visible brick overlapping a rectangle.

        Args:
            rect: Rectangle to test, usually the ball's bounding square

        Returns:
            Row-major index of the first hit brick, or None
        """
        for i, brick in enumerate(self._bricks):
            if not brick.visible:
                continue
            if check_collision(rect, brick.rect):
                return i
        return None

    def hide(self, index: int) -> 'BrickField':
        """Return a field with one brick hidden.

        Args:
            index: Row-major index of the brick to hide

        Returns:
            New BrickField
        """
        bricks = list(self._bricks)
        bricks[index] = bricks[index].hide()
        return BrickField(tuple(bricks))
