"""Collision detection for BrickBreaker.

Everything is an axis-aligned rectangle (x, y, width, height); the ball
is approximated by its bounding square.
"""

from typing import Tuple

Rect = Tuple[float, float, float, float]


def check_collision(rect1: Rect, rect2: Rect) -> bool:
    """Check if two rectangles overlap.

    Comparisons are strict: rectangles that only share an edge or a
    corner do not collide. The test is symmetric in its arguments.

    Args:
        rect1: First rectangle (x, y, width, height)
        rect2: Second rectangle (x, y, width, height)

    Returns:
        True if the rectangles share some area
    """
    x1, y1, w1, h1 = rect1
    x2, y2, w2, h2 = rect2
    return (x1 < x2 + w2 and
            x1 + w1 > x2 and
            y1 < y2 + h2 and
            y1 + h1 > y2)


def hits_side_wall(x: float, radius: float, arena_width: float) -> bool:
    """Check if a ball center at x touches or passes a side wall."""
    return x <= radius or x >= arena_width - radius


def hits_top_wall(y: float, radius: float) -> bool:
    """Check if a ball center at y touches or passes the top wall."""
    return y <= radius


def is_below_arena(y: float, arena_height: float) -> bool:
    """Check if a ball center at y has left the arena through the bottom."""
    return y >= arena_height
