"""BrickBreaker physics and collision detection."""

from .collision import (
    check_collision,
    hits_side_wall,
    hits_top_wall,
    is_below_arena,
)

__all__ = [
    'check_collision',
    'hits_side_wall',
    'hits_top_wall',
    'is_below_arena',
]
