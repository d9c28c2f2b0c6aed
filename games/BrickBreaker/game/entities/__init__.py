"""BrickBreaker game entities."""

from .paddle import Paddle, PaddleController
from .ball import Ball
from .brick import Brick

__all__ = [
    'Paddle', 'PaddleController',
    'Ball',
    'Brick',
]
