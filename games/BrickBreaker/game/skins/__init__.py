"""BrickBreaker skins for rendering."""

from .base import BrickBreakerSkin
from .geometric import GeometricSkin

__all__ = [
    'BrickBreakerSkin',
    'GeometricSkin',
]
