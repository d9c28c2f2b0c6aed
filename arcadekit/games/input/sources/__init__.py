"""Input sources for arcade games."""

from arcadekit.games.input.sources.base import InputSource
from arcadekit.games.input.sources.mouse import MouseInputSource

__all__ = ['InputSource', 'MouseInputSource']
