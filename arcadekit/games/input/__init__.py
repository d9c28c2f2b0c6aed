"""
Input abstraction layer for arcade games.

Provides unified pointer handling independent of the input backend.
"""

from arcadekit.games.input.input_event import InputEvent
from arcadekit.games.input.input_manager import InputManager
from arcadekit.games.input.sources import InputSource, MouseInputSource

__all__ = ['InputEvent', 'InputManager', 'InputSource', 'MouseInputSource']
