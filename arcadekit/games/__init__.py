"""
Arcade game framework.

Provides:
- base_game: BaseGame class that all games inherit from
- game_state: Standard GameStatus enum
- frame_driver: Owned per-frame scheduler
- input: Common pointer input handling
"""

from arcadekit.games.game_state import GameStatus
from arcadekit.games.base_game import BaseGame
from arcadekit.games.frame_driver import FrameDriver

__all__ = [
    'GameStatus',
    'BaseGame',
    'FrameDriver',
]
