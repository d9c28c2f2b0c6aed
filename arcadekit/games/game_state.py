"""Common GameStatus enum for arcade games.

All games report one of these values via their `state` property, which
keeps the UI layer (status overlays, buttons) independent of any single
game's internals.
"""
from enum import Enum


class GameStatus(str, Enum):
    """Standard session statuses.

    States:
        WAITING: Session laid out, waiting for an explicit start command
        PLAYING: Active gameplay in progress; the frame driver is running
        GAME_OVER: Session ended in loss (terminal until reset)
        WON: Session ended in success (terminal until reset)

    Usage in game_mode.py:
        from arcadekit.games import GameStatus

        class MyGameMode(BaseGame):
            def _get_internal_state(self) -> GameStatus:
                return self._game_state.status
    """
    WAITING = "waiting"
    PLAYING = "playing"
    GAME_OVER = "game_over"
    WON = "won"

    @property
    def is_terminal(self) -> bool:
        """True for statuses that only a reset can leave."""
        return self in (GameStatus.GAME_OVER, GameStatus.WON)
