"""Session status transitions for BrickBreaker.

    WAITING --START--> PLAYING --BALL_LOST-----> GAME_OVER --RESET--> WAITING
                               --FIELD_CLEARED-> WON       --RESET--> WAITING

Nothing else is legal. Illegal commands are ignored by the caller, not
raised.
"""

from enum import Enum
from typing import Dict, Optional, Tuple

from arcadekit.games import GameStatus


class SessionEvent(Enum):
    """Things that can move a session between statuses."""
    START = "start"
    BALL_LOST = "ball_lost"
    FIELD_CLEARED = "field_cleared"
    RESET = "reset"


TRANSITIONS: Dict[Tuple[GameStatus, SessionEvent], GameStatus] = {
    (GameStatus.WAITING, SessionEvent.START): GameStatus.PLAYING,
    (GameStatus.PLAYING, SessionEvent.BALL_LOST): GameStatus.GAME_OVER,
    (GameStatus.PLAYING, SessionEvent.FIELD_CLEARED): GameStatus.WON,
    (GameStatus.GAME_OVER, SessionEvent.RESET): GameStatus.WAITING,
    (GameStatus.WON, SessionEvent.RESET): GameStatus.WAITING,
}


def next_status(status: GameStatus, event: SessionEvent) -> Optional[GameStatus]:
    """Look up the status an event leads to.

    Args:
        status: Current status
        event: Event being applied

    Returns:
        The new status, or None if the transition is illegal
    """
    return TRANSITIONS.get((status, event))


def can_apply(status: GameStatus, event: SessionEvent) -> bool:
    """Check if an event is legal in a status."""
    return (status, event) in TRANSITIONS
