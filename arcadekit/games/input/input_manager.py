"""
Input Manager - Collects input from the active source.

This is a shared module used by all games.
"""
from typing import List, Optional

from arcadekit.games.input.input_event import InputEvent
from arcadekit.games.input.sources.base import InputSource


class InputManager:
    """Polls one input source and hands its events to the game loop."""

    def __init__(self, source: Optional[InputSource] = None):
        """Initialize with an optional input source."""
        self._source = source

    def update(self) -> None:
        """Update the active input source."""
        if self._source is not None:
            self._source.update()

    def get_events(self) -> List[InputEvent]:
        """Get collected events since last update."""
        if self._source is None:
            return []
        return self._source.poll_events()
