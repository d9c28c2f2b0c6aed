"""
Base Input Source - Abstract interface for input backends.

This is a shared module used by all games.
"""
from abc import ABC, abstractmethod
from typing import List

from arcadekit.games.input.input_event import InputEvent


class InputSource(ABC):
    """Abstract base class for input sources."""

    @abstractmethod
    def poll_events(self) -> List[InputEvent]:
        """Poll for new input events.

        Returns:
            List of InputEvent objects since last poll.
        """
        pass

    @abstractmethod
    def update(self) -> None:
        """Update the input source, collecting events."""
        pass
