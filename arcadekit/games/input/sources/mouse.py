"""
Mouse Input Source - Pointer input from the pygame event queue.

This is a shared module used by all games.
"""
import time
from typing import List, Tuple

import pygame

from models import Vector2D, EventType
from arcadekit.games.input.input_event import InputEvent
from arcadekit.games.input.sources.base import InputSource


class MouseInputSource(InputSource):
    """Converts pygame mouse motion and left clicks into InputEvents.

    Window coordinates are translated into arena coordinates by
    subtracting the arena's origin on the window. Non-mouse events are
    re-posted to the pygame event queue for the main loop.
    """

    def __init__(self, origin: Tuple[float, float] = (0.0, 0.0)):
        """Initialize the mouse input source.

        Args:
            origin: Top-left corner of the arena in window coordinates
        """
        self._origin = origin
        self._event_queue: List[InputEvent] = []

    def to_arena(self, pos: Tuple[int, int]) -> Vector2D:
        """Translate a window position into arena coordinates."""
        return Vector2D(x=float(pos[0]) - self._origin[0], y=float(pos[1]) - self._origin[1])

    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self) -> None:
        """Process pygame events and collect pointer motion and clicks."""
        passthrough = []
        for event in pygame.event.get():
            if event.type == pygame.MOUSEMOTION:
                self._event_queue.append(InputEvent(
                    position=self.to_arena(event.pos),
                    timestamp=time.monotonic(),
                    event_type=EventType.MOVE,
                ))
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._event_queue.append(InputEvent(
                    position=self.to_arena(event.pos),
                    timestamp=time.monotonic(),
                    event_type=EventType.PRESS,
                ))
            elif event.type not in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
                passthrough.append(event)

        # Re-post after draining so the loop above cannot see them again
        for event in passthrough:
            pygame.event.post(event)

    def clear(self) -> None:
        """Clear the event queue."""
        self._event_queue.clear()
