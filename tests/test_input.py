"""
Input Tests

Tests input events, the input manager and the mouse source.

Run with: pytest tests/test_input.py -v
"""

import os

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')

import pygame
import pytest

from arcadekit.games.input import InputEvent, InputManager, InputSource, MouseInputSource
from models import EventType, Vector2D


class FakeSource(InputSource):
    """Input source fed directly by the test."""

    def __init__(self):
        self.pending = []
        self.updates = 0

    def poll_events(self):
        events, self.pending = self.pending, []
        return events

    def update(self):
        self.updates += 1


def make_event(x=10.0, y=20.0, event_type=EventType.MOVE):
    return InputEvent(position=Vector2D(x=x, y=y), timestamp=1.5, event_type=event_type)


class TestInputEvent:
    """Test the event value type."""

    def test_default_type_is_move(self):
        assert make_event().event_type == EventType.MOVE

    def test_negative_timestamp_rejected(self):
        with pytest.raises(ValueError):
            InputEvent(position=Vector2D(x=0.0, y=0.0), timestamp=-1.0)

    def test_str(self):
        assert str(make_event(event_type=EventType.PRESS)) == "InputEvent(pos=(10.00, 20.00), t=1.500, type=press)"


class TestInputManager:
    """Test event collection."""

    def test_no_source(self):
        manager = InputManager()
        manager.update()
        assert manager.get_events() == []

    def test_collects_from_source(self):
        source = FakeSource()
        manager = InputManager(source)
        source.pending = [make_event()]
        manager.update()
        assert source.updates == 1
        assert manager.get_events() == [make_event()]
        assert manager.get_events() == []


@pytest.fixture
def event_queue():
    """Initialized pygame event queue on the dummy video driver."""
    pygame.display.init()
    pygame.event.clear()
    yield
    pygame.display.quit()


class TestMouseInputSource:
    """Test pygame mouse translation."""

    def test_to_arena_subtracts_origin(self):
        source = MouseInputSource(origin=(0, 48))
        assert source.to_arena((600, 448)) == Vector2D(x=600.0, y=400.0)

    def test_motion_and_click(self, event_queue):
        source = MouseInputSource(origin=(0, 48))
        pygame.event.post(pygame.event.Event(pygame.MOUSEMOTION, pos=(100, 148), rel=(0, 0), buttons=(0, 0, 0)))
        pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(300, 248), button=1))
        source.update()

        events = source.poll_events()
        assert [event.event_type for event in events] == [EventType.MOVE, EventType.PRESS]
        assert events[0].position == Vector2D(x=100.0, y=100.0)
        assert events[1].position == Vector2D(x=300.0, y=200.0)
        assert source.poll_events() == []

    def test_other_events_are_reposted(self, event_queue):
        source = MouseInputSource()
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
        source.update()
        assert source.poll_events() == []
        assert [event.type for event in pygame.event.get()] == [pygame.KEYDOWN]

    def test_right_click_ignored(self, event_queue):
        source = MouseInputSource()
        pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(5, 5), button=3))
        source.update()
        assert source.poll_events() == []
