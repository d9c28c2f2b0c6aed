"""
Model Tests

Tests the shared pydantic models: primitives, scores and game state.

Run with: pytest tests/test_models.py -v
"""

import pytest
from pydantic import ValidationError

from arcadekit.games import GameStatus
from models import EventType, GameState, Point2D, Resolution, ScoreData, Vector2D


class TestPrimitives:
    """Test Point2D and Resolution."""

    def test_vector_is_point(self):
        assert Vector2D is Point2D

    def test_point_is_frozen(self):
        point = Point2D(x=1.0, y=2.0)
        with pytest.raises(ValidationError):
            point.x = 5.0

    def test_resolution_aspect_ratio(self):
        assert Resolution(width=1200, height=750).aspect_ratio == 1.6

    @pytest.mark.parametrize("width, height", [(0, 750), (1200, 0), (-1, 10)])
    def test_resolution_must_be_positive(self, width, height):
        with pytest.raises(ValidationError):
            Resolution(width=width, height=height)


class TestScoreData:
    """Test score validation."""

    def test_defaults(self):
        assert ScoreData() == ScoreData(points=0, bricks_destroyed=0)

    def test_negative_bricks_rejected(self):
        with pytest.raises(ValidationError):
            ScoreData(bricks_destroyed=-1)


class TestGameState:
    """Test the status/score container."""

    def test_default_is_waiting(self):
        state = GameState()
        assert state.status == GameStatus.WAITING
        assert state.score.points == 0

    def test_with_status_returns_copy(self):
        state = GameState()
        playing = state.with_status(GameStatus.PLAYING)
        assert playing.status == GameStatus.PLAYING
        assert state.status == GameStatus.WAITING

    def test_with_score(self):
        state = GameState().with_score(ScoreData(points=10, bricks_destroyed=1))
        assert state.score.points == 10
        assert state.status == GameStatus.WAITING

    def test_status_values(self):
        assert [status.value for status in GameStatus] == ['waiting', 'playing', 'game_over', 'won']

    def test_event_types(self):
        assert {event.value for event in EventType} == {'move', 'press'}
