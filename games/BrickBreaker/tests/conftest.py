"""Pytest fixtures for BrickBreaker tests."""
import os

# Headless pygame: must be set before pygame creates any surface
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

from dataclasses import replace

import pytest

from arcadekit.games import GameStatus
from games.BrickBreaker.config import BrickHitTest, BrickLayout, SessionConfig
from games.BrickBreaker.game.brick_field import BrickField
from games.BrickBreaker.game.entities import Paddle
from games.BrickBreaker.game.simulation import SessionState, initial_state
from games.BrickBreaker.game_mode import BrickBreakerMode
from models import GameState, ScoreData


@pytest.fixture
def config():
    """Classic game settings, independent of the environment."""
    return SessionConfig(
        arena_width=1200,
        arena_height=750,
        ball_radius=8.0,
        ball_start_bottom_offset=50.0,
        ball_start_dx=6.0,
        ball_start_dy=-6.0,
        paddle_width=300.0,
        paddle_height=5.0,
        paddle_bottom_offset=30.0,
        paddle_deflection=8.0,
        points_per_brick=10,
        brick_hit_test=BrickHitTest.PRE_MOVE,
        layout=BrickLayout(
            rows=20, cols=30,
            brick_width=30.0, brick_height=20.0, gap=5.0,
            offset_x=35.0, offset_y=50.0,
        ),
    )


@pytest.fixture
def small_config(config):
    """Same arena with a single row of three bricks."""
    return replace(config, layout=BrickLayout(
        rows=1, cols=3,
        brick_width=30.0, brick_height=20.0, gap=5.0,
        offset_x=35.0, offset_y=50.0,
        row_colors=('#FF6B6B',),
    ))


@pytest.fixture
def paddle():
    """Paddle at the start position."""
    return Paddle(x=450.0, y=720.0, width=300.0, height=5.0)


@pytest.fixture
def playing_state(config):
    """Fresh session already switched to PLAYING."""
    state = initial_state(config)
    return SessionState(
        ball=state.ball,
        paddle=state.paddle,
        bricks=state.bricks,
        game_state=GameState(status=GameStatus.PLAYING),
    )


def _make_state(ball, paddle, bricks=(), status=GameStatus.PLAYING, points=0):
    """Build a SessionState from parts."""
    return SessionState(
        ball=ball,
        paddle=paddle,
        bricks=BrickField(tuple(bricks)),
        game_state=GameState(
            score=ScoreData(points=points, bricks_destroyed=points // 10),
            status=status,
        ),
    )


@pytest.fixture
def game(config):
    """BrickBreaker game in WAITING status with the classic settings."""
    return BrickBreakerMode(config=config)


@pytest.fixture
def make_state():
    """Factory for SessionState built from explicit parts."""
    return _make_state
