"""Configuration for BrickBreaker game.

Contains arena dimensions, ball and paddle constants, the brick grid
layout and colors. Every numeric setting can be overridden through the
environment or a `.env` file in the game directory.
"""
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


def _get_str(key: str, default: str) -> str:
    """Get string from environment."""
    return os.getenv(key, default)


class BrickHitTest(str, Enum):
    """Which ball position the brick scan tests against.

    PRE_MOVE: the ball as it was when the frame began, before this
        frame's movement. Bricks react one frame late, which is how the
        game has always played.
    POST_MOVE: the ball after this frame's movement and reflections.
    """
    PRE_MOVE = "pre_move"
    POST_MOVE = "post_move"


# Arena / display
ARENA_WIDTH: int = _get_int('ARENA_WIDTH', 1200)
ARENA_HEIGHT: int = _get_int('ARENA_HEIGHT', 750)
HUD_HEIGHT: int = _get_int('HUD_HEIGHT', 48)
FPS: int = _get_int('FPS', 60)
SHOW_FPS: bool = _get_bool('SHOW_FPS', False)

# Ball (velocities are pixels per frame)
BALL_RADIUS: float = _get_float('BALL_RADIUS', 8.0)
BALL_START_BOTTOM_OFFSET: float = _get_float('BALL_START_BOTTOM_OFFSET', 50.0)
BALL_START_DX: float = _get_float('BALL_START_DX', 6.0)
BALL_START_DY: float = _get_float('BALL_START_DY', -6.0)

# Paddle
PADDLE_WIDTH: float = _get_float('PADDLE_WIDTH', 300.0)
PADDLE_HEIGHT: float = _get_float('PADDLE_HEIGHT', 5.0)
PADDLE_BOTTOM_OFFSET: float = _get_float('PADDLE_BOTTOM_OFFSET', 30.0)
# dx after a paddle hit is (hit_pos - 0.5) * PADDLE_DEFLECTION
PADDLE_DEFLECTION: float = _get_float('PADDLE_DEFLECTION', 8.0)

# Brick grid
BRICK_WIDTH: float = _get_float('BRICK_WIDTH', 30.0)
BRICK_HEIGHT: float = _get_float('BRICK_HEIGHT', 20.0)
BRICK_GAP: float = _get_float('BRICK_GAP', 5.0)
BRICK_ROWS: int = _get_int('BRICK_ROWS', 20)
BRICK_COLS: int = _get_int('BRICK_COLS', 30)
GRID_OFFSET_X: float = _get_float('GRID_OFFSET_X', 35.0)
GRID_OFFSET_Y: float = _get_float('GRID_OFFSET_Y', 50.0)

# Scoring
POINTS_PER_BRICK: int = _get_int('POINTS_PER_BRICK', 10)

BRICK_HIT_TEST: BrickHitTest = BrickHitTest(_get_str('BRICK_HIT_TEST', BrickHitTest.PRE_MOVE.value))

# Visual
BACKGROUND_COLOR: Tuple[int, int, int] = (240, 240, 240)
HUD_BG_COLOR: Tuple[int, int, int] = (255, 255, 255)
HUD_TEXT_COLOR: Tuple[int, int, int] = (51, 51, 51)
ARENA_BORDER_COLOR: Tuple[int, int, int] = (51, 51, 51)

# One color per brick row, cycled when there are more rows than colors
ROW_COLORS: Tuple[str, ...] = (
    '#FF6B6B', '#4ECDC4', '#45B7D1', '#96CEB4', '#FFEAA7',
    '#FF8A80', '#80CBC4', '#81C784', '#FFB74D', '#F06292',
    '#BA68C8', '#64B5F6', '#4DB6AC', '#AED581', '#FFD54F',
    '#FF8A65', '#A1887F', '#90A4AE', '#FFAB91', '#C5E1A5',
)


@dataclass(frozen=True)
class BrickLayout:
    """Geometry of the fixed brick grid.

    Brick (row, col) has its top-left corner at
    (offset_x + col * (brick_width + gap), offset_y + row * (brick_height + gap)).
    """

    rows: int = BRICK_ROWS
    cols: int = BRICK_COLS
    brick_width: float = BRICK_WIDTH
    brick_height: float = BRICK_HEIGHT
    gap: float = BRICK_GAP
    offset_x: float = GRID_OFFSET_X
    offset_y: float = GRID_OFFSET_Y
    row_colors: Tuple[str, ...] = ROW_COLORS

    def color_for_row(self, row: int) -> str:
        """Get the display color for a row."""
        return self.row_colors[row % len(self.row_colors)]


@dataclass(frozen=True)
class SessionConfig:
    """Everything needed to lay out a session.

    Two sessions built from equal configs start out identical.
    """

    arena_width: int = ARENA_WIDTH
    arena_height: int = ARENA_HEIGHT
    ball_radius: float = BALL_RADIUS
    ball_start_bottom_offset: float = BALL_START_BOTTOM_OFFSET
    ball_start_dx: float = BALL_START_DX
    ball_start_dy: float = BALL_START_DY
    paddle_width: float = PADDLE_WIDTH
    paddle_height: float = PADDLE_HEIGHT
    paddle_bottom_offset: float = PADDLE_BOTTOM_OFFSET
    paddle_deflection: float = PADDLE_DEFLECTION
    points_per_brick: int = POINTS_PER_BRICK
    brick_hit_test: BrickHitTest = BRICK_HIT_TEST
    layout: BrickLayout = field(default_factory=BrickLayout)


def default_session_config() -> SessionConfig:
    """Build a SessionConfig from the module-level settings."""
    return SessionConfig()
