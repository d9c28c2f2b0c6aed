"""Per-frame simulation for BrickBreaker.

The whole session lives in one immutable SessionState. A frame is a
fixed sequence of pure transitions, each consuming the previous one's
output:

    advance_ball    move, wall reflections, bottom loss, paddle bounce
    resolve_bricks  first overlapping brick is destroyed and scored
    win check       status becomes WON when no brick is left

Pointer input is not part of a frame; it replaces the paddle through
with_paddle() whenever an event arrives.
"""

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from arcadekit.games import GameStatus
from arcadekit.logging import get_logger
from models import GameState

from games.BrickBreaker.config import BrickHitTest, SessionConfig

from .brick_field import BrickField
from .entities.ball import Ball
from .entities.paddle import Paddle
from .physics.collision import check_collision, hits_side_wall, hits_top_wall, is_below_arena
from .scoring import ScoreTracker
from .state_machine import SessionEvent, next_status

log = get_logger('simulation')


@dataclass(frozen=True)
class SessionState:
    """Authoritative state of one session.

    Also serves as the read-only snapshot handed to renderers: every
    field is immutable.
    """

    ball: Ball
    paddle: Paddle
    bricks: BrickField
    game_state: GameState

    @property
    def status(self) -> GameStatus:
        """Get the session status."""
        return self.game_state.status

    @property
    def points(self) -> int:
        """Get the session score."""
        return self.game_state.score.points


def initial_state(config: SessionConfig) -> SessionState:
    """Lay out a fresh, waiting session.

    Used both for the first session and for every reset, so a reset
    session equals a fresh one.

    Args:
        config: Session settings

    Returns:
        SessionState with the ball above the paddle, a full brick field,
        zero score and WAITING status
    """
    ball = Ball(
        x=config.arena_width / 2,
        y=config.arena_height - config.ball_start_bottom_offset,
        dx=config.ball_start_dx,
        dy=config.ball_start_dy,
        radius=config.ball_radius,
    )
    paddle = Paddle(
        x=config.arena_width / 2 - config.paddle_width / 2,
        y=config.arena_height - config.paddle_bottom_offset,
        width=config.paddle_width,
        height=config.paddle_height,
    )
    return SessionState(
        ball=ball,
        paddle=paddle,
        bricks=BrickField.from_layout(config.layout),
        game_state=GameState(),
    )


def advance_ball(ball: Ball, paddle: Paddle, config: SessionConfig) -> Tuple[Ball, bool]:
    """Move the ball one frame and resolve walls and paddle.

    Wall reflections only flip velocity; the ball is not pushed back
    inside the arena, so it may overshoot a wall by up to one frame.

    Args:
        ball: Ball at the start of the frame
        paddle: Current paddle
        config: Session settings

    Returns:
        Tuple of (updated ball, True if the ball left through the bottom).
        A lost ball skips the paddle test.
    """
    ball = ball.move()

    if hits_side_wall(ball.x, ball.radius, config.arena_width):
        ball = ball.bounce_horizontal()
    if hits_top_wall(ball.y, ball.radius):
        ball = ball.bounce_vertical()

    if is_below_arena(ball.y, config.arena_height):
        return ball, True

    if check_collision(ball.bounds, paddle.rect):
        ball = ball.bounce_off_paddle(paddle.x, paddle.width, config.paddle_deflection)

    return ball, False


def resolve_bricks(
    probe: Ball,
    ball: Ball,
    bricks: BrickField,
) -> Tuple[Ball, BrickField, Optional[int]]:
    """Destroy at most one brick and bounce the ball off it.

    Only the first visible brick (row-major) overlapping the probe's
    bounding square is destroyed, even when the square overlaps several.

    Args:
        probe: Ball whose bounding square is tested against the bricks
        ball: Ball whose vertical velocity is inverted on a hit
        bricks: Current brick field

    Returns:
        Tuple of (ball, bricks, index of the destroyed brick or None)
    """
    index = bricks.first_hit(probe.bounds)
    if index is None:
        return ball, bricks, None

    log.debug("Brick %s destroyed", bricks[index].grid_position)
    return ball.bounce_vertical(), bricks.hide(index), index


def step(state: SessionState, config: SessionConfig) -> SessionState:
    """Advance a session by one frame.

    A no-op unless the session is PLAYING.

    Args:
        state: Session at the start of the frame
        config: Session settings

    Returns:
        Session at the end of the frame
    """
    if state.status != GameStatus.PLAYING:
        return state

    ball, lost = advance_ball(state.ball, state.paddle, config)
    if lost:
        return apply_event(replace(state, ball=ball), SessionEvent.BALL_LOST)

    probe = state.ball if config.brick_hit_test == BrickHitTest.PRE_MOVE else ball
    ball, bricks, hit = resolve_bricks(probe, ball, state.bricks)

    game_state = state.game_state
    if hit is not None:
        tracker = ScoreTracker(game_state.score, config.points_per_brick).record_brick()
        game_state = game_state.with_score(tracker.get_stats())

    state = replace(state, ball=ball, bricks=bricks, game_state=game_state)

    if bricks.all_destroyed:
        state = apply_event(state, SessionEvent.FIELD_CLEARED)

    return state


def apply_event(state: SessionState, event: SessionEvent) -> SessionState:
    """Apply a status transition, ignoring illegal ones.

    Args:
        state: Current session
        event: Event to apply

    Returns:
        Session with the new status, or the same session if the event is
        not legal in the current status
    """
    status = next_status(state.status, event)
    if status is None:
        return state
    return replace(state, game_state=state.game_state.with_status(status))


def with_paddle(state: SessionState, paddle: Paddle) -> SessionState:
    """Replace the paddle, leaving everything else untouched."""
    return replace(state, paddle=paddle)
