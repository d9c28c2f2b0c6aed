"""BrickBreaker - Classic brick-breaking game.

Features:
- Paddle follows the pointer, applied immediately on every input event
- One simulation step + one render per frame while PLAYING
- Explicit start / reset commands for the UI layer
"""

from typing import Dict, List, Optional

import pygame

from arcadekit.games import BaseGame, FrameDriver, GameStatus
from arcadekit.games.input import InputEvent
from arcadekit.logging import emit_record, get_logger
from models import GameState

from .config import SessionConfig, default_session_config
from .game.entities.paddle import PaddleController
from .game.simulation import SessionState, apply_event, initial_state, step, with_paddle
from .game.skins import BrickBreakerSkin, GeometricSkin
from .game.state_machine import SessionEvent, can_apply

log = get_logger('game_mode')


class BrickBreakerMode(BaseGame):
    """Brick Breaker game mode.

    Owns the session state, the paddle controller and the frame driver.
    The driver runs exactly while the session is PLAYING: it is started
    by start() and stopped on loss, win or reset.
    """

    # Game metadata
    NAME = "Brick Breaker"
    DESCRIPTION = "Keep the ball in play and clear the wall of bricks."
    VERSION = "1.0.0"
    AUTHOR = "Arcade Team"

    # CLI arguments
    ARGUMENTS = [
        {
            'name': '--skin',
            'type': str,
            'default': 'geometric',
            'choices': ['geometric'],
            'help': 'Visual skin'
        },
        {
            'name': '--layout',
            'type': str,
            'default': None,
            'help': 'Brick layout name (from layouts/) or YAML file path'
        },
        {
            'name': '--brick-hit-test',
            'type': str,
            'default': None,
            'choices': ['pre_move', 'post_move'],
            'help': 'Ball position bricks are tested against (default from config)'
        },
        {
            'name': '--fps',
            'type': int,
            'default': None,
            'help': 'Frames per second (default from config)'
        },
    ]

    SKINS: Dict[str, type] = {
        'geometric': GeometricSkin,
    }

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        skin: str = 'geometric',
        **kwargs,
    ):
        """Initialize BrickBreaker game in WAITING status.

        Args:
            config: Session settings (defaults from config module)
            skin: Visual skin to use
            **kwargs: Extra CLI options, ignored
        """
        self._config = config if config is not None else default_session_config()
        self._controller = PaddleController(self._config.arena_width)

        skin_class = self.SKINS.get(skin, GeometricSkin)
        self._skin: BrickBreakerSkin = skin_class()

        # Target for the per-frame render; None until the host attaches one
        self._surface: Optional[pygame.Surface] = None

        self._driver = FrameDriver(step=self.update, render=self._render_frame)
        self._session_number = 1
        self._state: SessionState = initial_state(self._config)

    # =========================================================================
    # Read-only views for the UI and render collaborators
    # =========================================================================

    @property
    def config(self) -> SessionConfig:
        """Get the session settings."""
        return self._config

    @property
    def snapshot(self) -> SessionState:
        """Get the current session state (immutable)."""
        return self._state

    @property
    def game_state(self) -> GameState:
        """Get current score and status."""
        return self._state.game_state

    @property
    def frame_driver(self) -> FrameDriver:
        """Get the frame driver owned by this game."""
        return self._driver

    @property
    def skin(self) -> BrickBreakerSkin:
        """Get the active skin."""
        return self._skin

    def _get_internal_state(self) -> GameStatus:
        """Get current session status."""
        return self._state.status

    def get_score(self) -> int:
        """Get current score."""
        return self._state.points

    # =========================================================================
    # Commands
    # =========================================================================

    def handle_input(self, events: List[InputEvent]) -> None:
        """Move the paddle under the pointer for every event.

        Applied immediately in any status, independently of frames; the
        next simulation step sees the latest position.

        Args:
            events: List of input events (arena coordinates)
        """
        for event in events:
            paddle = self._controller.track(self._state.paddle, event.position.x)
            self._state = with_paddle(self._state, paddle)

    def start(self) -> bool:
        """Start a waiting session.

        Returns:
            True if the session started, False if ignored (not WAITING)
        """
        if not can_apply(self._state.status, SessionEvent.START):
            log.debug("Start ignored in status %s", self._state.status.value)
            return False

        self._set_state(apply_event(self._state, SessionEvent.START))
        return True

    def reset(self) -> bool:
        """Lay the session out again after a loss or a win.

        Returns:
            True if the session was reset, False if ignored (not finished)
        """
        if not can_apply(self._state.status, SessionEvent.RESET):
            log.debug("Reset ignored in status %s", self._state.status.value)
            return False

        self._session_number += 1
        self._set_state(initial_state(self._config))
        return True

    # =========================================================================
    # Frame loop
    # =========================================================================

    def attach_surface(self, surface: Optional[pygame.Surface]) -> None:
        """Set the surface the per-frame render draws on.

        Args:
            surface: Arena surface, or None to skip drawing
        """
        self._surface = surface

    def tick(self) -> bool:
        """Run one frame (step + render) if the session is PLAYING.

        Call once per display refresh.

        Returns:
            True if a frame ran
        """
        return self._driver.run_frame()

    def update(self) -> None:
        """Advance the simulation by one frame. No-op unless PLAYING."""
        if self._state.status != GameStatus.PLAYING:
            return

        previous = self._state
        new_state = step(previous, self._config)

        if new_state.points != previous.points:
            self._skin.play_brick_break_sound()

        self._set_state(new_state)

    def _render_frame(self) -> None:
        """Per-frame render pass driven by the frame driver."""
        self._skin.render_frame(self._state, self._surface)

    def render(self, screen: Optional[pygame.Surface]) -> None:
        """Render the current snapshot, with the status prompt if any.

        Args:
            screen: Arena surface to draw on (None skips drawing)
        """
        if self._skin.render_frame(self._state, screen):
            self._skin.render_status_overlay(screen, self._state.game_state)

    # =========================================================================
    # State changes
    # =========================================================================

    def _set_state(self, new_state: SessionState) -> None:
        """Install a new session state and react to status changes."""
        old_status = self._state.status
        self._state = new_state

        if new_state.status != old_status:
            self._on_status_change(old_status, new_state.status)

    def _on_status_change(self, old: GameStatus, new: GameStatus) -> None:
        """Log, record, play sounds and keep the driver in step with status."""
        log.info(
            "Session %d: %s -> %s (score %d)",
            self._session_number, old.value, new.value, self._state.points,
        )
        emit_record('session', {
            'type': 'transition',
            'session': self._session_number,
            'from': old.value,
            'to': new.value,
            'score': self._state.points,
            'bricks_left': self._state.bricks.visible_count,
            'frames': self._driver.frame_count,
        })

        if new == GameStatus.GAME_OVER:
            self._skin.play_game_over_sound()
        elif new == GameStatus.WON:
            self._skin.play_level_complete_sound()

        if new == GameStatus.PLAYING:
            self._driver.start()
        else:
            self._driver.stop()
