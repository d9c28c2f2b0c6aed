"""Base class for BrickBreaker game skins.

Skins handle ALL rendering - the game only manages state. A skin only
ever sees read-only snapshots.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

import pygame

from arcadekit.logging import get_logger

from games.BrickBreaker.config import BACKGROUND_COLOR

if TYPE_CHECKING:
    from models import GameState
    from ..entities.paddle import Paddle
    from ..entities.ball import Ball
    from ..entities.brick import Brick
    from ..simulation import SessionState

log = get_logger('skin')


class BrickBreakerSkin(ABC):
    """Base class for game skins (visuals + audio).

    Skins handle all rendering and audio. The game logic only
    manages state - skins decide how to present it.
    """

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    def render_frame(
        self,
        snapshot: 'SessionState',
        surface: Optional[pygame.Surface],
    ) -> bool:
        """Draw the arena, visible bricks, paddle and ball.

        Args:
            snapshot: Session state to draw
            surface: Arena surface, or None when there is nothing to draw on

        Returns:
            True if the frame was drawn, False if it was skipped
        """
        if surface is None:
            log.trace("No render surface, frame skipped")
            return False

        surface.fill(BACKGROUND_COLOR)

        for brick in snapshot.bricks.visible_bricks:
            self.render_brick(brick, surface)

        self.render_paddle(snapshot.paddle, surface)
        self.render_ball(snapshot.ball, surface)
        return True

    @abstractmethod
    def render_paddle(self, paddle: 'Paddle', screen: pygame.Surface) -> None:
        """Render the paddle.

        Args:
            paddle: Paddle to render
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_ball(self, ball: 'Ball', screen: pygame.Surface) -> None:
        """Render a ball.

        Args:
            ball: Ball to render
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_brick(self, brick: 'Brick', screen: pygame.Surface) -> None:
        """Render a visible brick.

        Args:
            brick: Brick to render
            screen: Pygame surface to draw on
        """
        pass

    def render_hud(self, screen: pygame.Surface, game_state: 'GameState') -> None:
        """Render the heads-up display (score, status).

        Args:
            screen: Pygame surface to draw on
            game_state: Current score and status
        """
        pass

    def render_status_overlay(self, screen: pygame.Surface, game_state: 'GameState') -> None:
        """Render the start / game over / win prompt, if any.

        Args:
            screen: Pygame surface to draw on
            game_state: Current score and status
        """
        pass

    def play_brick_break_sound(self) -> None:
        """Play sound when brick is destroyed."""
        pass

    def play_level_complete_sound(self) -> None:
        """Play sound when every brick is gone."""
        pass

    def play_game_over_sound(self) -> None:
        """Play sound when the ball is lost."""
        pass
