"""Geometric skin - flat shapes on a light arena."""

from typing import TYPE_CHECKING, Optional, Tuple

import pygame

from arcadekit.games import GameStatus

from .base import BrickBreakerSkin
from ...config import HUD_BG_COLOR, HUD_TEXT_COLOR

if TYPE_CHECKING:
    from models import GameState
    from ..entities.paddle import Paddle
    from ..entities.ball import Ball
    from ..entities.brick import Brick


class GeometricSkin(BrickBreakerSkin):
    """Renders game using simple geometric shapes.

    - Paddle: Dark gray rectangle
    - Ball: Gold circle with a highlight and rim
    - Bricks: Row-colored rectangles with a white outline
    """

    NAME = "geometric"
    DESCRIPTION = "Flat shapes, one brick color per row"

    PADDLE_COLOR = (51, 51, 51)

    BALL_COLOR = (255, 215, 0)
    BALL_HIGHLIGHT = (255, 239, 148)
    BALL_OUTLINE = (218, 165, 32)

    BRICK_OUTLINE = (255, 255, 255)

    STATUS_MESSAGES = {
        GameStatus.WAITING: ("Ready to Start!", "Click or press SPACE to start"),
        GameStatus.GAME_OVER: ("Game Over!", "Click or press SPACE to play again"),
        GameStatus.WON: ("You Won!", "Click or press SPACE to play again"),
    }

    def __init__(self):
        """Initialize geometric skin."""
        self._font: Optional[pygame.font.Font] = None
        self._big_font: Optional[pygame.font.Font] = None

    def _ensure_font(self) -> None:
        """Ensure fonts are initialized."""
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, 32)
            self._big_font = pygame.font.Font(None, 64)

    def _get_brick_color(self, brick: 'Brick') -> Tuple[int, int, int]:
        """Convert a brick's hex color to RGB, white if unparseable."""
        try:
            color = pygame.Color(brick.color)
        except ValueError:
            return (255, 255, 255)
        return (color.r, color.g, color.b)

    def render_paddle(self, paddle: 'Paddle', screen: pygame.Surface) -> None:
        """Render paddle as a filled rectangle."""
        pygame.draw.rect(screen, self.PADDLE_COLOR, paddle.rect)

    def render_ball(self, ball: 'Ball', screen: pygame.Surface) -> None:
        """Render ball as a gold circle with a small highlight."""
        pos = (int(ball.x), int(ball.y))
        radius = int(ball.radius)
        pygame.draw.circle(screen, self.BALL_COLOR, pos, radius)
        pygame.draw.circle(screen, self.BALL_HIGHLIGHT, (pos[0] - 2, pos[1] - 2), max(1, radius // 3))
        pygame.draw.circle(screen, self.BALL_OUTLINE, pos, radius, 1)

    def render_brick(self, brick: 'Brick', screen: pygame.Surface) -> None:
        """Render brick as a colored rectangle with an outline."""
        pygame.draw.rect(screen, self._get_brick_color(brick), brick.rect)
        pygame.draw.rect(screen, self.BRICK_OUTLINE, brick.rect, 1)

    def render_hud(self, screen: pygame.Surface, game_state: 'GameState') -> None:
        """Render score (left) and status (right) on a HUD bar."""
        self._ensure_font()
        if not self._font:
            return

        screen.fill(HUD_BG_COLOR)

        score_text = self._font.render(f"Score: {game_state.score.points}", True, HUD_TEXT_COLOR)
        score_rect = score_text.get_rect()
        score_rect.midleft = (10, screen.get_height() // 2)
        screen.blit(score_text, score_rect)

        status_text = self._font.render(game_state.status.value.replace('_', ' ').title(), True, HUD_TEXT_COLOR)
        status_rect = status_text.get_rect()
        status_rect.midright = (screen.get_width() - 10, screen.get_height() // 2)
        screen.blit(status_text, status_rect)

    def render_status_overlay(self, screen: pygame.Surface, game_state: 'GameState') -> None:
        """Render the prompt for WAITING, GAME_OVER and WON."""
        messages = self.STATUS_MESSAGES.get(game_state.status)
        if messages is None:
            return

        self._ensure_font()
        if not self._font or not self._big_font:
            return

        title, hint = messages
        center_x = screen.get_width() // 2
        center_y = screen.get_height() // 2

        title_text = self._big_font.render(title, True, HUD_TEXT_COLOR)
        screen.blit(title_text, title_text.get_rect(center=(center_x, center_y)))

        hint_text = self._font.render(hint, True, HUD_TEXT_COLOR)
        screen.blit(hint_text, hint_text.get_rect(center=(center_x, center_y + 50)))

        if game_state.status.is_terminal:
            score_text = self._font.render(f"Final Score: {game_state.score.points}", True, HUD_TEXT_COLOR)
            screen.blit(score_text, score_text.get_rect(center=(center_x, center_y + 90)))
