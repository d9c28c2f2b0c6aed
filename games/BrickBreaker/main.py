#!/usr/bin/env python3
"""BrickBreaker - Standalone Entry Point.

Run this to play with the mouse.

Usage:
    python -m games.BrickBreaker.main
    python -m games.BrickBreaker.main --layout practice
    python -m games.BrickBreaker.main --brick-hit-test post_move
"""

import argparse
import sys
from dataclasses import replace
from typing import List, Optional

import pygame

from arcadekit.games import GameStatus
from arcadekit.games.input import InputManager, MouseInputSource
from arcadekit.logging import (
    close_all_sinks,
    configure_logging,
    create_sink_for_module,
    get_logger,
    register_sink,
)
from models import EventType, Resolution

from games.BrickBreaker.config import (
    ARENA_BORDER_COLOR,
    ARENA_HEIGHT,
    ARENA_WIDTH,
    FPS,
    HUD_HEIGHT,
    SHOW_FPS,
    BrickHitTest,
    SessionConfig,
    default_session_config,
)
from games.BrickBreaker.game.layout_loader import load_layout
from games.BrickBreaker.game_mode import BrickBreakerMode

log = get_logger('main')


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser from the game's argument metadata."""
    parser = argparse.ArgumentParser(description=f"{BrickBreakerMode.NAME} - Standalone")

    # Display options
    parser.add_argument('--width', type=int, default=ARENA_WIDTH, help='Arena width')
    parser.add_argument('--height', type=int, default=ARENA_HEIGHT, help='Arena height')

    for arg in BrickBreakerMode.get_arguments():
        options = {key: value for key, value in arg.items() if key != 'name'}
        parser.add_argument(arg['name'], **options)

    return parser


def build_config(args: argparse.Namespace) -> SessionConfig:
    """Turn parsed CLI options into session settings.

    Raises:
        LayoutError: If --layout names a missing or invalid layout
        ValidationError: If the arena size is not positive
        ValueError: If the arena is narrower than the paddle
    """
    arena = Resolution(width=args.width, height=args.height)
    config = replace(
        default_session_config(),
        arena_width=arena.width,
        arena_height=arena.height,
    )
    if config.arena_width < config.paddle_width:
        raise ValueError(
            f"Arena width {config.arena_width} is narrower than the paddle ({config.paddle_width:g})"
        )
    if args.layout:
        config = replace(config, layout=load_layout(args.layout))
    if args.brick_hit_test:
        config = replace(config, brick_hit_test=BrickHitTest(args.brick_hit_test))
    return config


def press(game: BrickBreakerMode) -> None:
    """Primary UI action: start when waiting, play again when finished."""
    if game.state == GameStatus.WAITING:
        game.start()
    elif game.state.is_terminal:
        game.reset()


def main(argv: Optional[List[str]] = None) -> int:
    """Run BrickBreaker standalone."""
    args = build_parser().parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)
    register_sink('session', create_sink_for_module('session'))

    try:
        config = build_config(args)
    except ValueError as e:
        # LayoutError and ValidationError are ValueErrors too
        log.error("%s", e)
        return 2

    fps = args.fps or FPS

    pygame.init()
    pygame.font.init()

    screen = pygame.display.set_mode((config.arena_width, HUD_HEIGHT + config.arena_height))
    pygame.display.set_caption("BrickBreaker")

    hud = screen.subsurface((0, 0, config.arena_width, HUD_HEIGHT))
    arena = screen.subsurface((0, HUD_HEIGHT, config.arena_width, config.arena_height))

    game = BrickBreakerMode(config=config, skin=args.skin)
    game.attach_surface(arena)

    input_manager = InputManager(MouseInputSource(origin=(0, HUD_HEIGHT)))

    clock = pygame.time.Clock()
    running = True

    print("\n" + "=" * 50)
    print("BRICKBREAKER")
    print("=" * 50)
    print("Controls:")
    print("  - Move the mouse to move the paddle")
    print("  - Click or SPACE to start / play again")
    print("  - R to reset a finished game")
    print("  - ESC to quit")
    print("=" * 50 + "\n")

    try:
        while running:
            clock.tick(fps)

            # Pointer input first: paddle moves before this frame's step
            input_manager.update()
            pointer_events = input_manager.get_events()
            game.handle_input(pointer_events)
            if any(event.event_type == EventType.PRESS for event in pointer_events):
                press(game)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_SPACE:
                        press(game)
                    elif event.key == pygame.K_r:
                        game.reset()

            # Frame driver only runs while PLAYING; otherwise show the
            # frozen snapshot with its status prompt
            if not game.tick():
                game.render(arena)

            game.skin.render_hud(hud, game.game_state)
            pygame.draw.line(screen, ARENA_BORDER_COLOR, (0, HUD_HEIGHT - 1), (config.arena_width, HUD_HEIGHT - 1))
            if SHOW_FPS:
                pygame.display.set_caption(f"BrickBreaker ({clock.get_fps():.0f} fps)")
            pygame.display.flip()
    finally:
        close_all_sinks()
        pygame.quit()

    return 0


if __name__ == "__main__":
    sys.exit(main())
