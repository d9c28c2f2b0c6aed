"""Base class for arcade games.

All games inherit from BaseGame to get a consistent interface for the
standalone entry points.

Game metadata (NAME, DESCRIPTION, etc.) and CLI arguments (ARGUMENTS)
are declared as class attributes, so an entry point can build its
argument parser without knowing the game.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import pygame

from arcadekit.games.game_state import GameStatus


class BaseGame(ABC):
    """Abstract base class for arcade games.

    Class Attributes (metadata):
        NAME: Display name for the game
        DESCRIPTION: Short description of gameplay
        VERSION: Semantic version string
        AUTHOR: Author/team name
        ARGUMENTS: List of CLI argument definitions for argparse

    Subclasses must implement:
        - _get_internal_state() -> GameStatus: Current session status
        - get_score() -> int: Return current score
        - handle_input(events): Process input events
        - update(): Advance the simulation by one frame
        - render(screen): Draw the game
        - start() -> bool: Start a waiting session
        - reset() -> bool: Return a finished session to waiting

    Usage:
        class MyGame(BaseGame):
            NAME = "My Game"

            ARGUMENTS = [
                {'name': '--difficulty', 'type': str, 'default': 'normal',
                 'help': 'Game difficulty'},
            ]
    """

    # =========================================================================
    # Game Metadata (override in subclasses)
    # =========================================================================

    NAME: str = "Unnamed Game"
    DESCRIPTION: str = "No description"
    VERSION: str = "1.0.0"
    AUTHOR: str = "Unknown"

    # CLI argument definitions for argparse
    # Each entry is a dict with keys: name, type, default, help, choices (optional)
    ARGUMENTS: List[Dict[str, Any]] = []

    # Always available to all games; game-specific entries take precedence
    _BASE_ARGUMENTS: List[Dict[str, Any]] = [
        {
            'name': '--log-level',
            'type': str,
            'default': None,
            'choices': ['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'OFF'],
            'help': 'Default log level (overrides ARCADE_LOG_LEVEL)'
        },
    ]

    @classmethod
    def get_arguments(cls) -> List[Dict[str, Any]]:
        """Get all CLI arguments for this game (game-specific + base).

        Game-specific arguments come first, then base arguments.
        Duplicates by name are removed (game-specific takes precedence).
        """
        seen_names = set()
        result = []

        for arg in cls.ARGUMENTS:
            name = arg.get('name', '')
            if name and name not in seen_names:
                seen_names.add(name)
                result.append(arg)

        for arg in cls._BASE_ARGUMENTS:
            name = arg.get('name', '')
            if name and name not in seen_names:
                seen_names.add(name)
                result.append(arg)

        return result

    @classmethod
    def get_info(cls) -> Dict[str, Any]:
        """Get game metadata as a dictionary.

        Returns:
            Dict with keys: name, description, version, author, arguments
        """
        return {
            'name': cls.NAME,
            'description': cls.DESCRIPTION,
            'version': cls.VERSION,
            'author': cls.AUTHOR,
            'arguments': cls.get_arguments(),
        }

    @property
    def state(self) -> GameStatus:
        """Current session status (standard interface).

        Games should not override this - override _get_internal_state instead.
        """
        return self._get_internal_state()

    @abstractmethod
    def _get_internal_state(self) -> GameStatus:
        """Map internal game state to the standard GameStatus."""
        pass

    @abstractmethod
    def get_score(self) -> int:
        """Get current score."""
        pass

    @abstractmethod
    def handle_input(self, events: List) -> None:
        """Process input events.

        Args:
            events: List of InputEvent objects
        """
        pass

    @abstractmethod
    def update(self) -> None:
        """Advance game logic by one frame."""
        pass

    @abstractmethod
    def render(self, screen: Optional[pygame.Surface]) -> None:
        """Render the game.

        Args:
            screen: Pygame surface to draw on (None skips drawing)
        """
        pass

    @abstractmethod
    def start(self) -> bool:
        """Start a waiting session.

        Returns:
            True if the session started, False if the command was ignored
        """
        pass

    @abstractmethod
    def reset(self) -> bool:
        """Return a finished session to its initial waiting state.

        Returns:
            True if the session was reset, False if the command was ignored
        """
        pass
