"""
Arcade Kit

Shared platform layer for the arcade games in this repository: the
standard game status enum, the BaseGame interface, the frame driver,
pointer input and the unified logging system.
"""

from arcadekit.logging import get_logger

__all__ = ['get_logger']
