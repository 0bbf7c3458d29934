"""Linux platform implementation for the factory-player library.

This module provides the mpg123 command-line player and its creator.
"""

from .creator import LinuxPlayerCreator
from .player import LinuxPlayer

__all__ = [
    "LinuxPlayer",
    "LinuxPlayerCreator",
]
