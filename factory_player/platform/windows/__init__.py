"""Windows platform implementation for the factory-player library.

This module provides the MCI (winmm.dll) player and its creator.
"""

from .creator import WindowsPlayerCreator
from .player import MCI_UNAVAILABLE, WindowsPlayer, mci_send_string

__all__ = [
    "MCI_UNAVAILABLE",
    "WindowsPlayer",
    "WindowsPlayerCreator",
    "mci_send_string",
]
