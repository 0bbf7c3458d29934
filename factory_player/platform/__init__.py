"""Platform-specific implementations for the factory-player library.

Each submodule provides one concrete player and the creator producing it.
"""

from .linux import LinuxPlayer, LinuxPlayerCreator
from .windows import WindowsPlayer, WindowsPlayerCreator

__all__ = [
    "LinuxPlayer",
    "LinuxPlayerCreator",
    "WindowsPlayer",
    "WindowsPlayerCreator",
]
