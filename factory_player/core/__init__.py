"""Core classes for the factory-player library.

This module contains the abstract player/creator pair, platform detection,
configuration and exceptions shared by every platform implementation.
"""

from .base_creator import BasePlayerCreator
from .base_player import BasePlayer
from .config import PlayerConfig
from .exceptions import FactoryPlayerError, UnsupportedPlatformError
from .mixins import PlayerConfigMixin, get_global_player_config, set_global_player_config
from .platform import Platform, detect_platform

__all__ = [
    "BasePlayer",
    "BasePlayerCreator",
    "FactoryPlayerError",
    "Platform",
    "PlayerConfig",
    "PlayerConfigMixin",
    "UnsupportedPlatformError",
    "detect_platform",
    "get_global_player_config",
    "set_global_player_config",
]
