import logging

from .core import (  # noqa: F401
    BasePlayer,
    BasePlayerCreator,
    FactoryPlayerError,
    Platform,
    PlayerConfig,
    UnsupportedPlatformError,
    detect_platform,
)
from .factory import CREATORS, get_player_creator, play_file  # noqa: F401
from .platform import (  # noqa: F401
    LinuxPlayer,
    LinuxPlayerCreator,
    WindowsPlayer,
    WindowsPlayerCreator,
)

__version__ = "1.0.0"

logger = logging.getLogger(__name__)
