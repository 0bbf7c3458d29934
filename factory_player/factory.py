"""Selection of the player creator matching the host platform."""

import logging

from .core.exceptions import UnsupportedPlatformError
from .core.platform import Platform, detect_platform
from .platform import LinuxPlayerCreator, WindowsPlayerCreator

logger = logging.getLogger(__name__)

__all__ = [
    "CREATORS",
    "UNSUPPORTED_PLATFORM_MESSAGE",
    "get_player_creator",
    "play_file",
]

UNSUPPORTED_PLATFORM_MESSAGE = "Only Linux and Windows operating systems are supported."

CREATORS = {
    Platform.WINDOWS: WindowsPlayerCreator,
    Platform.LINUX: LinuxPlayerCreator,
}


def get_player_creator(platform=None, strict=False, config=None):
    """Return a new creator for platform.

    Args:
        platform: Platform to select for, detected from the host if None
        strict: If True, raise instead of printing a message when the
            platform is unsupported
        config: PlayerConfig handed to the creator

    Returns:
        A BasePlayerCreator, or None when the platform is unsupported

    Raises:
        UnsupportedPlatformError: if strict and the platform is unsupported
    """
    if platform is None:
        platform = detect_platform()
    logger.debug("get_player_creator(%s, strict=%s)", platform, strict)

    creator_class = CREATORS.get(platform)
    if creator_class is None:
        if strict:
            logger.critical("No implementation found for platform %s", platform)
            raise UnsupportedPlatformError(platform)
        logger.warning("No implementation found for platform %s", platform)
        print(UNSUPPORTED_PLATFORM_MESSAGE)
        return None

    return creator_class(config)


def play_file(creator, file_path):
    """Play file_path with a player built by creator.

    Nothing is played when creator is None.

    Returns:
        The future returned by the player, or None
    """
    if creator is None:
        logger.debug("play_file(%r) skipped, no creator", file_path)
        return None
    return creator.create_player().play(file_path)
