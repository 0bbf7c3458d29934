"""Host platform detection."""

import logging
from enum import Enum

from currentplatform import platform as current_platform

logger = logging.getLogger(__name__)

__all__ = [
    "Platform",
    "detect_platform",
]


class Platform(Enum):
    """Platforms a player creator can be selected for."""

    WINDOWS = "windows"
    LINUX = "linux"
    UNSUPPORTED = "unsupported"


def detect_platform(name: str | None = None) -> Platform:
    """Map a host identifier to a Platform.

    Args:
        name: Host identifier to map, defaults to the one reported by
            currentplatform.

    Returns:
        Platform.WINDOWS, Platform.LINUX, or Platform.UNSUPPORTED for
        anything else.
    """
    if name is None:
        name = current_platform
    logger.debug("detect_platform(%s)", name)

    name = str(name).lower()
    if name == Platform.WINDOWS.value:
        return Platform.WINDOWS
    elif name == Platform.LINUX.value:
        return Platform.LINUX
    return Platform.UNSUPPORTED
