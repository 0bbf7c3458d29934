"""Exceptions raised by the factory-player library."""

__all__ = [
    "FactoryPlayerError",
    "UnsupportedPlatformError",
]


class FactoryPlayerError(Exception):
    """Base class for factory-player errors."""


class UnsupportedPlatformError(FactoryPlayerError, NotImplementedError):
    """Raised in strict mode when no player creator exists for the host platform."""

    def __init__(self, platform):
        self.platform = platform
        super().__init__(f"No implementation available for platform: {platform}")
