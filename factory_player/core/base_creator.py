"""BasePlayerCreator class, the creator side of the player factory."""

import logging
from abc import ABC, abstractmethod

from .base_player import BasePlayer
from .platform import Platform

logger = logging.getLogger(__name__)

__all__ = [
    "BasePlayerCreator",
]


class BasePlayerCreator(ABC):
    """Base class for player creators.

    Subclasses decide which concrete BasePlayer is built and declare the
    Platform they serve.
    """

    platform: Platform = Platform.UNSUPPORTED

    def __init__(self, config=None):
        """Initialize the creator.

        Args:
            config: PlayerConfig handed to every created player, or None to
                let players use the global default.
        """
        self._config = config

    @abstractmethod
    def create_player(self) -> BasePlayer:
        """Return a new player for this creator's platform."""
        raise NotImplementedError()

    def __repr__(self):
        return f"{type(self).__name__}(platform={self.platform.name})"
