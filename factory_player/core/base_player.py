"""BasePlayer class, the product side of the player factory.

Every platform player derives from BasePlayer and implements _do_play().
"""

import logging
from abc import ABC, abstractmethod
from concurrent.futures import Future

from .mixins import PlayerConfigMixin

logger = logging.getLogger(__name__)

__all__ = [
    "BasePlayer",
]


class BasePlayer(PlayerConfigMixin, ABC):
    """Base class for platform-specific players.

    play() is asynchronous in shape only: the platform hook runs
    synchronously and the returned future is already resolved.

    Platform-specific implementations must implement:
    - _do_play(file_path): perform the platform side effect
    """

    def play(self, file_path: str) -> Future:
        """Play a file.

        The path is handed to the platform hook as-is, without validation.

        Args:
            file_path: Path of the file to play

        A failure inside the platform hook is logged, not raised.

        Returns:
            A resolved Future whose result is None
        """
        logger.debug("%s.play(%r)", type(self).__name__, file_path)
        future = Future()
        try:
            self._do_play(file_path)
        except Exception:
            logger.exception("%s failed to play %r", type(self).__name__, file_path)
        future.set_result(None)
        return future

    @abstractmethod
    def _do_play(self, file_path: str) -> None:
        """Hook for subclasses to implement the platform side effect."""
        raise NotImplementedError()
