"""Creator for the Windows player."""

import logging

from factory_player.core.base_creator import BasePlayerCreator
from factory_player.core.platform import Platform

from .player import WindowsPlayer

logger = logging.getLogger(__name__)


class WindowsPlayerCreator(BasePlayerCreator):
    platform = Platform.WINDOWS

    def create_player(self) -> WindowsPlayer:
        logger.debug("WindowsPlayerCreator.create_player()")
        return WindowsPlayer(self._config)
