"""Creator for the Linux player."""

import logging

from factory_player.core.base_creator import BasePlayerCreator
from factory_player.core.platform import Platform

from .player import LinuxPlayer

logger = logging.getLogger(__name__)


class LinuxPlayerCreator(BasePlayerCreator):
    platform = Platform.LINUX

    def create_player(self) -> LinuxPlayer:
        logger.debug("LinuxPlayerCreator.create_player()")
        return LinuxPlayer(self._config)
