"""Windows player built on the Media Control Interface.

The player sends a "Play <file>" command string to mciSendString from
winmm.dll and prints the status code it returns. The code is not
interpreted: 0 means success, anything else is an MCI error number.
"""

import ctypes
import logging

from factory_player.core.base_player import BasePlayer

logger = logging.getLogger(__name__)

__all__ = [
    "MCI_UNAVAILABLE",
    "WindowsPlayer",
    "mci_send_string",
]

# Reported instead of an MCI status code when winmm.dll cannot be loaded
MCI_UNAVAILABLE = -1


def _load_winmm():
    """Return the winmm library, or None when it cannot be loaded."""
    try:
        return ctypes.windll.winmm
    except (AttributeError, OSError) as e:
        logger.error("winmm.dll is not available on this host: %s", e)
        return None


def mci_send_string(command: str, buffer_size: int) -> int:
    """Send an MCI command string.

    Args:
        command: MCI command, e.g. "Play star.wav"
        buffer_size: Number of characters reserved for the return string

    Returns:
        The status code returned by mciSendStringW, or MCI_UNAVAILABLE
    """
    logger.debug("mci_send_string(%r, %d)", command, buffer_size)
    winmm = _load_winmm()
    if winmm is None:
        return MCI_UNAVAILABLE

    return_buffer = ctypes.create_unicode_buffer(buffer_size)
    return winmm.mciSendStringW(command, return_buffer, buffer_size, None)


class WindowsPlayer(BasePlayer):
    """Plays files through mciSendString.

    Args:
        config: PlayerConfig, or None for the global default
        backend: Callable (command, buffer_size) -> int sending the MCI
            command, defaults to mci_send_string
    """

    def __init__(self, config=None, backend=None):
        super().__init__(config)
        self._backend = backend or mci_send_string

    def build_command(self, file_path: str) -> str:
        return f"Play {file_path}"

    def _do_play(self, file_path):
        logger.debug("WindowsPlayer._do_play(%r)", file_path)
        result = self._backend(self.build_command(file_path), self.config.mci_buffer_size)
        print(result)
