"""Player configuration for the factory-player library.

This module provides the PlayerConfig dataclass which holds the settings
used by the platform players when they build and send their commands.
"""

from dataclasses import dataclass

__all__ = [
    "DEFAULT_MCI_BUFFER_SIZE",
    "PlayerConfig",
]

# Characters reserved for the MCI return string
DEFAULT_MCI_BUFFER_SIZE = 1024 * 1024


@dataclass
class PlayerConfig:
    """Configuration for the platform players.

    Attributes:
        linux_command: Command-line tool used to play files on Linux
        linux_flags: Flags passed to linux_command before the file path
        execute: If True, the Linux player runs the command instead of only printing it
        mci_buffer_size: Size of the return buffer handed to mciSendString
    """

    linux_command: str = "mpg123"
    linux_flags: tuple = ("-q",)
    execute: bool = False
    mci_buffer_size: int = DEFAULT_MCI_BUFFER_SIZE

    def __post_init__(self):
        """Validate and normalize configuration parameters."""
        if not self.linux_command:
            raise ValueError("linux_command must not be empty")

        if isinstance(self.linux_flags, str):
            self.linux_flags = (self.linux_flags,)
        else:
            self.linux_flags = tuple(self.linux_flags)

        if self.mci_buffer_size <= 0:
            raise ValueError(f"mci_buffer_size must be positive, got {self.mci_buffer_size}")
