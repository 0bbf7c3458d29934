"""Linux player built on a command-line audio tool.

The player prints the shell command it would use to play the file and,
when PlayerConfig.execute is set, starts it through bash.
"""

import logging
import shutil
import subprocess

from factory_player.core.base_player import BasePlayer

logger = logging.getLogger(__name__)

__all__ = [
    "BASH",
    "LinuxPlayer",
]

BASH = "/bin/bash"


class LinuxPlayer(BasePlayer):
    """Plays files with mpg123 (or the configured command).

    The file path is wrapped in single quotes but embedded single quotes are
    not escaped, so a path such as "it's.mp3" produces a broken command line.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._popen = None

    def build_command(self, file_path: str) -> str:
        """Build the shell command playing file_path.

        Args:
            file_path: Path of the file, inserted verbatim

        Returns:
            The command line, e.g. "mpg123 -q 'star.wav'"
        """
        config = self.config
        parts = [config.linux_command, *config.linux_flags, f"'{file_path}'"]
        return " ".join(parts)

    def _do_play(self, file_path):
        logger.debug("LinuxPlayer._do_play(%r)", file_path)
        command = self.build_command(file_path)

        print("Playing audio via the following command:")
        print(command)

        if self.config.execute:
            self._start_bash_process(command)

    def _start_bash_process(self, command):
        """Start command in a bash process without waiting for it.

        Args:
            command: Shell command line to run

        Returns:
            The subprocess.Popen instance
        """
        logger.debug("LinuxPlayer._start_bash_process(%s)", command)
        if shutil.which(self.config.linux_command) is None:
            logger.warning(
                "Couldn't find %s - running the command anyway, but it may not work",
                self.config.linux_command,
            )

        self._popen = subprocess.Popen(
            [BASH, "-c", command],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
        )
        return self._popen
