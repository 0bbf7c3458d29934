"""Command-line entry point.

Usage:
    factory-player
    factory-player star.wav --no-wait
    factory-player --platform linux --execute -v
"""

import argparse
import logging
import sys

from .core.config import PlayerConfig
from .core.exceptions import UnsupportedPlatformError
from .core.platform import detect_platform
from .factory import get_player_creator, play_file

logger = logging.getLogger(__name__)

PROMPT_MESSAGE = "Please specify the path to the file to play"
EXIT_MESSAGE = "Press any key to exit..."


def read_line(stream=None) -> str:
    """Read one line from stream, without its newline. EOF reads as ""."""
    stream = stream or sys.stdin
    line = stream.readline()
    return line.rstrip("\r\n")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="factory-player",
        description="Play an audio file with the player made for the host platform",
    )

    parser.add_argument(
        "file",
        nargs="?",
        help="File to play (prompted on standard input when omitted)",
    )

    parser.add_argument(
        "--platform",
        type=str,
        default=None,
        help="Host identifier to use instead of the detected one (e.g. linux, windows)",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail with exit code 1 on an unsupported platform",
    )

    parser.add_argument(
        "--execute",
        action="store_true",
        help="On Linux, run the play command instead of only printing it",
    )

    parser.add_argument(
        "--command",
        type=str,
        default="mpg123",
        help="Command-line tool used on Linux (default: mpg123)",
    )

    parser.add_argument(
        "--no-wait",
        action="store_true",
        help="Exit without waiting for a key press",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    return parser


def main(argv=None, stdin=None) -> int:
    """Main entry point for the factory-player command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.error("--command must not be empty")

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    platform = detect_platform(args.platform)
    config = PlayerConfig(linux_command=args.command, execute=args.execute)

    try:
        creator = get_player_creator(platform, strict=args.strict, config=config)
    except UnsupportedPlatformError:
        return 1

    if args.file is None:
        print(PROMPT_MESSAGE)
        file_path = read_line(stdin)
    else:
        file_path = args.file

    play_file(creator, file_path)

    print(EXIT_MESSAGE)
    if not args.no_wait:
        read_line(stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())
