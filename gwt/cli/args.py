"""Command-line argument parsing for gwt."""

import argparse
from typing import List, Optional

from gwt.__version__ import __version__
from gwt.exceptions import UnknownCommandError


class GwtArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad options as UnknownCommandError instead of exiting."""

    def error(self, message):
        raise UnknownCommandError(message, f"Invalid arguments: {message}")


def build_parser() -> argparse.ArgumentParser:
    # Help is a command here (help, --help, -h), usage text is printed by the dispatcher
    parser = GwtArgumentParser(prog="gwt", add_help=False)
    parser.add_argument("-h", "--help", action="store_true", dest="help", help="Show the help message")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("--version", action="version", version=f"gwt {__version__}")
    parser.add_argument(
        "--cd-file",
        metavar="FILE",
        help="Write the selected worktree path to FILE for the shell wrapper",
    )
    parser.add_argument("command", nargs="?", help="add, remove, setup or help")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Arguments for the command")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Raises:
        UnknownCommandError: For options gwt does not know
    """
    return build_parser().parse_args(argv)
