"""
mui CLI

Entry point: global flags, environment, logging, then one dispatch.
Command logic lives in cli.handlers; routing in mui.dispatch.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from dotenv import find_dotenv, load_dotenv

from cli.handlers import build_default_registry
from cli.logging import configure_cli_logging, get_logger
from mui import __version__
from mui.config import FRONTEND_NAMES, load_config
from mui.dispatch import dispatch
from mui.errors import FrontendUnavailableError
from mui.frontend import DeferredFrontend

PROG = "mui"

EXIT_FRONTEND = 3


def _err(msg: str) -> None:
    get_logger("cli").error("%s: %s", PROG, msg)


def _load_environment(env_file: Path | None = None) -> None:
    """Load MUI_* settings from .env.

    An explicit ``env_file`` wins over the shell. The implicit search (nearest
    .env from cwd upwards) only fills in variables the shell left unset.
    """
    if env_file is not None:
        load_dotenv(env_file, override=True)
        return
    path = find_dotenv(usecwd=True)
    if path:
        load_dotenv(path, override=False)


def _build_parser() -> argparse.ArgumentParser:
    """Configure global flags; everything from the command name on is left for dispatch."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Display graphical dialog boxes from shell scripts.",
        epilog=f'Use "{PROG} help" for the list of commands.',
        allow_abbrev=False,
    )
    parser.add_argument("--version", "-V", action="version", version=f"%(prog)s {__version__}")
    shortcut = parser.add_mutually_exclusive_group()
    shortcut.add_argument(
        "-question",
        action="store_true",
        help="Display question dialog (same as 'mui question' when no command is given)",
    )
    shortcut.add_argument(
        "-entry",
        action="store_true",
        help="Display text entry dialog (same as 'mui entry' when no command is given)",
    )
    parser.add_argument(
        "--frontend",
        choices=FRONTEND_NAMES,
        default=None,
        help="Dialog frontend (default: MUI_FRONTEND or qt)",
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging on stderr")
    parser.add_argument("--quiet", action="store_true", help="Only errors on stderr")
    parser.add_argument("argv", nargs=argparse.REMAINDER, help=argparse.SUPPRESS)
    return parser


def _positional_args(args: argparse.Namespace) -> list[str]:
    positional = list(args.argv)
    if positional:
        return positional
    if args.question:
        return ["question"]
    if args.entry:
        return ["entry"]
    return []


def main(argv: Sequence[str] | None = None) -> int:
    _load_environment()
    parser = _build_parser()
    args = parser.parse_args(argv)
    config = load_config()
    configure_cli_logging(quiet=args.quiet, verbose=args.verbose, level=config.log_level)

    frontend = DeferredFrontend(args.frontend or config.frontend)
    registry = build_default_registry(frontend, title=config.title)
    try:
        return dispatch(_positional_args(args), registry, prog=PROG)
    except FrontendUnavailableError as e:
        _err(str(e))
        return EXIT_FRONTEND


if __name__ == "__main__":
    sys.exit(main())
