"""Dialog command handlers and the shipped command table.

Each handler parses its own arguments, asks the frontend for one dialog and
returns the exit status: 0 for Yes/OK, 1 for No/cancel, 2 for bad arguments.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from functools import partial
from typing import Callable, Sequence

from mui.config import DEFAULT_TITLE
from mui.frontend import DialogFrontend
from mui.registry import Command, CommandRegistry

from .logging import get_logger

EXIT_OK = 0
EXIT_CANCEL = 1
EXIT_USAGE = 2

QUESTION_USAGE = "question [--title TITLE] [--text TEXT] [--ok-label LABEL] [--cancel-label LABEL]"
ENTRY_USAGE = "entry [--title TITLE] [--text TEXT] [--entry-text TEXT] [--hide-text]"

QUESTION_LONG = f"""usage: mui {QUESTION_USAGE}

Display a question with two possible answers: Yes or No.

It returns exit code zero with "Yes" and nonzero with "No".
"""

ENTRY_LONG = f"""usage: mui {ENTRY_USAGE}

Display a text entry dialog.

On OK the entered text is printed to standard output and the exit code is
zero. Cancelling prints nothing and exits nonzero. --hide-text masks the
input, for passwords.
"""

_LOG = get_logger("handlers")


def _command_parser(usage: str) -> argparse.ArgumentParser:
    return argparse.ArgumentParser(prog="mui", usage=f"%(prog)s {usage}", add_help=True)


def _parse(parser: argparse.ArgumentParser, args: Sequence[str]) -> argparse.Namespace | int:
    """Parse handler args; argparse exits are turned into a returned status."""
    try:
        return parser.parse_args(list(args))
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else EXIT_USAGE


def build_question_parser(usage: str = QUESTION_USAGE) -> argparse.ArgumentParser:
    parser = _command_parser(usage)
    parser.add_argument("--title", default=None, help="Dialog window title")
    parser.add_argument(
        "--text",
        default="Are you sure you want to proceed?",
        help="Question to display",
    )
    parser.add_argument("--ok-label", default="Yes", help="Label of the accepting button (default: Yes)")
    parser.add_argument("--cancel-label", default="No", help="Label of the rejecting button (default: No)")
    return parser


def build_entry_parser(usage: str = ENTRY_USAGE) -> argparse.ArgumentParser:
    parser = _command_parser(usage)
    parser.add_argument("--title", default=None, help="Dialog window title")
    parser.add_argument("--text", default="Enter new text:", help="Prompt shown above the field")
    parser.add_argument("--entry-text", default="", help="Initial contents of the field")
    parser.add_argument("--hide-text", action="store_true", help="Mask the typed characters")
    return parser


def handle_question(
    args: Sequence[str],
    *,
    frontend: DialogFrontend,
    title: str = DEFAULT_TITLE,
    usage: str = QUESTION_USAGE,
) -> int:
    ns = _parse(build_question_parser(usage), args)
    if isinstance(ns, int):
        return ns
    answer = frontend.question(ns.title or title, ns.text, ns.ok_label, ns.cancel_label)
    _LOG.debug("question: answer=%s", "yes" if answer else "no")
    return EXIT_OK if answer else EXIT_CANCEL


def handle_entry(
    args: Sequence[str],
    *,
    frontend: DialogFrontend,
    title: str = DEFAULT_TITLE,
    usage: str = ENTRY_USAGE,
) -> int:
    ns = _parse(build_entry_parser(usage), args)
    if isinstance(ns, int):
        return ns
    value = frontend.entry(ns.title or title, ns.text, ns.entry_text, ns.hide_text)
    if value is None:
        _LOG.debug("entry: cancelled")
        return EXIT_CANCEL
    print(value, file=sys.stdout)
    return EXIT_OK


def bind_command(
    name: str,
    handler: Callable[..., int],
    *,
    frontend: DialogFrontend,
    title: str,
    short: str,
    long: str,
    usage_line: str,
) -> Command:
    """Build a Command whose handler reports argument errors with the command's own usage line."""
    cmd = Command(name=name, run=handler, short=short, long=long, usage_line=usage_line)
    return replace(cmd, run=partial(handler, frontend=frontend, title=title, usage=cmd.usage))


def build_default_registry(frontend: DialogFrontend, *, title: str = DEFAULT_TITLE) -> CommandRegistry:
    """Return the shipped command table bound to ``frontend``."""
    return CommandRegistry(
        [
            bind_command(
                "question",
                handle_question,
                frontend=frontend,
                title=title,
                short="display question dialog",
                long=QUESTION_LONG,
                usage_line=QUESTION_USAGE,
            ),
            bind_command(
                "entry",
                handle_entry,
                frontend=frontend,
                title=title,
                short="display text entry dialog",
                long=ENTRY_LONG,
                usage_line=ENTRY_USAGE,
            ),
        ]
    )
