"""Route argv to a registered command, the help pseudo-command, or an error.

The dispatcher never exits the process: every path returns the intended exit
status and the entry point (mui_cli.main) calls sys.exit with it.
"""

from __future__ import annotations

import logging
import sys
from typing import Sequence, TextIO

from .registry import HELP_TOPIC, Command, CommandRegistry

EXIT_OK = 0
EXIT_USAGE = 2

_BANNER = """Mui is a tool to display graphical dialog boxes.

Usage:

        {prog} <command> [arguments]

The commands are:

"""

_FOOTER = '\nUse "{prog} help <command>" for more information about a command.\n'

_log = logging.getLogger("mui.dispatch")


def render_usage(
    registry: CommandRegistry,
    command: Command | None = None,
    *,
    prog: str = "mui",
) -> str:
    """Return top-level usage, or the long help of ``command`` verbatim."""
    if command is not None:
        return command.long
    parts = [_BANNER.format(prog=prog)]
    for cmd in registry.all():
        parts.append("\t%-10s %s\n" % (cmd.name, cmd.short))
    parts.append(_FOOTER.format(prog=prog))
    return "".join(parts)


def print_usage(
    stream: TextIO,
    registry: CommandRegistry,
    command: Command | None = None,
    *,
    prog: str = "mui",
) -> None:
    stream.write(render_usage(registry, command, prog=prog))
    stream.flush()


class Dispatcher:
    """Stateless decision tree over an injected registry."""

    def __init__(
        self,
        registry: CommandRegistry,
        *,
        prog: str = "mui",
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.registry = registry
        self.prog = prog
        self._stdout = stdout
        self._stderr = stderr

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    def dispatch(self, argv: Sequence[str]) -> int:
        """Run one dispatch decision for positional ``argv`` and return its status."""
        args = list(argv)
        if not args:
            _log.debug("dispatch: no command given")
            print_usage(self.stderr, self.registry, prog=self.prog)
            return EXIT_USAGE

        cmdname, rest = args[0], args[1:]
        cmd = self.registry.lookup(cmdname)
        if cmd is not None:
            _log.debug("dispatch: %s %s", cmdname, rest)
            return cmd.run(rest)

        if cmdname == HELP_TOPIC:
            return self._help(rest)

        _log.debug("dispatch: unknown command %r", cmdname)
        self.stderr.write(
            f"{self.prog} {cmdname}: unknown command\n"
            f"Run '{self.prog} help' for usage.\n"
        )
        self.stderr.flush()
        return EXIT_USAGE

    def _help(self, topics: list[str]) -> int:
        if not topics:
            print_usage(self.stdout, self.registry, prog=self.prog)
            return EXIT_OK
        if len(topics) == 1:
            cmd = self.registry.lookup(topics[0])
            if cmd is not None:
                print_usage(self.stdout, self.registry, cmd, prog=self.prog)
                return EXIT_OK
        topic = " ".join(topics)
        _log.debug("dispatch: unknown help topic %r", topic)
        self.stderr.write(
            f"{self.prog} help {topic}: unknown help topic. Run '{self.prog} help'.\n"
        )
        self.stderr.flush()
        return EXIT_USAGE


def dispatch(
    argv: Sequence[str],
    registry: CommandRegistry,
    *,
    prog: str = "mui",
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Functional shortcut for ``Dispatcher(registry, ...).dispatch(argv)``."""
    return Dispatcher(registry, prog=prog, stdout=stdout, stderr=stderr).dispatch(argv)
