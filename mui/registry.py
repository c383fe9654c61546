"""Command table for the mui dispatcher."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, Sequence

from .errors import RegistryConfigError

# Handlers return the process exit status; the entry point performs the exit.
CommandHandler = Callable[[Sequence[str]], int]

HELP_TOPIC = "help"


@dataclass(frozen=True, slots=True)
class Command:
    """One dispatchable subcommand."""

    name: str
    run: CommandHandler = field(compare=False, repr=False)
    short: str = ""
    long: str = ""
    usage_line: str = ""

    @property
    def usage(self) -> str:
        """One-line usage; first word is the command name."""
        return self.usage_line or self.name


class CommandRegistry:
    """Ordered, read-only set of commands. Registration order is display order."""

    __slots__ = ("_commands",)

    def __init__(self, commands: Iterable[Command] = ()) -> None:
        items = tuple(commands)
        seen: set[str] = set()
        for cmd in items:
            if not cmd.name or cmd.name != cmd.name.strip():
                raise RegistryConfigError(f"invalid command name: {cmd.name!r}")
            if cmd.name == HELP_TOPIC:
                raise RegistryConfigError(f"command name {HELP_TOPIC!r} is reserved")
            if cmd.name in seen:
                raise RegistryConfigError(f"duplicate command name: {cmd.name!r}")
            seen.add(cmd.name)
        self._commands = items

    def lookup(self, name: str) -> Command | None:
        """Return the command named exactly ``name`` (case-sensitive), else None."""
        for cmd in self._commands:
            if cmd.name == name:
                return cmd
        return None

    def all(self) -> tuple[Command, ...]:
        return self._commands

    def names(self) -> list[str]:
        return [c.name for c in self._commands]

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __repr__(self) -> str:
        return f"CommandRegistry({self.names()!r})"
