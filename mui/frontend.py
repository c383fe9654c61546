"""Dialog frontend interface and the console binding.

A frontend is the collaborator that actually shows a dialog. Handlers only
see the two calls of DialogFrontend; the Qt binding lives in qt_app.dialogs.
"""

from __future__ import annotations

import getpass
import sys
from typing import Protocol, TextIO

from .errors import FrontendUnavailableError


class DialogFrontend(Protocol):
    def question(self, title: str, text: str, ok_label: str, cancel_label: str) -> bool:
        """Return True when the user picks ``ok_label``."""
        ...

    def entry(self, title: str, text: str, default: str = "", hide: bool = False) -> str | None:
        """Return the entered text, or None when the dialog is cancelled."""
        ...


class ConsoleFrontend:
    """Prompt on stderr and read answers from stdin. EOF counts as cancel."""

    def __init__(self, stdin: TextIO | None = None, stderr: TextIO | None = None) -> None:
        self._stdin = stdin
        self._stderr = stderr

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stderr(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    def _prompt(self, prompt: str) -> str | None:
        self.stderr.write(prompt)
        self.stderr.flush()
        line = self.stdin.readline()
        if not line:
            self.stderr.write("\n")
            return None
        return line.rstrip("\r\n")

    def question(self, title: str, text: str, ok_label: str, cancel_label: str) -> bool:
        ok, cancel = ok_label.strip().lower(), cancel_label.strip().lower()
        # One-letter shortcuts only when the labels start differently; Enter is always No.
        shortcuts: dict[str, bool] = {}
        if ok[:1] != cancel[:1]:
            if ok[:1]:
                shortcuts[ok[:1]] = True
            if cancel[:1]:
                shortcuts[cancel[:1]] = False
        prompt = f"[{title}] {text} [{ok_label}/{cancel_label}]: "
        while True:
            answer = self._prompt(prompt)
            if answer is None:
                return False
            choice = answer.strip().lower()
            if not choice:
                return False
            if choice == ok:
                return True
            if choice == cancel:
                return False
            if choice in shortcuts:
                return shortcuts[choice]
            self.stderr.write(f"Answer {ok_label} or {cancel_label}.\n")

    def entry(self, title: str, text: str, default: str = "", hide: bool = False) -> str | None:
        """Ask for one line of text. Hidden input uses getpass only on a terminal; piped stdin is read as is."""
        suffix = f" [{default}]" if default and not hide else ""
        prompt = f"[{title}] {text}{suffix}: "
        if hide and self.stdin.isatty():
            try:
                value = getpass.getpass(prompt, stream=self.stderr)
            except EOFError:
                self.stderr.write("\n")
                return None
        else:
            value = self._prompt(prompt)
            if value is None:
                return None
        return value or default


def load_frontend(name: str) -> DialogFrontend:
    """Return the frontend registered under ``name`` ("qt" or "console")."""
    if name == "console":
        return ConsoleFrontend()
    if name == "qt":
        try:
            from qt_app.dialogs import QtDialogFrontend
        except ImportError as e:
            raise FrontendUnavailableError(
                f"Qt frontend needs PySide6 (pip install PySide6): {e}"
            ) from e
        return QtDialogFrontend()
    raise FrontendUnavailableError(f"unknown frontend: {name!r} (use qt or console)")


class DeferredFrontend:
    """Resolve the named frontend on the first dialog, so help works without a GUI stack."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._frontend: DialogFrontend | None = None

    def _resolve(self) -> DialogFrontend:
        if self._frontend is None:
            self._frontend = load_frontend(self.name)
        return self._frontend

    def question(self, title: str, text: str, ok_label: str, cancel_label: str) -> bool:
        return self._resolve().question(title, text, ok_label, cancel_label)

    def entry(self, title: str, text: str, default: str = "", hide: bool = False) -> str | None:
        return self._resolve().entry(title, text, default, hide)
