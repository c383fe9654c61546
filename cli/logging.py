"""Logging setup for the mui CLI: plain messages on stderr under ``mui.*``."""

from __future__ import annotations

import logging
import sys

_configured = False

_DEFAULT_LEVEL = logging.WARNING


def _resolve_level(name: str) -> int:
    raw = name.strip().upper()
    if raw:
        level = logging.getLevelName(raw)
        return level if isinstance(level, int) else _DEFAULT_LEVEL
    return _DEFAULT_LEVEL


def configure_cli_logging(*, quiet: bool = False, verbose: bool = False, level: str = "") -> None:
    """Set the mui.* logger level. --verbose/--quiet win over the ``level`` name."""
    global _configured
    if verbose:
        resolved = logging.DEBUG
    elif quiet:
        resolved = logging.ERROR
    else:
        resolved = _resolve_level(level)
    root = logging.getLogger("mui")
    root.setLevel(resolved)
    if not root.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(h)
        root.propagate = False
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a ``mui.<name>`` logger; records reach stderr through the mui root logger."""
    logger = logging.getLogger(f"mui.{name}")
    if not _configured:
        configure_cli_logging()
    return logger
