"""Pytest configuration. Ensures project root is in sys.path for top-level modules (mui_cli, cli, mui, qt_app)."""
from pathlib import Path

import pytest


@pytest.fixture(scope="session", autouse=True)
def _add_project_root_to_path():
    root = Path(__file__).resolve().parent.parent
    import sys
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


@pytest.fixture(autouse=True)
def _isolate_mui_env(monkeypatch):
    """Keep MUI_* from the developer shell out of tests and undo .env loads afterwards."""
    for name in ("MUI_FRONTEND", "MUI_TITLE", "MUI_LOG_LEVEL"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def _reset_mui_logging():
    """Drop mui.* handlers so each test binds a fresh one to its own (captured) sys.stderr."""
    import logging

    import cli.logging as cli_logging

    def _reset():
        root = logging.getLogger("mui")
        for handler in list(root.handlers):
            root.removeHandler(handler)
        cli_logging._configured = False

    _reset()
    yield
    _reset()
