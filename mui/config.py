"""Runtime settings for mui, read from the environment (MUI_* variables)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal, Mapping, cast

FrontendName = Literal["qt", "console"]

FRONTEND_NAMES: tuple[FrontendName, ...] = ("qt", "console")
DEFAULT_FRONTEND: FrontendName = "qt"
DEFAULT_TITLE = "mui"


@dataclass(frozen=True, slots=True)
class MuiConfig:
    frontend: FrontendName = DEFAULT_FRONTEND
    title: str = DEFAULT_TITLE
    log_level: str = ""


def _env_str(environ: Mapping[str, str], name: str, default: str = "") -> str:
    value = environ.get(name, "").strip()
    return value or default


def load_config(environ: Mapping[str, str] | None = None) -> MuiConfig:
    """Build MuiConfig from ``environ`` (default: os.environ). Unknown frontends fall back to qt."""
    env = os.environ if environ is None else environ
    frontend = _env_str(env, "MUI_FRONTEND", DEFAULT_FRONTEND).lower()
    if frontend not in FRONTEND_NAMES:
        frontend = DEFAULT_FRONTEND
    return MuiConfig(
        frontend=cast(FrontendName, frontend),
        title=_env_str(env, "MUI_TITLE", DEFAULT_TITLE),
        log_level=_env_str(env, "MUI_LOG_LEVEL").upper(),
    )
