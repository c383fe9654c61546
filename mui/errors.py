"""Exception types shared by the registry, frontends and entry point."""

from __future__ import annotations


class MuiError(Exception):
    """Base class for anticipated mui failures."""


class RegistryConfigError(MuiError):
    """Command table is malformed (duplicate, empty or reserved name)."""


class FrontendUnavailableError(MuiError):
    """Requested dialog frontend cannot be used in this process."""
