"""CLI package namespace.

Keep package import side-effect free so handlers can be imported (and
tested) without pulling the Qt binding.
"""

__all__ = []
