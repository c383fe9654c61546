"""mui: show dialog boxes from shell scripts.

Core layout:

- mui.registry: Command and CommandRegistry (ordered, immutable)
- mui.dispatch: argv → handler / help / error decision
- mui.frontend: dialog frontend protocol and console binding
- mui.config: environment-driven settings

The Qt binding lives in qt_app.dialogs; the shipped commands in cli.handlers.
"""

__version__ = "0.3.0"

__all__ = ["__version__"]
