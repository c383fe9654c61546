"""PySide6 binding of the mui dialog frontend."""

from __future__ import annotations

import os
import sys

from PySide6.QtWidgets import QApplication, QInputDialog, QLineEdit, QMessageBox

from mui.errors import FrontendUnavailableError


def _has_display() -> bool:
    if os.environ.get("QT_QPA_PLATFORM"):
        return True
    if sys.platform.startswith("linux"):
        return bool(os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY"))
    return True


def ensure_application() -> QApplication:
    """Return the process QApplication, creating it on first use."""
    app = QApplication.instance()
    if app is not None:
        return app
    if not _has_display():
        raise FrontendUnavailableError(
            "no display available for Qt dialogs (set DISPLAY, or use --frontend console)"
        )
    return QApplication([sys.argv[0] if sys.argv else "mui"])


class QtDialogFrontend:
    """Modal Qt dialogs: QMessageBox for questions, QInputDialog for entries."""

    def question(self, title: str, text: str, ok_label: str, cancel_label: str) -> bool:
        ensure_application()
        box = QMessageBox()
        box.setWindowTitle(title)
        box.setIcon(QMessageBox.Icon.Question)
        box.setText(text)
        ok_btn = box.addButton(ok_label, QMessageBox.ButtonRole.YesRole)
        cancel_btn = box.addButton(cancel_label, QMessageBox.ButtonRole.NoRole)
        box.setDefaultButton(cancel_btn)
        box.setEscapeButton(cancel_btn)
        box.exec()
        return box.clickedButton() == ok_btn

    def entry(self, title: str, text: str, default: str = "", hide: bool = False) -> str | None:
        ensure_application()
        echo = QLineEdit.EchoMode.Password if hide else QLineEdit.EchoMode.Normal
        value, ok = QInputDialog.getText(None, title, text, echo, default)
        if not ok:
            return None
        return value
