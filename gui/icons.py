"""
App icons using Qt standard pixmaps and theme icons.

Uses QStyle.StandardPixmap for cross-platform consistency; falls back to
QIcon.fromTheme() where available (e.g. Linux).
"""

from PySide6.QtWidgets import QApplication, QStyle
from PySide6.QtGui import QIcon


def _style():
    app = QApplication.instance()
    return app.style() if app else None


def icon_new_word() -> QIcon:
    """Refresh icon for the "Get new Word" button."""
    style = _style()
    if style:
        return style.standardIcon(QStyle.StandardPixmap.SP_BrowserReload)
    icon = QIcon.fromTheme("view-refresh")
    return icon if not icon.isNull() else QIcon()
