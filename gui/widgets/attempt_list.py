"""
Attempt List Widget

Shows each submitted guess with its letters colored by feedback.
"""

from typing import Iterable

from PySide6.QtWidgets import QListWidget, QListWidgetItem, QLabel
from PySide6.QtCore import Qt

from engine.feedback import FeedbackRow, LetterStatus
from gui.styles.theme import (
    LETTER_CORRECT, LETTER_PRESENT, LETTER_ABSENT, FONT_MONO,
)
from config import UI_SETTINGS


LETTER_COLORS = {
    LetterStatus.CORRECT: LETTER_CORRECT,
    LetterStatus.PRESENT: LETTER_PRESENT,
    LetterStatus.ABSENT: LETTER_ABSENT,
}


def row_to_html(row: FeedbackRow) -> str:
    """Render one feedback row as colored monospaced rich text."""
    spans = [
        f'<span style="color: {LETTER_COLORS[lf.status]};">{lf.letter}</span>'
        for lf in row.letters
    ]
    return (
        # FONT_MONO holds double quotes, so this attribute uses single quotes
        f"<span style='font-family: {FONT_MONO}; "
        f"font-size: {UI_SETTINGS.letter_font_size}pt; letter-spacing: 4px;'>"
        + "".join(spans) + "</span>"
    )


class AttemptListWidget(QListWidget):
    """List of guesses for the current round, oldest at the top."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)

    def set_rows(self, rows: Iterable[FeedbackRow]) -> None:
        """Replace the displayed rows."""
        self.clear()
        for row in rows:
            item = QListWidgetItem(self)
            label = QLabel(row_to_html(row))
            label.setTextFormat(Qt.TextFormat.RichText)
            label.setAccessibleName(row.word)
            item.setSizeHint(label.sizeHint())
            self.setItemWidget(item, label)
