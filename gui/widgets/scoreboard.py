"""
Scoreboard Widget

Compact score display, hidden until the first point is scored.
"""

from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel
from PySide6.QtCore import Qt, Slot

from engine.game import GameState
from gui.styles.theme import TEXT_SECONDARY
from config import UI_SETTINGS


class ScoreboardWidget(QWidget):
    """
    Compact scoreboard showing:
    - Total score
    - Attempts left in the round
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._build_ui()

    def _build_ui(self) -> None:
        """Build the scoreboard UI."""
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.score_label = QLabel("Score 0")
        self.score_label.setStyleSheet(
            f"font-size: {UI_SETTINGS.score_font_size}pt; font-weight: bold;"
        )
        self.score_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.score_label.hide()
        layout.addWidget(self.score_label)

        self.attempts_label = QLabel("")
        self.attempts_label.setStyleSheet(f"font-size: 11pt; color: {TEXT_SECONDARY};")
        self.attempts_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.attempts_label)

    @Slot(object)
    def update_state(self, state: GameState) -> None:
        """Update the scoreboard from a GameState."""
        self.score_label.setText(f"Score {state.score}")
        self.score_label.setVisible(state.score > 0)

        if state.is_loaded:
            self.attempts_label.setText(f"{state.attempts_remaining} guesses left")
        else:
            self.attempts_label.setText("")
