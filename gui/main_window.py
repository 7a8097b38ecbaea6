"""
Main Window

The single game screen: title, score, guess field, word length stepper,
new word button and the list of attempts.
"""

from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QStatusBar, QWidget, QVBoxLayout, QLabel,
    QLineEdit, QSpinBox, QPushButton, QMessageBox
)
from PySide6.QtCore import Qt, Slot, QTimer
from PySide6.QtGui import QFontDatabase

from services.event_bus import EventBus
from engine.errors import WordGameError
from engine.game import GameEngine, GameState
from gui.icons import icon_new_word
from gui.widgets.attempt_list import AttemptListWidget
from gui.widgets.scoreboard import ScoreboardWidget
from config import GAME_SETTINGS, UI_SETTINGS


class MainWindow(QMainWindow):
    """
    The game window.

    Forwards user input to the GameEngine and redraws from the
    GameState snapshots it emits through the event bus.
    """

    def __init__(self, event_bus: EventBus, engine: GameEngine):
        super().__init__()
        self.event_bus = event_bus
        self.engine = engine

        self.setWindowTitle("Wordle")
        self.setMinimumSize(UI_SETTINGS.min_width, UI_SETTINGS.min_height)

        self._build_ui()
        self._build_statusbar()
        self._connect_signals()

    def _build_ui(self) -> None:
        """Build the game screen."""
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        title = QLabel("Wordle")
        title.setStyleSheet(f"font-size: {UI_SETTINGS.title_font_size}pt; font-weight: bold;")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        self.scoreboard = ScoreboardWidget()
        layout.addWidget(self.scoreboard)

        mono = QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont)
        mono.setPointSize(UI_SETTINGS.letter_font_size)

        self.guess_input = QLineEdit()
        self.guess_input.setPlaceholderText("Enter your word: ")
        self.guess_input.setFont(mono)
        self.guess_input.setInputMethodHints(
            Qt.InputMethodHint.ImhNoPredictiveText | Qt.InputMethodHint.ImhNoAutoUppercase
        )
        self.guess_input.textEdited.connect(self.engine.update_current_guess)
        self.guess_input.returnPressed.connect(self._on_submit)
        layout.addWidget(self.guess_input)

        self.length_stepper = QSpinBox()
        self.length_stepper.setPrefix("Wordle Length: ")
        self.length_stepper.setRange(GAME_SETTINGS.min_word_length, GAME_SETTINGS.max_word_length)
        self.length_stepper.setValue(GAME_SETTINGS.default_word_length)
        self.length_stepper.setKeyboardTracking(False)
        self.length_stepper.valueChanged.connect(self._on_length_changed)
        layout.addWidget(self.length_stepper)

        self.btn_new_word = QPushButton("Get new Word")
        self.btn_new_word.setIcon(icon_new_word())
        self.btn_new_word.clicked.connect(self._on_new_word)
        layout.addWidget(self.btn_new_word)

        self.attempt_list = AttemptListWidget()
        layout.addWidget(self.attempt_list, stretch=1)

        self.setCentralWidget(central)

    def _build_statusbar(self) -> None:
        """Build the status bar."""
        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        self.status_bar.showMessage("Loading word list...")

    def _connect_signals(self) -> None:
        """Connect event bus signals."""
        self.event_bus.state_changed.connect(self._on_state_changed)
        self.event_bus.alert_raised.connect(self._on_alert_raised)
        self.event_bus.round_won.connect(self._on_round_won)
        self.event_bus.system_message.connect(self._on_system_message)

    # ============ User actions ============

    @Slot()
    def _on_submit(self) -> None:
        """Submit the text field as a guess."""
        if not self.engine.is_loaded:
            self.guess_input.clear()
            return
        self.engine.submit_guess(self.guess_input.text())

    @Slot(int)
    def _on_length_changed(self, value: int) -> None:
        """Reload the game for a new word length."""
        try:
            self.engine.set_word_length(value)
        except WordGameError as e:
            self.engine.post_alert("Word List Unavailable", str(e))
            self._sync_stepper(self.engine.word_length)

    @Slot()
    def _on_new_word(self) -> None:
        """Start a new round with a fresh word."""
        try:
            self.engine.start_new_round()
        except WordGameError as e:
            self.engine.post_alert("Word List Unavailable", str(e))

    # ============ Engine updates ============

    @Slot(object)
    def _on_state_changed(self, state: GameState) -> None:
        """Redraw from a state snapshot."""
        self.scoreboard.update_state(state)

        if self.guess_input.text() != state.current_guess:
            self.guess_input.setText(state.current_guess)

        if state.is_loaded:
            self._sync_stepper(state.word_length)

        # Oldest guess at the top
        self.attempt_list.set_rows(reversed(self.engine.feedback()))

    @Slot(object)
    def _on_alert_raised(self, alert) -> None:
        """Show the pending alert once the current action has finished."""
        QTimer.singleShot(0, self._show_pending_alert)

    def _show_pending_alert(self) -> None:
        alert = self.engine.alert
        if alert is None:
            return
        QMessageBox.information(self, alert.title, alert.message, QMessageBox.StandardButton.Ok)
        self.engine.acknowledge_alert()

    @Slot(str, int)
    def _on_round_won(self, word: str, points: int) -> None:
        self.status_bar.showMessage(f"Solved {word.upper()}! +{points} points", 5000)

    @Slot(str, str)
    def _on_system_message(self, level: str, message: str) -> None:
        """Display system message in status bar."""
        self.status_bar.showMessage(f"[{level.upper()}] {message}", 5000)

    def _sync_stepper(self, value: Optional[int]) -> None:
        """Set the stepper without triggering a reload."""
        if not value or self.length_stepper.value() == value:
            return
        self.length_stepper.blockSignals(True)
        self.length_stepper.setValue(value)
        self.length_stepper.blockSignals(False)
