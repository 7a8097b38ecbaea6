"""
Event Bus - Central signal hub for inter-module communication.

All modules connect to this single object rather than directly to each other,
enabling loose coupling between the game engine and the GUI.
"""

from PySide6.QtCore import QObject, Signal


class EventBus(QObject):
    """
    Central signal hub for WordGames.

    The EventBus acts as a mediator between application components:
    - GameEngine emits game events
    - GUI components listen and update displays

    Usage:
        # In the app controller
        engine.state_changed.connect(self.event_bus.state_changed.emit)

        # In MainWindow
        self.event_bus.state_changed.connect(self._on_state_changed)
    """

    # ============ Game State ============
    state_changed = Signal(object)      # GameState snapshot
    library_loaded = Signal(int, int)   # word length, word count

    # ============ Round Lifecycle ============
    round_started = Signal(int)         # round number
    round_won = Signal(str, int)        # target word, points awarded
    round_lost = Signal(str)            # target word

    # ============ Guess Events ============
    guess_accepted = Signal(str)        # normalized guess
    guess_rejected = Signal(str)        # rejection reason
    score_changed = Signal(int)         # new total score

    # ============ Alerts ============
    alert_raised = Signal(object)       # Alert

    # ============ System Events ============
    system_message = Signal(str, str)   # (level, message) - e.g., ("info", "Loaded 711 words")

    def __init__(self):
        super().__init__()

    def emit_message(self, level: str, message: str) -> None:
        """Emit a system message (info, warning, error)."""
        self.system_message.emit(level, message)
