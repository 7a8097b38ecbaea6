"""
WordGames Application Controller

Top-level controller that wires together all application components.
"""

import logging
import random
from typing import Optional

from PySide6.QtCore import QObject

from services.event_bus import EventBus
from engine.errors import WordGameError
from engine.game import GameEngine
from engine.rules import RulesEngine
from engine.word_library import WordListProvider
from config import PATHS, GAME_SETTINGS

logger = logging.getLogger(__name__)


def create_engine(word_source=None, rng: Optional[random.Random] = None) -> GameEngine:
    """
    Build a GameEngine from the application settings.

    Args:
        word_source: Word list provider (default: user lists, then bundled lists)
        rng: Random source for target selection

    Returns:
        An engine with nothing loaded yet
    """
    if word_source is None:
        word_source = WordListProvider([PATHS.word_lists, GAME_SETTINGS.bundled_word_lists])

    rules = RulesEngine(
        min_word_length=GAME_SETTINGS.min_word_length,
        max_word_length=GAME_SETTINGS.max_word_length,
    )
    return GameEngine(
        word_source,
        attempt_limit=GAME_SETTINGS.attempt_limit,
        rules=rules,
        rng=rng,
    )


class WordGamesApp(QObject):
    """
    Top-level application controller.
    Wires together all application components.
    """

    def __init__(self, engine: Optional[GameEngine] = None, with_window: bool = True):
        super().__init__()

        # Core services
        self.event_bus = EventBus()
        self.engine = engine or create_engine()
        self._connect_engine()

        # Create main window
        self.main_window = None
        if with_window:
            from gui.main_window import MainWindow
            self.main_window = MainWindow(self.event_bus, self.engine)

    def _connect_engine(self) -> None:
        """Forward engine signals to the event bus."""
        self.engine.state_changed.connect(self.event_bus.state_changed.emit)
        self.engine.library_loaded.connect(self.event_bus.library_loaded.emit)
        self.engine.round_started.connect(self.event_bus.round_started.emit)
        self.engine.round_won.connect(self.event_bus.round_won.emit)
        self.engine.round_lost.connect(self.event_bus.round_lost.emit)
        self.engine.guess_accepted.connect(self.event_bus.guess_accepted.emit)
        self.engine.guess_rejected.connect(self.event_bus.guess_rejected.emit)
        self.engine.score_changed.connect(self.event_bus.score_changed.emit)
        self.engine.alert_raised.connect(self.event_bus.alert_raised.emit)

    def start(self, word_length: Optional[int] = None) -> bool:
        """
        Load the starting word list and begin the first round.

        Failures are reported as an alert rather than raised, so the window
        still opens and the player can pick another length.

        Returns:
            True if a round was started
        """
        length = word_length or GAME_SETTINGS.default_word_length
        try:
            self.engine.set_word_length(length)
        except WordGameError as e:
            logger.error("Could not start game: %s", e)
            self.engine.post_alert("Word List Unavailable", str(e))
            return False

        library = self.engine.library
        self.event_bus.emit_message("info", f"Loaded {len(library)} words of length {length}")
        return True

    def show(self) -> None:
        """Show the main application window."""
        if self.main_window is not None:
            self.main_window.show()
