"""
Game Engine - Core game logic for WordGames.

The GameEngine runs independently of the GUI and owns every piece of game
state: the word library, the current round and the cumulative score. The
shell dispatches actions to it and redraws from the signals it emits.
"""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from PySide6.QtCore import QObject, Signal

from engine.errors import EmptyLibraryError, InvalidWordError, LoadError
from engine.feedback import FeedbackRows
from engine.rules import RulesEngine
from engine.word_library import WordLibrary, WordSource

logger = logging.getLogger(__name__)


class GuessOutcome(Enum):
    """What a call to submit_guess did."""
    IGNORED = "ignored"      # Empty input, nothing happened
    REJECTED = "rejected"    # Failed validation, alert raised
    ACCEPTED = "accepted"    # Added to attempts, round continues
    WON = "won"              # Matched the target, new round started
    LOST = "lost"            # Attempt limit exceeded, new round started


@dataclass(frozen=True)
class Alert:
    """A message for the player, shown once and dismissed by acknowledgment."""
    title: str
    message: str


@dataclass
class GameSession:
    """Mutable state for the current round plus the running score."""
    word_length: int
    attempt_limit: int = 5
    target_word: str = ""
    current_guess: str = ""
    attempts: list[str] = field(default_factory=list)  # most recent first
    score: int = 0
    round_number: int = 0


@dataclass(frozen=True)
class GameState:
    """
    Immutable snapshot of the observable game state.
    Emitted after every state change for GUI updates.
    """
    score: int = 0
    word_length: int = 0
    attempts: tuple[str, ...] = ()
    current_guess: str = ""
    attempt_limit: int = 5
    round_number: int = 0
    is_loaded: bool = False
    alert: Optional[Alert] = None

    @property
    def attempts_used(self) -> int:
        return len(self.attempts)

    @property
    def attempts_remaining(self) -> int:
        # One more guess than the limit is allowed before the round is lost
        return max(0, self.attempt_limit + 1 - len(self.attempts))


class GameEngine(QObject):
    """
    Word guessing game state machine.
    Emits Qt Signals so GUI layers can react without polling.

    Usage:
        engine = GameEngine(WordListProvider([...]))
        engine.state_changed.connect(on_state)
        engine.initialize(5)
        engine.submit_guess("crane")
    """

    # Signals
    state_changed = Signal(object)      # GameState
    library_loaded = Signal(int, int)   # word length, word count
    round_started = Signal(int)         # round number
    guess_accepted = Signal(str)        # normalized guess
    guess_rejected = Signal(str)        # InvalidWordReason value
    round_won = Signal(str, int)        # target word, points awarded
    round_lost = Signal(str)            # target word
    score_changed = Signal(int)         # new total score
    alert_raised = Signal(object)       # Alert

    LOSS_TITLE = "You Lose"

    def __init__(self, word_source: WordSource, attempt_limit: int = 5,
                 rules: Optional[RulesEngine] = None,
                 rng: Optional[random.Random] = None):
        """
        Initialize the game engine.

        Nothing is loaded until initialize() or set_word_length() is called.

        Args:
            word_source: Provider of raw word list text by length
            attempt_limit: Valid guesses allowed before a round can be lost
            rules: Validation rules (default: lengths 1-22)
            rng: Random source for target selection
        """
        super().__init__()
        self.word_source = word_source
        self.rules = rules or RulesEngine()
        self._rng = rng or random.Random()
        self._library: Optional[WordLibrary] = None
        self._alert: Optional[Alert] = None
        self._session = GameSession(word_length=0, attempt_limit=attempt_limit)

    # ============ Observable state ============

    @property
    def is_loaded(self) -> bool:
        return self._library is not None

    @property
    def library(self) -> Optional[WordLibrary]:
        return self._library

    @property
    def score(self) -> int:
        return self._session.score

    @property
    def word_length(self) -> int:
        return self._session.word_length

    @property
    def target_word(self) -> str:
        return self._session.target_word

    @property
    def current_guess(self) -> str:
        return self._session.current_guess

    @property
    def attempts(self) -> tuple[str, ...]:
        """Submitted valid guesses for this round, most recent first."""
        return tuple(self._session.attempts)

    @property
    def attempt_limit(self) -> int:
        return self._session.attempt_limit

    @property
    def round_number(self) -> int:
        return self._session.round_number

    @property
    def alert(self) -> Optional[Alert]:
        """The pending, unacknowledged alert, if any."""
        return self._alert

    def feedback(self) -> FeedbackRows:
        """Letter feedback for every attempt, recomputed on each iteration."""
        return FeedbackRows(
            words=lambda: tuple(self._session.attempts),
            target=lambda: self._session.target_word,
        )

    def get_game_state(self) -> GameState:
        """Get the current game state snapshot."""
        return GameState(
            score=self._session.score,
            word_length=self._session.word_length,
            attempts=tuple(self._session.attempts),
            current_guess=self._session.current_guess,
            attempt_limit=self._session.attempt_limit,
            round_number=self._session.round_number,
            is_loaded=self.is_loaded,
            alert=self._alert,
        )

    # ============ Lifecycle ============

    def initialize(self, word_length: int) -> None:
        """
        Load the word library for a length and start a new round on it.

        The previous library and round stay in place if anything fails.

        Raises:
            LoadError: if no list exists for the length
            EmptyLibraryError: if the list holds no usable words
        """
        try:
            text = self.word_source.read(word_length)
        except LoadError:
            logger.error("No word list for length %d", word_length)
            raise
        except OSError as e:
            logger.error("Could not read word list for length %d: %s", word_length, e)
            raise LoadError(word_length, str(e)) from e

        library = WordLibrary.from_text(word_length, text)
        target = self._draw_target(library)

        self._library = library
        self._session.word_length = word_length
        logger.info("Loaded %d words of length %d", len(library), word_length)
        self.library_loaded.emit(word_length, len(library))

        self._begin_round(target)

    def set_word_length(self, word_length: int) -> None:
        """
        Change the word length and reload.

        Raises:
            InvalidLengthError: if the length is outside 1-22
            LoadError: if no list exists for the length
        """
        self.rules.validate_word_length(word_length)
        self.initialize(word_length)

    def start_new_round(self) -> None:
        """
        Pick a new target word and clear the current round.

        Raises:
            EmptyLibraryError: if no words are loaded
        """
        self._begin_round(self._draw_target(self._library))

    def _draw_target(self, library: Optional[WordLibrary]) -> str:
        """Draw a target uniformly from the library's ordered snapshot."""
        if library is None or library.is_empty:
            raise EmptyLibraryError("Cannot start a round: the word library is empty")
        return self._rng.choice(library.ordered)

    def _begin_round(self, target: str) -> None:
        """Reset round state around a freshly drawn target."""
        self._session.target_word = target
        self._session.current_guess = ""
        self._session.attempts = []
        self._session.round_number += 1

        logger.info("Round %d started (%d letters)", self._session.round_number, len(target))
        logger.debug("Round %d target: %s", self._session.round_number, target)
        self.round_started.emit(self._session.round_number)
        self._emit_state_update()

    # ============ Player actions ============

    def update_current_guess(self, text: str) -> None:
        """Store the in-progress input from the text field."""
        self._session.current_guess = text
        self._emit_state_update()

    def submit_guess(self, raw_input: Optional[str] = None) -> GuessOutcome:
        """
        Submit a guess.

        The current guess is always cleared, whether or not the guess counts.

        Args:
            raw_input: Text to submit (default: the current guess)

        Returns:
            The GuessOutcome of this submission
        """
        if self._library is None:
            raise RuntimeError("Cannot submit guess: no word list loaded")

        raw = self._session.current_guess if raw_input is None else raw_input
        guess = self.rules.normalize(raw)
        self._session.current_guess = ""

        if not guess:
            self._emit_state_update()
            return GuessOutcome.IGNORED

        target = self._session.target_word
        try:
            self.rules.validate_guess(guess, len(target), self._library)
        except InvalidWordError as e:
            logger.debug("Rejected guess %r: %s", guess, e.reason.value)
            self.guess_rejected.emit(e.reason.value)
            self.post_alert(e.title, str(e))
            return GuessOutcome.REJECTED

        self._session.attempts.insert(0, guess)
        self.guess_accepted.emit(guess)

        if target in self._session.attempts:
            points = len(target)
            self._session.score += points
            logger.info("Round %d won in %d attempt(s), +%d points",
                        self._session.round_number, len(self._session.attempts), points)
            self.score_changed.emit(self._session.score)
            self.round_won.emit(target, points)
            self.start_new_round()
            return GuessOutcome.WON

        if len(self._session.attempts) > self._session.attempt_limit:
            logger.info("Round %d lost, the word was %s", self._session.round_number, target)
            self.post_alert(self.LOSS_TITLE, f"The wordle was {target}.")
            self.round_lost.emit(target)
            self.start_new_round()
            return GuessOutcome.LOST

        self._emit_state_update()
        return GuessOutcome.ACCEPTED

    # ============ Alerts ============

    def post_alert(self, title: str, message: str) -> None:
        """Show an alert, replacing any that has not been acknowledged."""
        self._alert = Alert(title=title, message=message)
        self.alert_raised.emit(self._alert)
        self._emit_state_update()

    def acknowledge_alert(self) -> None:
        """Dismiss the pending alert."""
        if self._alert is None:
            return
        self._alert = None
        self._emit_state_update()

    def _emit_state_update(self) -> None:
        """Emit the current state snapshot."""
        self.state_changed.emit(self.get_game_state())
