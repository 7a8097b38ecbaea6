"""
Unit tests for the GameEngine.

Tests cover loading, round lifecycle, guess submission, scoring and alerts.
"""

import pytest
from unittest.mock import MagicMock

from engine.game import GameEngine, GameState, GuessOutcome, Alert
from engine.errors import (
    LoadError, InvalidLengthError, EmptyLibraryError, InvalidWordReason,
)
from engine.feedback import LetterStatus

from conftest import FakeWordSource, FRUIT_WORDS, fixed_rng


class TestGameEngineLoading:
    """Tests for initialize, set_word_length and start_new_round."""

    def setup_method(self):
        self.source = FakeWordSource({
            5: "\n".join(FRUIT_WORDS) + "\n",
            4: "kiwi\nlime\npear\nplum\n",
            3: "\n\n",
        })
        self.engine = GameEngine(self.source)

    def test_nothing_loaded_initially(self):
        """A new engine has no library and no round."""
        state = self.engine.get_game_state()

        assert not self.engine.is_loaded
        assert not state.is_loaded
        assert state.round_number == 0
        assert self.engine.target_word == ""

    def test_initialize_loads_and_starts_round(self):
        """initialize picks a target of the requested length from the list."""
        self.engine.initialize(5)

        assert self.engine.is_loaded
        assert self.engine.word_length == 5
        assert len(self.engine.target_word) == 5
        assert self.engine.target_word in FRUIT_WORDS
        assert self.engine.round_number == 1
        assert self.engine.attempts == ()

    def test_initialize_emits_signals(self):
        """Loading reports the library size, round start and new state."""
        loaded, started, changed = MagicMock(), MagicMock(), MagicMock()
        self.engine.library_loaded.connect(loaded)
        self.engine.round_started.connect(started)
        self.engine.state_changed.connect(changed)

        self.engine.initialize(4)

        loaded.assert_called_once_with(4, 4)
        started.assert_called_once_with(1)
        state = changed.call_args[0][0]
        assert isinstance(state, GameState)
        assert state.word_length == 4

    def test_target_drawn_from_sorted_snapshot(self):
        """Random selection indexes a sorted tuple of the library."""
        rng = fixed_rng("kiwi")
        engine = GameEngine(self.source, rng=rng)

        engine.initialize(4)

        rng.choice.assert_called_once_with(("kiwi", "lime", "pear", "plum"))
        assert engine.target_word == "kiwi"

    def test_missing_list_raises_load_error(self):
        """A length with no list fails with LoadError."""
        with pytest.raises(LoadError):
            self.engine.initialize(9)

        assert not self.engine.is_loaded

    def test_failed_load_keeps_previous_game(self):
        """A failed reload leaves the current library and round intact."""
        self.engine.initialize(5)
        self.engine.update_current_guess("gra")
        target = self.engine.target_word
        library = self.engine.library

        with pytest.raises(LoadError):
            self.engine.initialize(9)

        assert self.engine.word_length == 5
        assert self.engine.target_word == target
        assert self.engine.library is library
        assert self.engine.current_guess == "gra"
        assert self.engine.round_number == 1

    def test_empty_list_keeps_previous_game(self):
        """A list with no words raises EmptyLibraryError without switching."""
        self.engine.initialize(5)

        with pytest.raises(EmptyLibraryError):
            self.engine.initialize(3)

        assert self.engine.word_length == 5
        assert len(self.engine.library) == len(FRUIT_WORDS)

    def test_set_word_length_reloads(self):
        """Changing the length loads the matching list and starts a round."""
        self.engine.initialize(5)
        self.engine.set_word_length(4)

        assert self.engine.word_length == 4
        assert len(self.engine.target_word) == 4
        assert self.engine.round_number == 2
        assert self.source.calls == [5, 4]

    @pytest.mark.parametrize("length", [0, 23, -5])
    def test_set_word_length_rejects_out_of_range(self, length):
        """Out-of-range lengths never reach the provider."""
        with pytest.raises(InvalidLengthError):
            self.engine.set_word_length(length)

        assert self.source.calls == []

    def test_start_new_round_clears_round(self):
        """A new round clears the guess and attempts but keeps the score."""
        engine = GameEngine(self.source, rng=fixed_rng("apple"))
        engine.initialize(5)
        engine.submit_guess("grape")
        engine.update_current_guess("me")

        engine.start_new_round()

        assert engine.attempts == ()
        assert engine.current_guess == ""
        assert engine.round_number == 2

    def test_start_new_round_without_library(self):
        """Starting a round before anything is loaded is guarded."""
        with pytest.raises(EmptyLibraryError):
            self.engine.start_new_round()

    def test_submit_without_library(self):
        """Submitting before anything is loaded is an invalid action."""
        with pytest.raises(RuntimeError, match="no word list loaded"):
            self.engine.submit_guess("apple")


class TestGameEngineGuesses:
    """Tests for submit_guess."""

    def setup_method(self):
        self.source = FakeWordSource({5: "\n".join(FRUIT_WORDS) + "\n"})
        self.engine = GameEngine(self.source, attempt_limit=5, rng=fixed_rng("apple"))
        self.engine.initialize(5)

    def test_valid_guess_is_prepended(self):
        """Accepted guesses are stored most recent first."""
        assert self.engine.submit_guess("grape") == GuessOutcome.ACCEPTED
        assert self.engine.submit_guess("mango") == GuessOutcome.ACCEPTED

        assert self.engine.attempts == ("mango", "grape")
        assert self.engine.score == 0

    def test_guess_is_normalized(self):
        """Case and surrounding whitespace do not matter."""
        self.engine.submit_guess("  GRAPE\n")

        assert self.engine.attempts == ("grape",)

    def test_submit_uses_current_guess_by_default(self):
        """With no argument the in-progress guess is submitted."""
        self.engine.update_current_guess("Grape")

        assert self.engine.submit_guess() == GuessOutcome.ACCEPTED
        assert self.engine.attempts == ("grape",)

    @pytest.mark.parametrize("guess", ["grape", "zzzzz", "ap", "", "   ", "apple"])
    def test_current_guess_always_cleared(self, guess):
        """The input is consumed whatever the outcome."""
        self.engine.update_current_guess(guess)
        self.engine.submit_guess()

        assert self.engine.current_guess == ""
        assert self.engine.get_game_state().current_guess == ""

    @pytest.mark.parametrize("guess", ["", "   ", "\t\n"])
    def test_empty_guess_is_ignored(self, guess):
        """Blank input changes nothing and raises no alert."""
        self.engine.submit_guess("grape")
        alerts = MagicMock()
        self.engine.alert_raised.connect(alerts)

        assert self.engine.submit_guess(guess) == GuessOutcome.IGNORED

        assert self.engine.attempts == ("grape",)
        assert self.engine.score == 0
        assert self.engine.alert is None
        alerts.assert_not_called()

    @pytest.mark.parametrize("guess, reason, message", [
        ("app", InvalidWordReason.TOO_SHORT, "Your guess is shorter than the Wordle."),
        ("applesauce", InvalidWordReason.TOO_LONG, "Your guess is longer than the Wordle."),
        ("zzzzz", InvalidWordReason.NOT_IN_DICTIONARY, "Your guess is not a real word."),
    ])
    def test_invalid_guess_raises_alert(self, guess, reason, message):
        """Each rejection reason produces its own alert."""
        rejected = MagicMock()
        self.engine.guess_rejected.connect(rejected)

        assert self.engine.submit_guess(guess) == GuessOutcome.REJECTED

        assert self.engine.alert == Alert(title="Invalid Word", message=message)
        assert self.engine.attempts == ()
        assert self.engine.target_word == "apple"
        rejected.assert_called_once_with(reason.value)

    def test_new_alert_overwrites_pending_one(self):
        """Only the latest unacknowledged alert is kept."""
        self.engine.submit_guess("app")
        self.engine.submit_guess("applesauce")

        assert self.engine.alert.message == "Your guess is longer than the Wordle."

    def test_acknowledge_alert_clears_it(self):
        """Acknowledging dismisses the alert."""
        self.engine.submit_guess("zzzzz")
        self.engine.acknowledge_alert()

        assert self.engine.alert is None
        assert self.engine.get_game_state().alert is None

    def test_winning_guess_scores_word_length(self):
        """Guessing the target adds its length to the score and starts a new round."""
        won, score = MagicMock(), MagicMock()
        self.engine.round_won.connect(won)
        self.engine.score_changed.connect(score)
        self.engine.submit_guess("grape")

        assert self.engine.submit_guess("apple") == GuessOutcome.WON

        assert self.engine.score == 5
        assert self.engine.round_number == 2
        assert self.engine.attempts == ()
        assert self.engine.alert is None
        won.assert_called_once_with("apple", 5)
        score.assert_called_once_with(5)

    def test_score_accumulates_across_rounds(self):
        """Score survives new rounds and only goes up."""
        self.engine.submit_guess("apple")
        self.engine.submit_guess("apple")
        self.engine.start_new_round()

        assert self.engine.score == 10

    def test_score_survives_word_length_change(self):
        """Changing length resets the round but not the score."""
        self.source.lists[4] = "kiwi\n"
        self.engine.submit_guess("apple")

        self.engine.set_word_length(4)

        assert self.engine.score == 5
        assert self.engine.target_word == "kiwi"

    def test_loss_after_limit_exceeded(self):
        """The round is lost once attempts exceed the limit."""
        lost = MagicMock()
        self.engine.round_lost.connect(lost)
        wrong = ["grape", "mango", "lemon", "melon", "peach"]

        for guess in wrong:
            assert self.engine.submit_guess(guess) == GuessOutcome.ACCEPTED
        assert self.engine.alert is None
        assert self.engine.get_game_state().attempts_remaining == 1

        assert self.engine.submit_guess("berry") == GuessOutcome.LOST

        assert self.engine.alert == Alert(title="You Lose", message="The wordle was apple.")
        assert self.engine.attempts == ()
        assert self.engine.round_number == 2
        assert self.engine.score == 0
        lost.assert_called_once_with("apple")

    def test_win_on_last_allowed_attempt(self):
        """Solving on the final allowed guess still wins."""
        for guess in ["grape", "mango", "lemon", "melon", "peach"]:
            self.engine.submit_guess(guess)

        assert self.engine.submit_guess("apple") == GuessOutcome.WON
        assert self.engine.score == 5

    def test_rejected_guesses_do_not_count(self):
        """Invalid guesses use no attempts."""
        for _ in range(10):
            self.engine.submit_guess("zzzzz")

        assert self.engine.attempts == ()
        assert self.engine.round_number == 1


class TestGameEngineFeedback:
    """Tests for feedback exposed by the engine."""

    def setup_method(self):
        source = FakeWordSource({5: "apple\ngrape\nmango\n"})
        self.engine = GameEngine(source, rng=fixed_rng("apple"))
        self.engine.initialize(5)

    def test_grape_against_apple(self):
        """The documented apple/grape example."""
        self.engine.submit_guess("grape")

        rows = list(self.engine.feedback())

        assert self.engine.attempts == ("grape",)
        assert len(rows) == 1
        assert rows[0].statuses == (
            LetterStatus.ABSENT,
            LetterStatus.ABSENT,
            LetterStatus.PRESENT,
            LetterStatus.PRESENT,
            LetterStatus.CORRECT,
        )

    def test_feedback_is_repeatable(self):
        """Reading feedback twice gives the same rows and changes nothing."""
        self.engine.submit_guess("grape")
        self.engine.submit_guess("mango")
        feedback = self.engine.feedback()

        first = list(feedback)
        second = list(feedback)

        assert first == second
        assert self.engine.attempts == ("mango", "grape")

    def test_feedback_tracks_new_attempts(self):
        """A feedback view picks up guesses made after it was created."""
        feedback = self.engine.feedback()
        assert list(feedback) == []

        self.engine.submit_guess("grape")

        assert [row.word for row in feedback] == ["grape"]

    def test_reversed_feedback_is_oldest_first(self):
        """reversed() renders in submission order."""
        self.engine.submit_guess("grape")
        self.engine.submit_guess("mango")

        assert [row.word for row in reversed(self.engine.feedback())] == ["grape", "mango"]


class TestGameState:
    """Tests for the state snapshot."""

    def test_attempts_remaining(self):
        """One more guess than the limit is allowed before losing."""
        state = GameState(attempts=("grape", "mango"), attempt_limit=5)

        assert state.attempts_used == 2
        assert state.attempts_remaining == 4

    def test_snapshot_is_detached(self):
        """Snapshots do not change when the engine moves on."""
        engine = GameEngine(FakeWordSource({5: "apple\ngrape\n"}), rng=fixed_rng("apple"))
        engine.initialize(5)
        engine.submit_guess("grape")
        state = engine.get_game_state()

        engine.submit_guess("apple")

        assert state.attempts == ("grape",)
        assert state.score == 0
