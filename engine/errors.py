"""
Game errors.

Every failure the engine reports derives from WordGameError so the shell can
catch the whole family in one place.
"""

import enum


class WordGameError(Exception):
    """Base class for word game errors."""


class LoadError(WordGameError):
    """No readable word list exists for the requested length."""

    def __init__(self, word_length: int, detail: str = ""):
        self.word_length = word_length
        message = f"No word list available for {word_length}-letter words"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class InvalidLengthError(WordGameError, ValueError):
    """Requested word length is outside the supported range."""


class EmptyLibraryError(WordGameError):
    """A round was started on a library with no words."""


class InvalidWordReason(enum.Enum):
    """Why a guess was rejected, in validation priority order."""
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    NOT_IN_DICTIONARY = "not_in_dictionary"

    @property
    def message(self) -> str:
        return _REASON_MESSAGES[self]


_REASON_MESSAGES = {
    InvalidWordReason.TOO_SHORT: "Your guess is shorter than the Wordle.",
    InvalidWordReason.TOO_LONG: "Your guess is longer than the Wordle.",
    InvalidWordReason.NOT_IN_DICTIONARY: "Your guess is not a real word.",
}


class InvalidWordError(WordGameError):
    """A non-empty guess failed validation."""

    title = "Invalid Word"

    def __init__(self, reason: InvalidWordReason, guess: str = ""):
        self.reason = reason
        self.guess = guess
        super().__init__(reason.message)
