"""
Rules Engine - Guess normalization and validation.

Handles the checks a guess must pass before it counts as an attempt.
"""

from typing import Optional

from engine.errors import InvalidLengthError, InvalidWordError, InvalidWordReason
from engine.word_library import WordLibrary


class RulesEngine:
    """
    Enforces the word game rules.

    Stateless: the library and target length are passed in on every call.
    """

    # Supported word lengths (inclusive)
    MIN_WORD_LENGTH = 1
    MAX_WORD_LENGTH = 22

    def __init__(self, min_word_length: int = MIN_WORD_LENGTH,
                 max_word_length: int = MAX_WORD_LENGTH):
        self.min_word_length = min_word_length
        self.max_word_length = max_word_length

    @staticmethod
    def normalize(raw_input: str) -> str:
        """Lowercase a guess and strip surrounding whitespace."""
        return raw_input.lower().strip()

    def validate_word_length(self, word_length: int) -> int:
        """
        Check a requested word length.

        Raises:
            InvalidLengthError: if the value is not an int in range
        """
        if isinstance(word_length, bool) or not isinstance(word_length, int):
            raise InvalidLengthError(f"Word length must be an integer, got {word_length!r}")
        if not self.min_word_length <= word_length <= self.max_word_length:
            raise InvalidLengthError(
                f"Word length must be between {self.min_word_length} and "
                f"{self.max_word_length}, got {word_length}"
            )
        return word_length

    @staticmethod
    def check_guess(guess: str, target_length: int, library: WordLibrary) -> Optional[InvalidWordReason]:
        """
        Return why a normalized, non-empty guess is invalid, or None if it is valid.

        Checks run in priority order and stop at the first failure.
        """
        if len(guess) < target_length:
            return InvalidWordReason.TOO_SHORT
        if len(guess) > target_length:
            return InvalidWordReason.TOO_LONG
        if guess not in library:
            return InvalidWordReason.NOT_IN_DICTIONARY
        return None

    def validate_guess(self, guess: str, target_length: int, library: WordLibrary) -> str:
        """
        Validate a normalized guess.

        Returns:
            The guess, unchanged, if valid

        Raises:
            InvalidWordError: with the first failing reason
        """
        reason = self.check_guess(guess, target_length, library)
        if reason is not None:
            raise InvalidWordError(reason, guess)
        return guess
