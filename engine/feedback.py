"""
Letter Feedback - Per-letter classification of a guess against the target.

Feedback is never stored. It is recomputed from the guess and target every
time it is read.

A letter is PRESENT whenever the target contains it anywhere, without
counting how many times. A guess with a repeated letter can therefore show
that letter as PRESENT more often than it occurs in the target.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, Sequence


class LetterStatus(Enum):
    """Classification of one guessed letter."""
    CORRECT = "correct"    # Same letter at the same position
    PRESENT = "present"    # Letter appears elsewhere in the target
    ABSENT = "absent"      # Letter does not appear in the target


@dataclass(frozen=True)
class LetterFeedback:
    """Feedback for a single letter in a guess."""
    letter: str
    position: int
    status: LetterStatus


def compute_letter_feedback(guess: str, target: str) -> tuple[LetterFeedback, ...]:
    """
    Classify every letter of a guess against the target word.

    Args:
        guess: The guessed word (same length as target)
        target: The word being guessed

    Returns:
        One LetterFeedback per letter of the guess, in order
    """
    result = []
    for i, letter in enumerate(guess):
        if i < len(target) and target[i] == letter:
            status = LetterStatus.CORRECT
        elif letter in target:
            status = LetterStatus.PRESENT
        else:
            status = LetterStatus.ABSENT
        result.append(LetterFeedback(letter=letter, position=i, status=status))
    return tuple(result)


@dataclass(frozen=True)
class FeedbackRow:
    """A guessed word together with its letter feedback."""
    word: str
    letters: tuple[LetterFeedback, ...]

    @property
    def statuses(self) -> tuple[LetterStatus, ...]:
        return tuple(lf.status for lf in self.letters)

    @property
    def is_solved(self) -> bool:
        return all(lf.status == LetterStatus.CORRECT for lf in self.letters)


class FeedbackRows:
    """
    Lazy view of feedback for a sequence of guesses.

    Rows are computed on iteration, never cached, and every iteration starts
    over from the current words and target. Iteration follows the order of
    the guesses; use reversed() for the opposite order.
    """

    def __init__(self, words: Callable[[], Sequence[str]], target: Callable[[], str]):
        self._words = words
        self._target = target

    def __iter__(self) -> Iterator[FeedbackRow]:
        target = self._target()
        for word in self._words():
            yield FeedbackRow(word=word, letters=compute_letter_feedback(word, target))

    def __reversed__(self) -> Iterator[FeedbackRow]:
        target = self._target()
        for word in reversed(self._words()):
            yield FeedbackRow(word=word, letters=compute_letter_feedback(word, target))

    def __len__(self) -> int:
        return len(self._words())
