"""
Word Library - Fixed-length word sets and the files they are read from.

A WordLibrary is loaded once per word length and replaced whole when the
length changes. Lists live on disk as newline-separated text, one file per
length named ``<length>.txt``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path
from typing import Protocol, Sequence

from engine.errors import LoadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordLibrary:
    """
    Immutable set of lowercase words that all have the same length.

    File format:
      apple
      grape
      mango
      ...
    """
    word_length: int
    words: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self):
        wrong = [w for w in self.words if len(w) != self.word_length]
        if wrong:
            raise ValueError(
                f"{len(wrong)} word(s) do not have {self.word_length} letters, e.g. {wrong[0]!r}"
            )

    @classmethod
    def from_text(cls, word_length: int, text: str) -> WordLibrary:
        """
        Parse newline-separated word list text.

        Lines are stripped and lowercased; empty lines are discarded and lines
        of the wrong length are skipped with a warning.
        """
        words: set[str] = set()
        skipped = 0

        for line in text.splitlines():
            word = line.strip().lower()
            if not word:
                continue
            if len(word) != word_length:
                skipped += 1
                continue
            words.add(word)

        if skipped:
            logger.warning(
                "Skipped %d line(s) that are not %d letters long", skipped, word_length
            )
        return cls(word_length=word_length, words=frozenset(words))

    @cached_property
    def ordered(self) -> tuple[str, ...]:
        """Sorted snapshot of the words, used for indexed random draws."""
        return tuple(sorted(self.words))

    @property
    def is_empty(self) -> bool:
        return not self.words

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, word: object) -> bool:
        return word in self.words


class WordSource(Protocol):
    """Anything that can return the raw text of a word list by length."""

    def read(self, word_length: int) -> str:
        ...


class WordListProvider:
    """
    Reads ``<length>.txt`` word lists from an ordered list of directories.

    The first directory holding a file for the requested length wins, so a
    user directory placed ahead of the bundled one overrides shipped lists.

    Usage:
        provider = WordListProvider([PATHS.word_lists, GAME_SETTINGS.bundled_word_lists])
        text = provider.read(5)
    """

    def __init__(self, search_dirs: Sequence[Path]):
        self.search_dirs = [Path(d) for d in search_dirs]

    def path_for(self, word_length: int) -> Path | None:
        """Return the first existing list file for a length, or None."""
        for directory in self.search_dirs:
            candidate = directory / f"{word_length}.txt"
            if candidate.is_file():
                return candidate
        return None

    def available_lengths(self) -> list[int]:
        """All lengths that have a list in any search directory."""
        lengths: set[int] = set()
        for directory in self.search_dirs:
            if not directory.is_dir():
                continue
            for path in directory.glob("*.txt"):
                if path.stem.isdigit():
                    lengths.add(int(path.stem))
        return sorted(lengths)

    def read(self, word_length: int) -> str:
        """
        Return the full text of the list for a word length.

        Raises:
            LoadError: if no list exists or it cannot be read
        """
        path = self.path_for(word_length)
        if path is None:
            raise LoadError(word_length)

        try:
            # utf-8 with errors ignored to be resilient to odd characters
            return path.read_text(encoding="utf-8", errors="ignore")
        except OSError as e:
            raise LoadError(word_length, str(e)) from e
