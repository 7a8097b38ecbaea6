"""
Shared test helpers for WordGames tests.
"""

from unittest.mock import MagicMock

from engine.errors import LoadError


FRUIT_WORDS = ["apple", "grape", "mango", "lemon", "melon", "peach", "berry", "olive"]


class FakeWordSource:
    """In-memory word lists keyed by length."""

    def __init__(self, lists: dict):
        self.lists = lists
        self.calls: list[int] = []

    def read(self, word_length: int) -> str:
        self.calls.append(word_length)
        if word_length not in self.lists:
            raise LoadError(word_length)
        return self.lists[word_length]


def fixed_rng(word: str) -> MagicMock:
    """A random source whose choice() always returns the given word."""
    rng = MagicMock()
    rng.choice.side_effect = lambda seq: word if word in seq else seq[0]
    return rng
