"""
WordGames Game Engine

Core game logic for the word guessing game.
This module contains no GUI dependencies.
"""

from engine.errors import (
    WordGameError,
    LoadError,
    InvalidLengthError,
    EmptyLibraryError,
    InvalidWordError,
    InvalidWordReason,
)
from engine.word_library import WordLibrary, WordListProvider
from engine.feedback import LetterStatus, LetterFeedback, FeedbackRow, FeedbackRows, compute_letter_feedback
from engine.rules import RulesEngine
from engine.game import GameEngine, GameSession, GameState, GuessOutcome, Alert

__all__ = [
    "WordGameError",
    "LoadError",
    "InvalidLengthError",
    "EmptyLibraryError",
    "InvalidWordError",
    "InvalidWordReason",
    "WordLibrary",
    "WordListProvider",
    "LetterStatus",
    "LetterFeedback",
    "FeedbackRow",
    "FeedbackRows",
    "compute_letter_feedback",
    "RulesEngine",
    "GameEngine",
    "GameSession",
    "GameState",
    "GuessOutcome",
    "Alert",
]
