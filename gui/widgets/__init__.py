"""
WordGames GUI Widgets

Reusable widget components for the game window.
"""

from gui.widgets.attempt_list import AttemptListWidget, row_to_html
from gui.widgets.scoreboard import ScoreboardWidget

__all__ = [
    "AttemptListWidget",
    "row_to_html",
    "ScoreboardWidget",
]
