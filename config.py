"""
WordGames Configuration

Centralized settings, paths, and constants for the application.
"""

from pathlib import Path
from dataclasses import dataclass
import appdirs


# Application info
APP_NAME = "WordGames"
APP_AUTHOR = "WordGames"
APP_VERSION = "1.0.0"


@dataclass(frozen=True)
class Paths:
    """Application paths."""
    # Data directory (stores user-supplied word lists)
    data_dir: Path = Path(appdirs.user_data_dir(APP_NAME, APP_AUTHOR))

    # Config directory (stores user preferences)
    config_dir: Path = Path(appdirs.user_config_dir(APP_NAME, APP_AUTHOR))

    # Log directory
    log_dir: Path = Path(appdirs.user_log_dir(APP_NAME, APP_AUTHOR))

    @property
    def word_lists(self) -> Path:
        return self.data_dir / "wordlists"

    @property
    def log_file(self) -> Path:
        return self.log_dir / "wordgames.log"

    def ensure_directories(self) -> None:
        """Create all required directories."""
        for dir_path in [self.data_dir, self.config_dir, self.log_dir, self.word_lists]:
            dir_path.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class GameSettings:
    """Game rule settings."""
    # Word length the game starts with
    default_word_length: int = 7

    # Inclusive range accepted by the word length stepper
    min_word_length: int = 1
    max_word_length: int = 22

    # Valid guesses allowed before the round is lost
    attempt_limit: int = 5

    # Word lists shipped with the application (one <length>.txt per length)
    bundled_word_lists: Path = Path(__file__).parent / "engine" / "wordlists"


@dataclass(frozen=True)
class UISettings:
    """UI-related settings."""
    # Minimum window size
    min_width: int = 420
    min_height: int = 640

    # Font sizes
    title_font_size: int = 28
    score_font_size: int = 14
    letter_font_size: int = 18


# Singleton instances
PATHS = Paths()
GAME_SETTINGS = GameSettings()
UI_SETTINGS = UISettings()


def init_config() -> None:
    """Initialize configuration and create required directories."""
    PATHS.ensure_directories()
