"""
QuizBoard Configuration

Centralized settings, paths, and constants for the application.
"""

from pathlib import Path
from dataclasses import dataclass
import appdirs


# Application info
APP_NAME = "QuizBoard"
APP_AUTHOR = "QuizBoard"
APP_VERSION = "1.0.0"

# Bundled data shipped next to the source tree
BUNDLED_DATA_DIR = Path(__file__).parent / "data"


@dataclass(frozen=True)
class Paths:
    """Application paths."""
    # Config directory (stores user board templates)
    config_dir: Path = Path(appdirs.user_config_dir(APP_NAME, APP_AUTHOR))

    # Log directory
    log_dir: Path = Path(appdirs.user_log_dir(APP_NAME, APP_AUTHOR))

    @property
    def default_board(self) -> Path:
        return BUNDLED_DATA_DIR / "categories.json"

    @property
    def user_board(self) -> Path:
        return self.config_dir / "categories.json"

    @property
    def log_file(self) -> Path:
        return self.log_dir / "quizboard.log"

    def ensure_directories(self) -> None:
        """Create all required directories."""
        for dir_path in [self.config_dir, self.log_dir]:
            dir_path.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class TimerSettings:
    """Countdown settings."""
    # Number of ticks the answer countdown runs for
    countdown_ticks: int = 3

    # Interval between ticks in milliseconds
    tick_interval_ms: int = 1000


@dataclass(frozen=True)
class BoardSettings:
    """Board layout settings."""
    # Daily Doubles drawn per game
    special_count: int = 2


@dataclass(frozen=True)
class TeamSettings:
    """Team identifiers and display names."""
    team_ids: tuple[str, ...] = ("team1", "team2")
    display_names: tuple[str, ...] = ("Team 1", "Team 2")

    def display_name(self, team_id: str) -> str:
        return dict(zip(self.team_ids, self.display_names)).get(team_id, team_id)


@dataclass(frozen=True)
class UISettings:
    """UI-related settings."""
    # Minimum window size
    min_width: int = 1100
    min_height: int = 760

    # Font sizes
    value_font_size: int = 20
    clue_font_size: int = 22
    score_font_size: int = 28
    countdown_font_size: int = 36


# Singleton instances
PATHS = Paths()
TIMER_SETTINGS = TimerSettings()
BOARD_SETTINGS = BoardSettings()
TEAM_SETTINGS = TeamSettings()
UI_SETTINGS = UISettings()


def init_config() -> None:
    """Initialize configuration and create required directories."""
    PATHS.ensure_directories()
