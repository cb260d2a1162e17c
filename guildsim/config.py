"""
guildsim Configuration

Loads campaign defaults from environment variables with sensible defaults.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .catalog import DifficultyLevel

# Load .env file if it exists
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


def _env_seed() -> Optional[int]:
    raw = os.getenv("GUILDSIM_SEED")
    if raw is None or raw.strip() == "":
        return None
    return int(raw)


class Config:
    """Application configuration loaded from environment variables."""

    # Campaign Configuration
    DIFFICULTY: str = os.getenv("GUILDSIM_DIFFICULTY", "normal")
    SEED: Optional[int] = _env_seed()
    DEFAULT_WEEKS: int = int(os.getenv("GUILDSIM_WEEKS", "12"))
    PERMADEATH: bool = _env_flag("GUILDSIM_PERMADEATH")

    # Output
    SAVE_DIR: str = os.getenv("GUILDSIM_SAVE_DIR", "campaign_runs")
    VERBOSE: bool = _env_flag("GUILDSIM_VERBOSE")

    # Project Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    SCENARIOS_DIR: Path = PROJECT_ROOT / "examples" / "scenarios"

    @classmethod
    def difficulty(cls) -> DifficultyLevel:
        """The configured difficulty as an enum member."""
        return DifficultyLevel(cls.DIFFICULTY.strip().lower())

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors for unusable values."""
        valid = [level.value for level in DifficultyLevel]
        if cls.DIFFICULTY.strip().lower() not in valid:
            raise ValueError(
                f"GUILDSIM_DIFFICULTY must be one of {', '.join(valid)} "
                f"(got '{cls.DIFFICULTY}')"
            )

        if cls.DEFAULT_WEEKS < 0:
            raise ValueError("GUILDSIM_WEEKS cannot be negative")

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "guildsim Configuration:",
            f"  Difficulty: {cls.DIFFICULTY}",
            f"  Seed: {cls.SEED if cls.SEED is not None else 'random'}",
            f"  Default Weeks: {cls.DEFAULT_WEEKS}",
            f"  Permadeath: {'on' if cls.PERMADEATH else 'off'}",
            f"  Save Dir: {cls.SAVE_DIR}",
        ]
        return "\n".join(lines)
