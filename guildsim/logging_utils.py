"""Logging utilities for guildsim campaigns.

Provides color-coded output to separate routine weekly bookkeeping from
noteworthy outcomes and warnings.
"""

import os
from enum import Enum


class Color(Enum):
    """ANSI color codes for terminal output."""

    # Colors for message types
    BLUE = "\033[94m"      # Deterministic bookkeeping (wages, calendar)
    YELLOW = "\033[93m"    # Warnings (debt, council unrest)
    RED = "\033[91m"       # Errors
    GREEN = "\033[92m"     # Success/completion
    CYAN = "\033[96m"      # Info/metadata

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes if colors are enabled.

    Args:
        text: Text to colorize
        color: Color to apply
        bold: Whether to make text bold

    Returns:
        Colorized text if GUILDSIM_NO_COLOR is not set, otherwise plain text
    """
    if os.getenv("GUILDSIM_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def log_deterministic(message: str) -> None:
    """Log routine bookkeeping (blue)."""
    print(colored(message, Color.BLUE))


def log_warning(message: str) -> None:
    """Log a warning (yellow)."""
    print(colored(message, Color.YELLOW))


def log_error(message: str) -> None:
    """Log an error (red)."""
    print(colored(message, Color.RED))


def log_success(message: str) -> None:
    """Log a success (green)."""
    print(colored(message, Color.GREEN))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    print(colored(message, Color.CYAN))


# Markers for message types (color-blind accessible)
LOG_TAG_DETERMINISTIC = "[•]"
LOG_TAG_INFO = "[i]"
LOG_TAG_SUCCESS = "[✓]"
LOG_TAG_WARNING = "[!]"
