"""ANSI color codes for hook messages.

Hook stdout is always a pipe, so colors are not tied to TTY detection.
Claude Code renders the codes in the systemMessage; set
CC_VERSION_UPDATER_NO_COLOR to any non-empty value to turn them off.
"""

import os


class Colors:
    """ANSI color codes for the update notice."""

    RESET = "\033[0m"
    BOLD_BLUE = "\033[1;34m"
    ORANGE = "\033[38;5;208m"


def supports_color() -> bool:
    """Check whether colored output is enabled.

    Returns:
        True if colors should be emitted, False otherwise.
    """
    return not os.environ.get("CC_VERSION_UPDATER_NO_COLOR")


def init_colors() -> None:
    """Blank out all color codes when colors are disabled."""
    if not supports_color():
        for attr in dir(Colors):
            if not attr.startswith("_"):
                setattr(Colors, attr, "")


# Auto-initialize on import
init_colors()

__all__ = ["Colors", "supports_color", "init_colors"]
