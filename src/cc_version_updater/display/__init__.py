"""Hook output formatting.

Modules:
    colors: ANSI color codes
    messages: Notice and summary text, hook output record
"""

from cc_version_updater.display.colors import Colors, init_colors, supports_color
from cc_version_updater.display.messages import (
    HookOutput,
    format_post_upgrade_summary,
    format_update_notice,
    render_escape_sequences,
)

__all__ = [
    "Colors",
    "init_colors",
    "supports_color",
    "HookOutput",
    "format_post_upgrade_summary",
    "format_update_notice",
    "render_escape_sequences",
]
