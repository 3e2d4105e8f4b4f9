"""Hook output records and message text.

The controller hands plain data to these helpers; terminal styling and the
rendering of escape sequences stored in summaries happen here only.
"""

from dataclasses import dataclass
from typing import Any

from cc_version_updater.display.colors import Colors
from cc_version_updater.state.models import PostUpgradeSummary

PLUGIN_TAG = "[cc-version-updater]"
RULE = "━" * 46


@dataclass
class HookOutput:
    """Output record for the Claude Code SessionStart hook."""

    system_message: str = ""
    additional_context: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output; empty fields are omitted."""
        result: dict[str, Any] = {}
        if self.system_message:
            result["systemMessage"] = self.system_message
            if self.additional_context:
                result["additionalContext"] = self.additional_context
        return result


def render_escape_sequences(text: str) -> str:
    """Turn literal '\\033' sequences written by the upgrade flow into ESC."""
    return text.replace("\\033", "\x1b")


def version_qualifier(version_count: int) -> str:
    """' (N versions)' when more than one version is pending, else ''."""
    return f" ({version_count} versions)" if version_count > 1 else ""


def format_update_notice(
    current_version: str,
    latest_version: str,
    version_count: int,
    upgrade_command: str = "/update-claude",
) -> HookOutput:
    """Build the boxed 'new version available' notice.

    Args:
        current_version: Installed version.
        latest_version: Latest published version.
        version_count: Number of releases between the two (at least 1).
        upgrade_command: Slash command that applies the upgrade.

    Returns:
        HookOutput with the banner and the model-facing context.
    """
    b, o, r = Colors.BOLD_BLUE, Colors.ORANGE, Colors.RESET
    qualifier = version_qualifier(version_count)

    system_message = (
        f"\n{b}{RULE}\n"
        f"   New Claude Code version available!\n"
        f"\n"
        f"   Current: v{current_version}  →  Latest: v{latest_version}{qualifier}\n"
        f"\n"
        f"   Run {o}{upgrade_command} {b}to upgrade.\n"
        f"{b}{RULE}{r}"
    )
    additional_context = (
        f"A new version v{latest_version} of Claude Code is available "
        f"({version_count} version(s) to upgrade). "
        f"The current version is v{current_version}. "
        f"If the user wants to upgrade, guide them to use the {upgrade_command} command."
    )
    return HookOutput(system_message=system_message, additional_context=additional_context)


def format_post_upgrade_summary(summary: PostUpgradeSummary) -> HookOutput:
    """Build the one-time 'you have been upgraded' message."""
    additional_context = (
        f"{PLUGIN_TAG} Claude Code has been upgraded from "
        f"v{summary.previous_version} to v{summary.latest_version}. "
        "The summary above has been displayed. If the user asks follow-up "
        "questions, refer to the changelog-interpreter skill for guidance."
    )
    return HookOutput(
        system_message=f"\n{render_escape_sequences(summary.summary)}",
        additional_context=additional_context,
    )


__all__ = [
    "HookOutput",
    "render_escape_sequences",
    "version_qualifier",
    "format_update_notice",
    "format_post_upgrade_summary",
]
