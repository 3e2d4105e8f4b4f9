"""
Tests for hook output formatting.

Tests cover:
- HookOutput.to_dict() - empty record and field omission
- format_update_notice() - banner text and version qualifier
- format_post_upgrade_summary() - escape rendering and context
"""

import pytest

from cc_version_updater.display.colors import Colors, init_colors
from cc_version_updater.display.messages import (
    HookOutput,
    format_post_upgrade_summary,
    format_update_notice,
    render_escape_sequences,
    version_qualifier,
)
from cc_version_updater.state.models import PostUpgradeSummary


@pytest.fixture
def restore_colors():
    """Restore Colors after a test blanks them."""
    saved = {attr: getattr(Colors, attr) for attr in dir(Colors) if not attr.startswith("_")}
    yield
    for attr, value in saved.items():
        setattr(Colors, attr, value)


class TestHookOutput:
    """Tests for HookOutput.to_dict()."""

    def test_empty_is_empty_object(self):
        assert HookOutput().to_dict() == {}

    def test_message_only(self):
        assert HookOutput(system_message="hi").to_dict() == {"systemMessage": "hi"}

    def test_both_fields(self):
        assert HookOutput("hi", "ctx").to_dict() == {
            "systemMessage": "hi",
            "additionalContext": "ctx",
        }


class TestVersionQualifier:
    """Tests for version_qualifier()."""

    @pytest.mark.parametrize("count,expected", [(1, ""), (2, " (2 versions)"), (3, " (3 versions)")])
    def test_qualifier(self, count, expected):
        assert version_qualifier(count) == expected


class TestUpdateNotice:
    """Tests for format_update_notice()."""

    def test_contains_versions_and_command(self):
        output = format_update_notice("1.0.0", "1.3.0", 3)
        assert "New Claude Code version available!" in output.system_message
        assert "Current: v1.0.0  →  Latest: v1.3.0 (3 versions)" in output.system_message
        assert "/update-claude" in output.system_message

    def test_context_mentions_count(self):
        output = format_update_notice("1.0.0", "1.1.0", 1)
        assert output.additional_context == (
            "A new version v1.1.0 of Claude Code is available (1 version(s) to upgrade). "
            "The current version is v1.0.0. If the user wants to upgrade, "
            "guide them to use the /update-claude command."
        )

    def test_colored_banner(self):
        output = format_update_notice("1.0.0", "1.1.0", 1)
        assert output.system_message.startswith(f"\n{Colors.BOLD_BLUE}━")
        assert output.system_message.endswith(Colors.RESET)

    def test_no_color(self, monkeypatch, restore_colors):
        monkeypatch.setenv("CC_VERSION_UPDATER_NO_COLOR", "1")
        init_colors()
        output = format_update_notice("1.0.0", "1.1.0", 1)
        assert "\x1b" not in output.system_message


class TestPostUpgradeSummary:
    """Tests for format_post_upgrade_summary()."""

    def test_renders_escape_sequences(self):
        summary = PostUpgradeSummary("1.0.0", "1.2.0", "\\033[1mBold\\033[0m")
        output = format_post_upgrade_summary(summary)
        assert output.system_message == "\n\x1b[1mBold\x1b[0m"

    def test_context(self):
        output = format_post_upgrade_summary(PostUpgradeSummary("1.0.0", "1.2.0", "x"))
        assert output.additional_context.startswith(
            "[cc-version-updater] Claude Code has been upgraded from v1.0.0 to v1.2.0."
        )
        assert "changelog-interpreter" in output.additional_context

    def test_render_leaves_plain_text(self):
        assert render_escape_sequences("plain") == "plain"
