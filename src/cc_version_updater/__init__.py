"""cc-version-updater - Claude Code release notifier for SessionStart hooks.

Detects when a newer Claude Code release is published, records the
changelogs between the installed and the latest version for the upgrade
flow, and shows a one-time summary after the upgrade has been applied.
"""

from cc_version_updater._version import __version__
from cc_version_updater.notifier import Outcome, RunResult, UpdateNotifier

__all__ = [
    "__version__",
    "Outcome",
    "RunResult",
    "UpdateNotifier",
]
