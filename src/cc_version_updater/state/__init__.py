"""Persisted upgrade records shared with the upgrade flow."""

from cc_version_updater.state.models import PendingUpgrade, PostUpgradeSummary, Release
from cc_version_updater.state.store import UpgradeStateStore

__all__ = [
    "PendingUpgrade",
    "PostUpgradeSummary",
    "Release",
    "UpgradeStateStore",
]
