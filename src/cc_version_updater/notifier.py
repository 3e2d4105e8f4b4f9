"""SessionStart notification controller.

One run does exactly one of:

1. Display a waiting post-upgrade summary and delete it.
2. Stay silent because the versions can't be determined or the install is
   current.
3. Record a pending upgrade with its changelogs and show an update notice.

Failures of any collaborator are captured in the returned RunResult; the
hook output for a failed step is always the conservative one.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

from cc_version_updater.config.settings import Settings
from cc_version_updater.display.messages import (
    HookOutput,
    format_post_upgrade_summary,
    format_update_notice,
)
from cc_version_updater.errors import (
    ProbeUnavailableError,
    ReleaseFetchError,
    StateCorruptError,
)
from cc_version_updater.state.models import PendingUpgrade, Release
from cc_version_updater.state.store import UpgradeStateStore
from cc_version_updater.update.changelog import collect_changelogs, fetch_releases
from cc_version_updater.update.probes import (
    CliInstalledVersion,
    InstalledVersionProvider,
    LatestVersionProvider,
    NpmLatestVersion,
)
from cc_version_updater.update.version import compare_versions

logger = logging.getLogger(__name__)


class Outcome(Enum):
    SUMMARY_DISPLAYED = "summary_displayed"
    CANNOT_DETERMINE = "cannot_determine"
    UP_TO_DATE = "up_to_date"
    UPDATE_AVAILABLE = "update_available"
    DISABLED = "disabled"


@dataclass
class RunResult:
    """What a single hook run decided, and why."""

    outcome: Outcome
    output: HookOutput = field(default_factory=HookOutput)
    current_version: Optional[str] = None
    latest_version: Optional[str] = None
    changelogs: list[Release] = field(default_factory=list)
    version_count: int = 0
    probe_error: Optional[ProbeUnavailableError] = None
    fetch_error: Optional[ReleaseFetchError] = None
    state_error: Optional[Exception] = None

    def to_dict(self) -> dict[str, Any]:
        """Hook output record for stdout."""
        return self.output.to_dict()


class UpdateNotifier:
    """Runs the summary check and the version check for one session start."""

    def __init__(
        self,
        store: UpgradeStateStore,
        installed: InstalledVersionProvider,
        latest: LatestVersionProvider,
        fetch_releases: Callable[[], list[dict[str, Any]]],
        upgrade_command: str = "/update-claude",
    ):
        self.store = store
        self.installed = installed
        self.latest = latest
        self.fetch_releases = fetch_releases
        self.upgrade_command = upgrade_command

    @classmethod
    def from_settings(cls, settings: Settings) -> "UpdateNotifier":
        """Wire up the production collaborators."""
        return cls(
            store=UpgradeStateStore(settings),
            installed=CliInstalledVersion.from_settings(settings),
            latest=NpmLatestVersion.from_settings(settings),
            fetch_releases=lambda: fetch_releases(settings),
            upgrade_command=settings.upgrade_command,
        )

    def run(self) -> RunResult:
        """Execute one hook run."""
        state_error = None
        try:
            shown = self.store.consume_post_upgrade_summary(format_post_upgrade_summary)
        except StateCorruptError as e:
            logger.warning("Ignoring post-upgrade summary: %s", e.format_full())
            shown = None
            state_error = e

        if shown is not None:
            logger.debug("Displayed post-upgrade summary")
            return RunResult(outcome=Outcome.SUMMARY_DISPLAYED, output=shown)

        result = self.check_versions()
        if state_error is not None and result.state_error is None:
            result.state_error = state_error
        return result

    def check_versions(self) -> RunResult:
        """Compare installed and latest versions and notify when stale."""
        try:
            current = self.installed.installed_version()
            latest = self.latest.latest_version()
        except ProbeUnavailableError as e:
            logger.info("Cannot determine versions: %s", e.message)
            return RunResult(outcome=Outcome.CANNOT_DETERMINE, probe_error=e)

        if not current or not latest:
            return RunResult(
                outcome=Outcome.CANNOT_DETERMINE,
                current_version=current or None,
                latest_version=latest or None,
            )

        if current == latest or compare_versions(current, latest) >= 0:
            logger.debug("Up to date: installed %s, latest %s", current, latest)
            return RunResult(
                outcome=Outcome.UP_TO_DATE,
                current_version=current,
                latest_version=latest,
            )

        found = collect_changelogs(current, latest, self.fetch_releases)
        version_count = len(found.changelogs) or 1

        result = RunResult(
            outcome=Outcome.UPDATE_AVAILABLE,
            current_version=current,
            latest_version=latest,
            changelogs=found.changelogs,
            version_count=version_count,
            fetch_error=found.error,
        )

        record = PendingUpgrade(
            previous_version=current,
            latest_version=latest,
            changelogs=found.changelogs,
        )
        try:
            self.store.write_pending_upgrade(record)
        except OSError as e:
            # The notice still goes out; the upgrade flow can re-detect
            logger.warning("Could not save pending upgrade: %s", e)
            result.state_error = e

        result.output = format_update_notice(
            current, latest, version_count, upgrade_command=self.upgrade_command
        )
        logger.info("Update available: %s -> %s (%d versions)", current, latest, version_count)
        return result


__all__ = ["Outcome", "RunResult", "UpdateNotifier"]
