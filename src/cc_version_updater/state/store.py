"""Upgrade-state persistence.

Two JSON records live side by side in the cache directory:

- pending-upgrade.json: written by this hook when a newer release is found,
  consumed by the companion upgrade flow.
- changelog-summary.json: written by the upgrade flow once the upgrade has
  been applied, displayed once by this hook and then deleted.

Writes replace the whole file. There is no locking between the hook and
the upgrade flow.
"""

import json
import logging
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar

from cc_version_updater.config.settings import Settings
from cc_version_updater.errors import StateCorruptError
from cc_version_updater.state.models import PendingUpgrade, PostUpgradeSummary

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _read_record(path: Path) -> Optional[dict[str, Any]]:
    """Load a JSON object from path.

    Returns:
        The decoded object, or None if the file doesn't exist.

    Raises:
        StateCorruptError: If the file is unreadable, not JSON, or not an object.
    """
    if not path.exists():
        return None
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise StateCorruptError(f"{path.name} is not valid JSON", details=str(e)) from e
    except OSError as e:
        raise StateCorruptError(f"Could not read {path.name}", details=str(e)) from e
    if not isinstance(data, dict):
        raise StateCorruptError(
            f"{path.name} must contain a JSON object",
            details=f"got {type(data).__name__}",
        )
    return data


def _write_record(path: Path, data: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


class UpgradeStateStore:
    """Reads and writes the pending-upgrade and post-upgrade-summary records."""

    def __init__(self, settings: Settings):
        self.settings = settings

    @property
    def pending_upgrade_path(self) -> Path:
        return self.settings.pending_upgrade_file

    @property
    def changelog_summary_path(self) -> Path:
        return self.settings.changelog_summary_file

    # ── Post-upgrade summary ─────────────────────────────────────────

    def read_post_upgrade_summary(self) -> Optional[PostUpgradeSummary]:
        """Load the post-upgrade summary, if one is waiting.

        Raises:
            StateCorruptError: If the summary file exists but can't be parsed
                or a field holds a non-string value.
        """
        data = _read_record(self.changelog_summary_path)
        if data is None:
            return None
        for key in ("previousVersion", "latestVersion", "summary"):
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise StateCorruptError(
                    f"{self.changelog_summary_path.name}: '{key}' must be a string",
                    details=f"got {type(value).__name__}",
                )
        return PostUpgradeSummary.from_dict(data)

    def delete_post_upgrade_summary(self) -> bool:
        """Remove the summary file so it is shown only once.

        A failed delete is logged and not retried.

        Returns:
            True if the file was removed.
        """
        try:
            self.changelog_summary_path.unlink()
            return True
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.warning("Could not delete %s: %s", self.changelog_summary_path, e)
            return False

    def consume_post_upgrade_summary(
        self, display: Callable[[PostUpgradeSummary], T]
    ) -> Optional[T]:
        """Read the summary, hand it to display, then delete it.

        The file is deleted only after display returns. If display raises,
        the file stays in place for the next run.

        Args:
            display: Callable that renders the summary.

        Returns:
            Whatever display returned, or None if no summary was waiting.

        Raises:
            StateCorruptError: If the summary file exists but can't be parsed
                or a field holds a non-string value.
        """
        summary = self.read_post_upgrade_summary()
        if summary is None:
            return None
        result = display(summary)
        self.delete_post_upgrade_summary()
        return result

    def write_post_upgrade_summary(self, summary: PostUpgradeSummary) -> None:
        """Stage a summary for display at the next run."""
        _write_record(self.changelog_summary_path, summary.to_dict())

    # ── Pending upgrade ──────────────────────────────────────────────

    def write_pending_upgrade(self, record: PendingUpgrade) -> None:
        """Save the pending-upgrade record, replacing any previous one.

        Raises:
            OSError: If the cache directory or file can't be written.
        """
        _write_record(self.pending_upgrade_path, record.to_dict())

    def read_pending_upgrade(self) -> Optional[PendingUpgrade]:
        """Load the pending-upgrade record, if any.

        Raises:
            StateCorruptError: If the file exists but can't be parsed.
        """
        data = _read_record(self.pending_upgrade_path)
        if data is None:
            return None
        return PendingUpgrade.from_dict(data)


__all__ = ["UpgradeStateStore"]
