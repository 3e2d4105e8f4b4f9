"""Records exchanged between the hook and the companion upgrade flow.

On disk every record uses camelCase keys; the companion flow reads and
writes the same files.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

NO_CHANGELOG = "No changelog available"
UNKNOWN_VERSION = "unknown"
NO_SUMMARY = "Summary not available"


@dataclass(frozen=True)
class Release:
    """One published release and its changelog body."""

    version: str
    changelog: str = NO_CHANGELOG

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Release":
        return cls(
            version=str(data.get("version", "")),
            changelog=data.get("changelog") or NO_CHANGELOG,
        )

    def to_dict(self) -> dict[str, Any]:
        return {"version": self.version, "changelog": self.changelog}


@dataclass
class PendingUpgrade:
    """A detected but not yet applied upgrade."""

    previous_version: str
    latest_version: str
    changelogs: list[Release] = field(default_factory=list)
    detected_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PendingUpgrade":
        """Create PendingUpgrade from its on-disk dictionary."""
        return cls(
            previous_version=data.get("previousVersion", UNKNOWN_VERSION),
            latest_version=data.get("latestVersion", UNKNOWN_VERSION),
            changelogs=[
                Release.from_dict(entry)
                for entry in data.get("changelogs") or []
                if isinstance(entry, dict)
            ],
            detected_at=data.get("detectedAt", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "previousVersion": self.previous_version,
            "latestVersion": self.latest_version,
            "changelogs": [release.to_dict() for release in self.changelogs],
            "detectedAt": self.detected_at,
        }


@dataclass
class PostUpgradeSummary:
    """Summary prepared after an upgrade, shown once at the next session."""

    previous_version: str = UNKNOWN_VERSION
    latest_version: str = UNKNOWN_VERSION
    summary: str = NO_SUMMARY

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PostUpgradeSummary":
        """Create PostUpgradeSummary from its on-disk dictionary."""
        return cls(
            previous_version=data.get("previousVersion") or UNKNOWN_VERSION,
            latest_version=data.get("latestVersion") or UNKNOWN_VERSION,
            summary=data.get("summary") or NO_SUMMARY,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "previousVersion": self.previous_version,
            "latestVersion": self.latest_version,
            "summary": self.summary,
        }


__all__ = [
    "NO_CHANGELOG",
    "UNKNOWN_VERSION",
    "NO_SUMMARY",
    "Release",
    "PendingUpgrade",
    "PostUpgradeSummary",
]
