"""Version discovery, comparison and changelog reconciliation.

Modules:
    version: Version parsing and comparison
    probes: Installed/latest version providers
    changelog: Release list fetch and reconciliation
"""

from cc_version_updater.update.changelog import (
    GITHUB_RELEASES_URL,
    ChangelogResult,
    collect_changelogs,
    fetch_releases,
    parse_releases,
    reconcile_changelogs,
)
from cc_version_updater.update.probes import (
    CliInstalledVersion,
    InstalledVersionProvider,
    LatestVersionProvider,
    NpmLatestVersion,
)
from cc_version_updater.update.version import (
    compare_versions,
    extract_version,
    is_newer,
    parse_version,
    strip_tag_prefix,
)

__all__ = [
    "GITHUB_RELEASES_URL",
    "ChangelogResult",
    "collect_changelogs",
    "fetch_releases",
    "parse_releases",
    "reconcile_changelogs",
    "CliInstalledVersion",
    "InstalledVersionProvider",
    "LatestVersionProvider",
    "NpmLatestVersion",
    "compare_versions",
    "extract_version",
    "is_newer",
    "parse_version",
    "strip_tag_prefix",
]
