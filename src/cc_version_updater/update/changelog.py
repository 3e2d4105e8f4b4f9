"""Release list retrieval and changelog reconciliation.

Fetches recent GitHub releases and narrows them down to the entries that
lie between the installed and the latest version.
"""

import json
import logging
from dataclasses import dataclass, field
from functools import cmp_to_key
from http.client import HTTPException
from typing import Any, Callable, Iterable, Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from cc_version_updater._version import __version__
from cc_version_updater.config.settings import Settings
from cc_version_updater.errors import (
    ReleaseFetchError,
    categorize_http_error,
    categorize_network_error,
)
from cc_version_updater.state.models import NO_CHANGELOG, Release
from cc_version_updater.update.version import compare_versions, strip_tag_prefix

logger = logging.getLogger(__name__)

GITHUB_RELEASES_URL = "https://api.github.com/repos/{repo}/releases?per_page={count}"


def releases_url(settings: Settings) -> str:
    return GITHUB_RELEASES_URL.format(repo=settings.github_repo, count=settings.release_count)


def fetch_releases(settings: Settings) -> list[dict[str, Any]]:
    """Fetch the most recent releases from the GitHub releases API.

    Args:
        settings: Runtime settings (repository, page size, timeout).

    Returns:
        Decoded JSON payload (a list of release objects).

    Raises:
        ReleaseFetchError: On any HTTP, network, or decoding failure.
    """
    url = releases_url(settings)
    req = Request(
        url,
        headers={
            "Accept": "application/vnd.github+json",
            "User-Agent": f"cc-version-updater/{__version__}",
            "X-GitHub-Api-Version": "2022-11-28",
        },
    )
    kwargs = {}
    if settings.http_timeout is not None:
        kwargs["timeout"] = settings.http_timeout

    logger.debug("Fetching releases from %s", url)
    try:
        with urlopen(req, **kwargs) as response:
            status = getattr(response, "status", 200)
            if status != 200:
                raise categorize_http_error(status, getattr(response, "reason", "") or "")
            payload = json.loads(response.read().decode("utf-8"))
    except HTTPError as e:
        raise categorize_http_error(e.code, str(e.reason or "")) from e
    except URLError as e:
        raise categorize_network_error(str(e.reason)) from e
    except TimeoutError as e:
        raise categorize_network_error(f"timed out: {e}") from e
    except (HTTPException, OSError) as e:
        raise categorize_network_error(str(e) or type(e).__name__) from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ReleaseFetchError("Release list is not valid JSON", details=str(e)) from e

    if not isinstance(payload, list):
        raise ReleaseFetchError(
            "Unexpected release list format", details=f"got {type(payload).__name__}"
        )
    return payload


def parse_releases(payload: Iterable[Any]) -> list[Release]:
    """Turn raw GitHub release objects into Release records.

    Entries without a string tag_name are skipped.
    """
    releases = []
    for entry in payload:
        if not isinstance(entry, dict):
            continue
        tag = entry.get("tag_name")
        if not isinstance(tag, str) or not tag.strip():
            continue
        body = entry.get("body")
        releases.append(
            Release(
                version=strip_tag_prefix(tag),
                changelog=body if isinstance(body, str) and body else NO_CHANGELOG,
            )
        )
    return releases


def reconcile_changelogs(
    current_version: str, latest_version: str, releases: Iterable[Release]
) -> list[Release]:
    """Select the releases an upgrade from current to latest would bring in.

    Keeps releases newer than current_version and not newer than
    latest_version (releases published after the latest-version lookup are
    left out), most recent first.

    Args:
        current_version: Installed version.
        latest_version: Latest published version.
        releases: Candidate releases, in any order.

    Returns:
        Matching releases sorted by version, descending.
    """
    selected = [
        release
        for release in releases
        if compare_versions(release.version, current_version) > 0
        and compare_versions(release.version, latest_version) <= 0
    ]
    return sorted(selected, key=cmp_to_key(lambda a, b: compare_versions(b.version, a.version)))


@dataclass
class ChangelogResult:
    """Outcome of a best-effort changelog lookup."""

    changelogs: list[Release] = field(default_factory=list)
    error: Optional[ReleaseFetchError] = None


def collect_changelogs(
    current_version: str,
    latest_version: str,
    fetch: Callable[[], list[dict[str, Any]]],
) -> ChangelogResult:
    """Fetch and reconcile changelogs without ever raising a fetch error.

    Args:
        current_version: Installed version.
        latest_version: Latest published version.
        fetch: Zero-argument callable returning the raw release payload.

    Returns:
        ChangelogResult with the reconciled list, or an empty list and the
        captured error when the release list was unavailable.
    """
    try:
        releases = parse_releases(fetch())
    except ReleaseFetchError as e:
        logger.info("Changelogs unavailable: %s", e.message)
        return ChangelogResult(error=e)

    changelogs = reconcile_changelogs(current_version, latest_version, releases)
    logger.debug("Reconciled %d changelog entries", len(changelogs))
    return ChangelogResult(changelogs=changelogs)


__all__ = [
    "GITHUB_RELEASES_URL",
    "releases_url",
    "fetch_releases",
    "parse_releases",
    "reconcile_changelogs",
    "ChangelogResult",
    "collect_changelogs",
]
