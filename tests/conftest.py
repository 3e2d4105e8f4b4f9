"""
Pytest fixtures for cc-version-updater tests.

Test imports use the src/cc_version_updater/ package via --import-mode=importlib
(see pyproject.toml).
"""

import copy
import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from cc_version_updater.config.settings import Settings
from cc_version_updater.errors import ProbeUnavailableError, ReleaseFetchError
from cc_version_updater.notifier import UpdateNotifier
from cc_version_updater.state.store import UpgradeStateStore


# ═══════════════════════════════════════════════════════════════════════════════
# Path Constants
# ═══════════════════════════════════════════════════════════════════════════════

FIXTURES_DIR = Path(__file__).parent / "fixtures"
with open(FIXTURES_DIR / "github_releases.json") as f:
    FIXTURES = json.load(f)


# ═══════════════════════════════════════════════════════════════════════════════
# Environment isolation
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep tests away from the real plugin root and user env switches."""
    for name in (
        "CLAUDE_PLUGIN_ROOT",
        "CC_VERSION_UPDATER_CACHE_DIR",
        "CC_VERSION_UPDATER_CONFIG",
        "CC_VERSION_UPDATER_DEBUG",
        "CC_VERSION_UPDATER_DISABLE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("CLAUDE_PLUGIN_ROOT", str(tmp_path / "plugin"))


# ═══════════════════════════════════════════════════════════════════════════════
# Release Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def releases_mixed():
    """Raw GitHub releases v1.3.0, v1.2.0, v1.1.0 (no body), v1.0.0."""
    return copy.deepcopy(FIXTURES["releases_mixed"])


@pytest.fixture
def releases_unordered():
    """Raw GitHub releases with double-digit minors, out of order."""
    return copy.deepcopy(FIXTURES["releases_unordered"])


@pytest.fixture
def summary_valid():
    """Post-upgrade summary written by the upgrade flow."""
    return copy.deepcopy(FIXTURES["summary_valid"])


# ═══════════════════════════════════════════════════════════════════════════════
# Settings / Store Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def cache_dir(tmp_path):
    """Cache directory path (not created)."""
    return tmp_path / "cache"


@pytest.fixture
def settings(cache_dir):
    """Settings pointing at a temporary cache directory."""
    return Settings(cache_dir=cache_dir)


@pytest.fixture
def store(settings):
    """UpgradeStateStore backed by the temporary cache directory."""
    return UpgradeStateStore(settings)


@pytest.fixture
def summary_file(settings, summary_valid):
    """Write a valid changelog-summary.json and return its path."""
    settings.cache_dir.mkdir(parents=True, exist_ok=True)
    path = settings.changelog_summary_file
    path.write_text(json.dumps(summary_valid))
    return path


# ═══════════════════════════════════════════════════════════════════════════════
# Version Provider Fakes
# ═══════════════════════════════════════════════════════════════════════════════


class FakeInstalledVersion:
    """InstalledVersionProvider returning a fixed version or raising."""

    def __init__(self, version=None, error=None):
        self.version = version
        self.error = error
        self.calls = 0

    def installed_version(self):
        self.calls += 1
        if self.error:
            raise self.error
        return self.version


class FakeLatestVersion:
    """LatestVersionProvider returning a fixed version or raising."""

    def __init__(self, version=None, error=None):
        self.version = version
        self.error = error
        self.calls = 0

    def latest_version(self):
        self.calls += 1
        if self.error:
            raise self.error
        return self.version


@pytest.fixture
def make_notifier(store, releases_mixed):
    """Factory building an UpdateNotifier around fakes.

    Args accepted by the factory:
        installed: installed version string, or an exception to raise.
        latest: latest version string, or an exception to raise.
        releases: raw release payload, or a ReleaseFetchError to raise.
    """

    def factory(installed="1.0.0", latest="1.2.0", releases=None):
        payload = releases_mixed if releases is None else releases
        fetch = MagicMock()
        if isinstance(payload, ReleaseFetchError):
            fetch.side_effect = payload
        else:
            fetch.return_value = payload

        def provider(cls, value):
            if isinstance(value, ProbeUnavailableError):
                return cls(error=value)
            return cls(version=value)

        notifier = UpdateNotifier(
            store=store,
            installed=provider(FakeInstalledVersion, installed),
            latest=provider(FakeLatestVersion, latest),
            fetch_releases=fetch,
        )
        return notifier

    return factory


# ═══════════════════════════════════════════════════════════════════════════════
# HTTP Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def make_response():
    """Factory for urlopen context-manager responses."""

    def factory(body, status=200):
        if not isinstance(body, bytes):
            body = json.dumps(body).encode()
        mock_response = MagicMock()
        mock_response.status = status
        mock_response.reason = "OK" if status == 200 else ""
        mock_response.read.return_value = body
        mock_response.__enter__ = MagicMock(return_value=mock_response)
        mock_response.__exit__ = MagicMock(return_value=False)
        return mock_response

    return factory
