"""
Tests for error categorization.
"""

import pytest

from cc_version_updater.errors import (
    NetworkOfflineError,
    NetworkTimeoutError,
    ProbeUnavailableError,
    RateLimitError,
    ReleaseFetchError,
    ServerError,
    StateCorruptError,
    categorize_http_error,
    categorize_network_error,
    format_error_for_user,
)


class TestCategorizeHttpError:
    """Tests for categorize_http_error()."""

    @pytest.mark.parametrize(
        "status,error_type",
        [(403, RateLimitError), (429, RateLimitError), (500, ServerError), (503, ServerError)],
    )
    def test_known_statuses(self, status, error_type):
        assert isinstance(categorize_http_error(status), error_type)

    def test_other_status_is_generic(self):
        error = categorize_http_error(404, "Not Found")
        assert type(error) is ReleaseFetchError
        assert error.message == "GitHub API error: 404 Not Found"

    def test_all_are_fetch_errors(self):
        for status in (204, 301, 403, 404, 429, 500):
            assert isinstance(categorize_http_error(status), ReleaseFetchError)


class TestCategorizeNetworkError:
    """Tests for categorize_network_error()."""

    def test_timeout(self):
        assert isinstance(categorize_network_error("timed out"), NetworkTimeoutError)

    def test_other(self):
        assert isinstance(categorize_network_error("[Errno 111] Connection refused"), NetworkOfflineError)


class TestFormatting:
    """Tests for error message formatting."""

    def test_class_suggestion(self):
        error = ProbeUnavailableError("Command not found: npm")
        assert "PATH" in error.get_suggestion()

    def test_instance_suggestion_overrides(self):
        error = StateCorruptError("bad", suggestion="Delete it")
        assert error.get_suggestion() == "Delete it"

    def test_format_full(self):
        error = StateCorruptError("pending-upgrade.json is not valid JSON", details="line 1")
        text = error.format_full()
        assert text.splitlines()[0] == "Error: pending-upgrade.json is not valid JSON"
        assert "Details: line 1" in text
        assert "Suggestion:" in text

    def test_format_error_for_user(self):
        assert format_error_for_user(RateLimitError("slow down")) == "Error: slow down"
        assert format_error_for_user(ValueError("x")) == "Error: x"
        assert "Suggestion:" in format_error_for_user(RateLimitError("slow down"), verbose=True)
