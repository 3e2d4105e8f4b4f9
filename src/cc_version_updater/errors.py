"""Categorized error types for the version-check hook.

The hook never reports failure to its caller, but internally every
collaborator raises a typed error so the controller (and the tests) can
tell a failed probe apart from an up-to-date install or a failed
changelog fetch.
"""

from __future__ import annotations

from typing import ClassVar


class UpdaterError(Exception):
    """Base exception for cc-version-updater with structured error info.

    Attributes:
        message: Human-readable error message.
        suggestion: Actionable recovery suggestion.
        details: Optional additional context.
    """

    suggestion: ClassVar[str] = ""

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: str | None = None,
    ):
        self.message = message
        self._suggestion = suggestion
        self.details = details
        super().__init__(message)

    def get_suggestion(self) -> str:
        """Get the recovery suggestion."""
        return self._suggestion or self.suggestion

    def format_full(self) -> str:
        """Format the complete error message with suggestion."""
        parts = [f"Error: {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        suggestion = self.get_suggestion()
        if suggestion:
            parts.append(f"Suggestion: {suggestion}")
        return "\n".join(parts)


# Version probes


class ProbeUnavailableError(UpdaterError):
    """Installed or latest version could not be determined."""

    suggestion = (
        "Make sure 'claude' and 'npm' are on PATH. "
        "The check will run again at the next session start."
    )


# Release list


class ReleaseFetchError(UpdaterError):
    """Release list could not be fetched or parsed."""

    suggestion = "Changelog details are skipped; the update notice is still shown."


class RateLimitError(ReleaseFetchError):
    """GitHub API rate limit exceeded."""

    suggestion = (
        "Unauthenticated GitHub API calls are rate limited per hour. "
        "Changelogs will be fetched again at the next session start."
    )


class ServerError(ReleaseFetchError):
    """GitHub API server error (5xx)."""

    suggestion = "GitHub is experiencing issues. Check githubstatus.com."


class NetworkTimeoutError(ReleaseFetchError):
    """Request timed out."""

    suggestion = "The request timed out. Increase 'http_timeout' in config.json."


class NetworkOfflineError(ReleaseFetchError):
    """Device appears to be offline or the host is unreachable."""

    suggestion = "Check your internet connection."


# Persisted state


class StateCorruptError(UpdaterError):
    """A persisted upgrade record is not valid JSON or has the wrong shape."""

    suggestion = (
        "The cache file appears corrupted. "
        "Delete it and let the upgrade flow regenerate it."
    )


def categorize_http_error(status_code: int, reason: str = "") -> ReleaseFetchError:
    """Convert an HTTP status code to the matching fetch error.

    Args:
        status_code: HTTP status code.
        reason: Optional reason phrase.

    Returns:
        ReleaseFetchError subclass instance.
    """
    message = f"GitHub API error: {status_code}"
    if reason:
        message += f" {reason}"

    # GitHub reports exhausted quotas as 403 as well as 429
    if status_code in (403, 429):
        return RateLimitError(f"Rate limit exceeded: {status_code} {reason}".rstrip())
    elif status_code >= 500:
        return ServerError(f"Server error: {status_code} {reason}".rstrip())
    else:
        return ReleaseFetchError(message)


def categorize_network_error(error_reason: str) -> ReleaseFetchError:
    """Convert a network error reason to the matching fetch error.

    Args:
        error_reason: Error reason string from URLError.

    Returns:
        ReleaseFetchError subclass instance.
    """
    reason_lower = error_reason.lower()

    if "timed out" in reason_lower or "timeout" in reason_lower:
        return NetworkTimeoutError(f"Connection timed out: {error_reason}")
    else:
        return NetworkOfflineError(f"Network error: {error_reason}")


def format_error_for_user(error: Exception, verbose: bool = False) -> str:
    """Format any exception for log output.

    Args:
        error: Exception to format.
        verbose: If True, include details and suggestions.

    Returns:
        Formatted error message string.
    """
    if isinstance(error, UpdaterError):
        if verbose:
            return error.format_full()
        return f"Error: {error.message}"
    else:
        return f"Error: {error}"


__all__ = [
    "UpdaterError",
    "ProbeUnavailableError",
    "ReleaseFetchError",
    "RateLimitError",
    "ServerError",
    "NetworkTimeoutError",
    "NetworkOfflineError",
    "StateCorruptError",
    "categorize_http_error",
    "categorize_network_error",
    "format_error_for_user",
]
