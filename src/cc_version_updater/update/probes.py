"""Installed and latest version discovery.

The controller depends only on the two provider protocols. The production
implementations shell out to `claude --version` and `npm show`; tests pass
in fakes.
"""

import logging
import subprocess
from typing import Optional, Protocol, Sequence

from cc_version_updater.config.settings import Settings
from cc_version_updater.errors import ProbeUnavailableError
from cc_version_updater.update.version import extract_version, parse_version

logger = logging.getLogger(__name__)


class InstalledVersionProvider(Protocol):
    def installed_version(self) -> str: ...


class LatestVersionProvider(Protocol):
    def latest_version(self) -> str: ...


def run_command(cmd: Sequence[str], timeout: Optional[float] = None) -> str:
    """Run a command and return its stripped stdout.

    Args:
        cmd: Command and arguments.
        timeout: Seconds to wait, or None to wait indefinitely.

    Returns:
        Command stdout with surrounding whitespace removed.

    Raises:
        ProbeUnavailableError: If the command is missing, times out, or fails.
    """
    try:
        result = subprocess.run(
            list(cmd),
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        raise ProbeUnavailableError(f"'{cmd[0]}' timed out after {timeout} seconds") from None
    except FileNotFoundError:
        raise ProbeUnavailableError(f"Command not found: {cmd[0]}") from None
    except (subprocess.SubprocessError, OSError) as e:
        raise ProbeUnavailableError(f"Could not run '{cmd[0]}'", details=str(e)) from e

    if result.returncode != 0:
        error_msg = (result.stderr or "").strip() or (result.stdout or "").strip() or "no output"
        raise ProbeUnavailableError(
            f"'{' '.join(cmd)}' exited with status {result.returncode}",
            details=error_msg,
        )
    return (result.stdout or "").strip()


class CliInstalledVersion:
    """Reads the installed version from `claude --version`."""

    def __init__(self, command: Sequence[str], timeout: Optional[float] = None):
        self.command = tuple(command)
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "CliInstalledVersion":
        return cls(settings.cli_command, timeout=settings.probe_timeout)

    def installed_version(self) -> str:
        output = run_command(self.command, timeout=self.timeout)
        version = extract_version(output)
        if version is None:
            raise ProbeUnavailableError(
                "No version number in command output", details=output[:200]
            )
        logger.debug("Installed version: %s", version)
        return version


class NpmLatestVersion:
    """Reads the latest published version from the npm registry."""

    def __init__(self, package: str, npm: str = "npm", timeout: Optional[float] = None):
        self.package = package
        self.npm = npm
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "NpmLatestVersion":
        return cls(
            settings.npm_package,
            npm=settings.npm_command,
            timeout=settings.probe_timeout,
        )

    def latest_version(self) -> str:
        output = run_command([self.npm, "show", self.package, "version"], timeout=self.timeout)
        if not output:
            raise ProbeUnavailableError(f"npm returned no version for {self.package}")
        # npm may print warnings before the version; the version is the last line
        version = output.splitlines()[-1].strip()
        if parse_version(version) is None:
            raise ProbeUnavailableError(
                f"Unexpected npm output for {self.package}", details=output[:200]
            )
        logger.debug("Latest version: %s", version)
        return version


__all__ = [
    "InstalledVersionProvider",
    "LatestVersionProvider",
    "run_command",
    "CliInstalledVersion",
    "NpmLatestVersion",
]
