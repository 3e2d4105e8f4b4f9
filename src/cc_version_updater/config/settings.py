"""Configuration management for cc-version-updater.

Loads an optional JSON config file, validates it against a schema, merges
it over the defaults and applies environment overrides. The result is an
immutable Settings object that is passed explicitly to the store and the
version providers.
"""

import json
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Tuple, Union

# Environment variables
ENV_PLUGIN_ROOT = "CLAUDE_PLUGIN_ROOT"
ENV_CACHE_DIR = "CC_VERSION_UPDATER_CACHE_DIR"
ENV_CONFIG_FILE = "CC_VERSION_UPDATER_CONFIG"
ENV_DEBUG = "CC_VERSION_UPDATER_DEBUG"
ENV_DISABLE = "CC_VERSION_UPDATER_DISABLE"

# Used when the hook runs outside a plugin install
DEFAULT_PLUGIN_ROOT = Path.home() / ".claude" / "cc-version-updater"

CACHE_DIR_NAME = ".cache"
CONFIG_FILE_NAME = "config.json"

# Default configuration values
DEFAULT_CONFIG = {
    "cli_command": ["claude", "--version"],
    "npm_command": "npm",
    "npm_package": "@anthropic-ai/claude-code",
    "github_repo": "anthropics/claude-code",
    "release_count": 20,
    "upgrade_command": "/update-claude",
    "probe_timeout": None,  # seconds, None waits indefinitely
    "http_timeout": None,
}

# Config schema for validation
# Format: key -> (expected_types, validator_func or None)
# validator_func takes value and returns (is_valid, error_message)
ValidatorFunc = Callable[[Union[str, int, float, list, None]], Tuple[bool, str]]


def _positive_or_none(v) -> Tuple[bool, str]:
    if v is None or (not isinstance(v, bool) and v > 0):
        return True, ""
    return False, "must be a positive number or null"


CONFIG_SCHEMA: dict[str, tuple[tuple, Optional[ValidatorFunc]]] = {
    "cli_command": (
        (list,),
        lambda v: (True, "")
        if v and all(isinstance(part, str) and part for part in v)
        else (False, "must be a non-empty list of strings"),
    ),
    "npm_command": (
        (str,),
        lambda v: (True, "") if v else (False, "must be a non-empty string"),
    ),
    "npm_package": (
        (str,),
        lambda v: (True, "") if v else (False, "must be a non-empty string"),
    ),
    "github_repo": (
        (str,),
        lambda v: (True, "")
        if v.count("/") == 1 and all(v.split("/"))
        else (False, "must look like 'owner/repo'"),
    ),
    "release_count": (
        (int,),
        lambda v: (True, "")
        if not isinstance(v, bool) and 1 <= v <= 100
        else (False, "must be between 1 and 100"),
    ),
    "upgrade_command": (
        (str,),
        lambda v: (True, "") if v else (False, "must be a non-empty string"),
    ),
    "probe_timeout": ((int, float, type(None)), _positive_or_none),
    "http_timeout": ((int, float, type(None)), _positive_or_none),
}


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings for one hook invocation."""

    cache_dir: Path
    cli_command: Tuple[str, ...] = tuple(DEFAULT_CONFIG["cli_command"])
    npm_command: str = DEFAULT_CONFIG["npm_command"]
    npm_package: str = DEFAULT_CONFIG["npm_package"]
    github_repo: str = DEFAULT_CONFIG["github_repo"]
    release_count: int = DEFAULT_CONFIG["release_count"]
    upgrade_command: str = DEFAULT_CONFIG["upgrade_command"]
    probe_timeout: Optional[float] = None
    http_timeout: Optional[float] = None

    @property
    def pending_upgrade_file(self) -> Path:
        return self.cache_dir / "pending-upgrade.json"

    @property
    def changelog_summary_file(self) -> Path:
        return self.cache_dir / "changelog-summary.json"


def is_truthy(value: Optional[str]) -> bool:
    """Return True for common truthy env values."""
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def get_plugin_root() -> Path:
    """Directory the hook is installed under.

    Claude Code exports CLAUDE_PLUGIN_ROOT to plugin hooks; outside a plugin
    install the root falls back to ~/.claude/cc-version-updater.
    """
    root = os.environ.get(ENV_PLUGIN_ROOT)
    if root:
        return Path(root)
    return DEFAULT_PLUGIN_ROOT


def get_cache_dir() -> Path:
    """Cache directory holding the two upgrade records."""
    override = os.environ.get(ENV_CACHE_DIR)
    if override:
        return Path(override).expanduser()
    return get_plugin_root() / CACHE_DIR_NAME


def get_config_file() -> Path:
    """Path of the optional JSON config file."""
    override = os.environ.get(ENV_CONFIG_FILE)
    if override:
        return Path(override).expanduser()
    return get_plugin_root() / CONFIG_FILE_NAME


def validate_config(config: dict) -> List[str]:
    """Validate configuration against schema.

    Args:
        config: Configuration dictionary to validate.

    Returns:
        List of validation error messages. Empty list if valid.
    """
    errors = []

    for key in config:
        if key not in CONFIG_SCHEMA:
            errors.append(f"Unknown config key: '{key}'")

    for key, (expected_types, validator) in CONFIG_SCHEMA.items():
        if key not in config:
            continue

        value = config[key]

        if not isinstance(value, expected_types):
            type_names = " or ".join(t.__name__ for t in expected_types)
            errors.append(
                f"'{key}' has invalid type: expected {type_names}, got {type(value).__name__}"
            )
            continue

        if validator:
            is_valid, error_msg = validator(value)
            if not is_valid:
                errors.append(f"'{key}' {error_msg}")

    return errors


def load_config(config_file: Optional[Path] = None, silent: bool = False) -> dict:
    """Load configuration from file.

    Invalid keys are reported on stderr and replaced by their defaults, so a
    broken config file can never stop the hook from running.

    Args:
        config_file: Optional path to config file. Defaults to get_config_file().
        silent: If True, suppress warning output. Default False.

    Returns:
        Configuration dictionary merged with defaults.
    """
    if config_file is None:
        config_file = get_config_file()

    if not config_file.exists():
        return DEFAULT_CONFIG.copy()

    try:
        with open(config_file, encoding="utf-8") as f:
            config = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        if not silent:
            print(f"Warning: Could not read {config_file}: {e}", file=sys.stderr)
        return DEFAULT_CONFIG.copy()

    if not isinstance(config, dict):
        if not silent:
            print(f"Warning: {config_file} must contain a JSON object", file=sys.stderr)
        return DEFAULT_CONFIG.copy()

    errors = validate_config(config)
    if errors:
        if not silent:
            print("Warning: Config validation errors:", file=sys.stderr)
            for error in errors:
                print(f"  - {error}", file=sys.stderr)
        bad_keys = {key for key in config if validate_config({key: config[key]})}
        config = {k: v for k, v in config.items() if k not in bad_keys}

    return {**DEFAULT_CONFIG, **config}


def load_settings(
    config_file: Optional[Path] = None,
    cache_dir: Optional[Path] = None,
    silent: bool = False,
) -> Settings:
    """Build Settings from the config file and environment.

    Args:
        config_file: Optional config file path (overrides environment).
        cache_dir: Optional cache directory (overrides environment).
        silent: If True, suppress config warnings.

    Returns:
        Settings instance.
    """
    config = load_config(config_file=config_file, silent=silent)
    return Settings(
        cache_dir=cache_dir if cache_dir is not None else get_cache_dir(),
        cli_command=tuple(config["cli_command"]),
        npm_command=config["npm_command"],
        npm_package=config["npm_package"],
        github_repo=config["github_repo"],
        release_count=config["release_count"],
        upgrade_command=config["upgrade_command"],
        probe_timeout=config["probe_timeout"],
        http_timeout=config["http_timeout"],
    )


__all__ = [
    "ENV_PLUGIN_ROOT",
    "ENV_CACHE_DIR",
    "ENV_CONFIG_FILE",
    "ENV_DEBUG",
    "ENV_DISABLE",
    "DEFAULT_CONFIG",
    "CONFIG_SCHEMA",
    "Settings",
    "is_truthy",
    "get_plugin_root",
    "get_cache_dir",
    "get_config_file",
    "validate_config",
    "load_config",
    "load_settings",
]
