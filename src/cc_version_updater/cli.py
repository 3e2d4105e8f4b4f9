"""Command-line entry point for the cc-version-updater SessionStart hook.

Prints exactly one JSON object to stdout and never signals failure to the
host: every path, including unexpected errors, ends with exit status 0.
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from cc_version_updater._version import __version__
from cc_version_updater.config.settings import (
    ENV_DEBUG,
    ENV_DISABLE,
    is_truthy,
    load_settings,
)
from cc_version_updater.errors import StateCorruptError, format_error_for_user
from cc_version_updater.notifier import Outcome, RunResult, UpdateNotifier
from cc_version_updater.state.store import UpgradeStateStore

logger = logging.getLogger("cc_version_updater")


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="cc-version-check",
        description="Notify about new Claude Code releases (SessionStart hook)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  cc-version-check                Run the hook (prints one JSON object)
  cc-version-check --debug        Log each step to stderr
  cc-version-check --show-pending Print the recorded pending upgrade

Environment:
  CLAUDE_PLUGIN_ROOT              Plugin install directory (cache lives in .cache/)
  CC_VERSION_UPDATER_CACHE_DIR    Override the cache directory
  CC_VERSION_UPDATER_CONFIG       Override the config file path
  CC_VERSION_UPDATER_DEBUG        Same as --debug
  CC_VERSION_UPDATER_DISABLE      Skip the check entirely
  CC_VERSION_UPDATER_NO_COLOR     Plain-text notice
""",
    )
    parser.add_argument("--debug", action="store_true", help="Log diagnostics to stderr")
    parser.add_argument(
        "--cache-dir", type=Path, metavar="PATH", help="Directory holding the upgrade records"
    )
    parser.add_argument(
        "--config", type=Path, metavar="PATH", help="Path to a JSON config file"
    )
    parser.add_argument(
        "--show-pending",
        action="store_true",
        help="Print the pending-upgrade record (or {}) and exit",
    )
    parser.add_argument(
        "--version", "-V", action="version", version=f"cc-version-updater {__version__}"
    )
    return parser


def configure_logging(debug: bool = False) -> None:
    """Send log records to stderr; stdout is reserved for the hook record."""
    level = logging.DEBUG if debug or is_truthy(os.environ.get(ENV_DEBUG)) else logging.WARNING
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(level)
    logger.propagate = False


def emit(record: dict) -> None:
    """Write the single hook output record."""
    print(json.dumps(record))


def drain_stdin() -> None:
    """Consume the hook payload Claude Code writes to stdin; it isn't needed."""
    try:
        if not sys.stdin.isatty():
            sys.stdin.read()
    except (OSError, ValueError, AttributeError):
        pass


def show_pending(store: UpgradeStateStore) -> dict:
    try:
        record = store.read_pending_upgrade()
    except StateCorruptError as e:
        logger.warning(e.format_full())
        return {}
    return record.to_dict() if record else {}


def run_hook(args: argparse.Namespace) -> dict:
    """Run the hook and return the record to print."""
    if is_truthy(os.environ.get(ENV_DISABLE)):
        logger.debug("Version check disabled via %s", ENV_DISABLE)
        return RunResult(outcome=Outcome.DISABLED).to_dict()

    settings = load_settings(config_file=args.config, cache_dir=args.cache_dir)
    logger.debug("Cache directory: %s", settings.cache_dir)

    if args.show_pending:
        return show_pending(UpgradeStateStore(settings))

    result = UpdateNotifier.from_settings(settings).run()
    logger.debug("Outcome: %s", result.outcome.value)
    return result.to_dict()


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the hook."""
    parser = create_parser()
    try:
        args, unknown = parser.parse_known_args(argv)
    except SystemExit as e:
        # --help and --version exit 0; a malformed option still yields a record
        if e.code == 0:
            raise
        emit({})
        return
    configure_logging(args.debug)
    if unknown:
        logger.warning("Ignoring unrecognized arguments: %s", " ".join(unknown))
    drain_stdin()

    try:
        record = run_hook(args)
    except Exception as e:
        # Advisory hook: any failure degrades to "no notification"
        logger.error(format_error_for_user(e, verbose=True), exc_info=args.debug)
        record = {}

    emit(record)


__all__ = [
    "create_parser",
    "configure_logging",
    "run_hook",
    "main",
]
