"""Version string parsing and comparison.

Versions are dotted MAJOR.MINOR.PATCH triples with an optional leading
'v', optional extra dotted components (ignored) and an optional
semantic-versioning prerelease/build suffix.
"""

import re
from typing import NamedTuple, Optional, Tuple

_VERSION_RE = re.compile(
    r"^v?(\d+)\.(\d+)\.(\d+)"  # major.minor.patch
    r"(?:\.\d+)*"  # extra components, ignored
    r"(?:-([0-9A-Za-z.-]+))?"  # prerelease
    r"(?:\+[0-9A-Za-z.-]+)?$"  # build metadata, ignored
)

# First version-looking token in free text such as "2.0.14 (Claude Code)"
VERSION_IN_TEXT_RE = re.compile(r"(\d+\.\d+\.\d+)")


class ParsedVersion(NamedTuple):
    major: int
    minor: int
    patch: int
    prerelease: Tuple[str, ...] = ()


def strip_tag_prefix(tag: str) -> str:
    """Remove a single leading 'v' from a release tag ('v1.2.3' -> '1.2.3')."""
    tag = tag.strip()
    if tag.startswith("v"):
        return tag[1:]
    return tag


def parse_version(version_str: str) -> Optional[ParsedVersion]:
    """Parse a version string into a comparable tuple.

    Args:
        version_str: Version string (e.g., "1.0.24", "v2.0.0", "1.0.0-beta.1").

    Returns:
        ParsedVersion, or None when the string is not a MAJOR.MINOR.PATCH version.
    """
    if not isinstance(version_str, str):
        return None
    match = _VERSION_RE.match(version_str.strip())
    if not match:
        return None

    major, minor, patch = int(match.group(1)), int(match.group(2)), int(match.group(3))
    prerelease = tuple(match.group(4).split(".")) if match.group(4) else ()
    return ParsedVersion(major, minor, patch, prerelease)


def extract_version(text: str) -> Optional[str]:
    """Return the first MAJOR.MINOR.PATCH token found in free text."""
    if not text:
        return None
    match = VERSION_IN_TEXT_RE.search(text)
    return match.group(1) if match else None


def _compare_identifier(a: str, b: str) -> int:
    # Numeric identifiers compare numerically and sort before alphanumeric ones
    a_num, b_num = a.isdigit(), b.isdigit()
    if a_num and b_num:
        a_val, b_val = int(a), int(b)
        return (a_val > b_val) - (a_val < b_val)
    if a_num:
        return -1
    if b_num:
        return 1
    return (a > b) - (a < b)


def _compare_prerelease(p1: Tuple[str, ...], p2: Tuple[str, ...]) -> int:
    # No prerelease (stable) > any prerelease
    if not p1 and p2:
        return 1
    if p1 and not p2:
        return -1
    for a, b in zip(p1, p2):
        result = _compare_identifier(a, b)
        if result:
            return result
    return (len(p1) > len(p2)) - (len(p1) < len(p2))


def compare_versions(v1: str, v2: str) -> int:
    """Compare two version strings.

    Malformed versions are incomparable: the result is 0, so they are never
    reported as newer or older than anything.

    Args:
        v1: First version string.
        v2: Second version string.

    Returns:
        -1 if v1 < v2
         0 if v1 == v2 (or either side is malformed)
         1 if v1 > v2
    """
    p1 = parse_version(v1)
    p2 = parse_version(v2)
    if p1 is None or p2 is None:
        return 0

    for i in range(3):
        if p1[i] < p2[i]:
            return -1
        if p1[i] > p2[i]:
            return 1

    return _compare_prerelease(p1.prerelease, p2.prerelease)


def is_newer(candidate: str, baseline: str) -> bool:
    """True if candidate is strictly newer than baseline."""
    return compare_versions(candidate, baseline) > 0


__all__ = [
    "ParsedVersion",
    "VERSION_IN_TEXT_RE",
    "strip_tag_prefix",
    "parse_version",
    "extract_version",
    "compare_versions",
    "is_newer",
]
