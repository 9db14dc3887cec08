"""Version helpers shared by update tracking and note extraction.

Normalized versions from dependency managers come in a few shapes:
plain releases ("2.0.10", "2.0.10.0"), releases with a stability
qualifier ("2.1.0-beta2", "2.1.0RC1") and branch aliases ("dev-master").
"""

import re

from upgrade_notes.configs.constants import NUMERIC_VERSION_PATTERN

_NUMERIC_VERSION_RE = re.compile(NUMERIC_VERSION_PATTERN)
_VERSION_PARTS_RE = re.compile(r"^v?(\d+(?:\.\d+)*)(.*)$", re.IGNORECASE)
_QUALIFIER_RE = re.compile(r"^[-_.+]?([a-z]*)[-_.]?(\d*)", re.IGNORECASE)

# Rank of the qualifier following the numeric part, a plain release is 0
_QUALIFIER_RANKS = {
    "dev": -4,
    "alpha": -3,
    "a": -3,
    "beta": -2,
    "b": -2,
    "rc": -1,
    "": 0,
    "patch": 1,
    "pl": 1,
    "p": 1,
}


def is_numeric_version(version: str) -> bool:
    """Check whether a version looks like a release, e.g. 2.0.10 (not dev-master)."""
    return bool(_NUMERIC_VERSION_RE.match(version))


def extract_numeric_prefix(version: str) -> str:
    """Return the leading dotted number ("2.0.10-beta" -> "2.0.10"), or the input unchanged."""
    match = _NUMERIC_VERSION_RE.match(version)
    return match.group(0) if match else version


def _parse_qualifier(suffix: str) -> tuple[int, int]:
    match = _QUALIFIER_RE.match(suffix)
    if not match:
        return _QUALIFIER_RANKS[""], 0
    label = match.group(1).lower()
    number = int(match.group(2)) if match.group(2) else 0
    # Unknown labels ("-foo") are treated like dev builds of that release
    return _QUALIFIER_RANKS.get(label, _QUALIFIER_RANKS["dev"]), number


def _parse_version(version: str) -> tuple[tuple[int, ...], tuple[int, int]] | None:
    match = _VERSION_PARTS_RE.match(version.strip())
    if not match:
        return None
    numbers = tuple(int(part) for part in match.group(1).split("."))
    return numbers, _parse_qualifier(match.group(2))


def compare_versions(v1: str, v2: str) -> int:
    """Compare two versions, returning -1, 0 or 1.

    Numeric segments are compared as integers with the shorter version
    padded with zeros, so 2.0 == 2.0.0. On equal numbers a qualifier sorts
    dev < alpha < beta < rc < release < patch.

    Branch aliases without any number (dev-master) are considered newer than
    every release, the same way dependency managers alias a default branch.
    """
    parsed1 = _parse_version(v1)
    parsed2 = _parse_version(v2)

    if parsed1 is None or parsed2 is None:
        if parsed1 is None and parsed2 is None:
            return (v1 > v2) - (v1 < v2)
        return 1 if parsed1 is None else -1

    numbers1, qualifier1 = parsed1
    numbers2, qualifier2 = parsed2
    width = max(len(numbers1), len(numbers2))
    key1 = (numbers1 + (0,) * (width - len(numbers1)), qualifier1)
    key2 = (numbers2 + (0,) * (width - len(numbers2)), qualifier2)
    return (key1 > key2) - (key1 < key2)


def is_version_lte(v1: str, v2: str) -> bool:
    """Check if v1 <= v2."""
    return compare_versions(v1, v2) <= 0


def is_version_lt(v1: str, v2: str) -> bool:
    """Check if v1 < v2."""
    return compare_versions(v1, v2) < 0


def is_upgrade(from_version: str, to_version: str) -> bool:
    """Strict check, an update between equal versions is not an upgrade."""
    return compare_versions(to_version, from_version) > 0
