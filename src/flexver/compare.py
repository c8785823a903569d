# SPDX-License-Identifier: MIT
"""Version comparison.

Release outranks pre-release: 1.2.0-beta < 1.2.0
Build metadata is ignored in comparisons: 1.2.0+foo == 1.2.0+bar
"""

from __future__ import annotations

import functools
from collections.abc import Iterable
from typing import Any, Union

from .semver import Version, parse_version

VersionLike = Union[str, Version]


def _coerce(version: VersionLike) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        ParseError: If either version string is invalid

    Examples:
        >>> compare_versions("1.2.3", "1.4.5")
        -1
        >>> compare_versions("1.2", "1.2-beta")
        1
        >>> compare_versions("1.2+foo", "1.2+beta")
        0
    """
    return _coerce(version1).compare(_coerce(version2))


compare = compare_versions


def equal(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if both versions have the same precedence."""
    return compare_versions(version1, version2) == 0


def less_than(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if version1 sorts before version2."""
    return compare_versions(version1, version2) < 0


def greater_than(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if version1 sorts after version2."""
    return compare_versions(version1, version2) > 0


_CompareKey = functools.cmp_to_key(compare_versions)


def version_key(version: VersionLike) -> Any:
    """Return a sort key for a version, suitable for sorting.

    Pre-release ordering is not expressible as a plain tuple, so the key
    wraps compare_versions.

    Examples:
        >>> sorted(["1.2", "1.2-beta.3", "1.2-beta"], key=version_key)
        ['1.2-beta', '1.2-beta.3', '1.2']
    """
    return _CompareKey(version)


def sort_versions(versions: Iterable[VersionLike], reverse: bool = False) -> list[Version]:
    """Parse and sort versions, lowest first unless reverse is set."""
    return sorted((_coerce(v) for v in versions), key=version_key, reverse=reverse)


def max_version(versions: Iterable[VersionLike]) -> Version:
    """Return the highest version.

    Raises:
        ValueError: If versions is empty
    """
    parsed = [_coerce(v) for v in versions]
    if not parsed:
        raise ValueError("max_version() requires at least one version")
    return max(parsed, key=version_key)
