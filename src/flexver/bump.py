# SPDX-License-Identifier: MIT
"""In-place mutation of versions for release tooling.

Only major, minor and patch can be set or bumped. Every operation validates
its arguments before writing, so a failed call leaves the version untouched.
"""

from __future__ import annotations

import logging
from typing import Union

from .semver import MAX_SEGMENT_VALUE, UnsupportedPartError, Version, VersionPart

logger = logging.getLogger(__name__)

PartLike = Union[VersionPart, str]


def _segment_part(operation: str, part: PartLike) -> VersionPart:
    resolved = VersionPart.coerce(part)
    if not resolved.is_segment:
        raise UnsupportedPartError(operation, resolved)
    return resolved


def _check_increment(version: Version, part: VersionPart) -> None:
    if version.segments[part] >= MAX_SEGMENT_VALUE:
        raise OverflowError(
            f"Cannot bump {part.label} of {version}: {MAX_SEGMENT_VALUE} is the maximum"
        )


def set_part(version: Version, part: PartLike, value: int) -> Version:
    """Set major, minor or patch to value.

    Args:
        version: The version to modify in place
        part: VersionPart member or its name
        value: New segment value, 0 to MAX_SEGMENT_VALUE

    Returns:
        The same version object, for chaining

    Raises:
        UnsupportedPartError: If part is prerelease or metadata
        ValueError: If part is unknown or value is out of range

    Examples:
        >>> from flexver import parse_version
        >>> str(set_part(parse_version("1.1.1"), "patch", 10))
        '1.1.10'
    """
    resolved = _segment_part("set", part)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Segment value must be an integer, got {type(value).__name__}")
    if not 0 <= value <= MAX_SEGMENT_VALUE:
        raise ValueError(f"Segment value must be between 0 and {MAX_SEGMENT_VALUE}, got {value}")

    before = str(version)
    version.segments[resolved] = value
    logger.debug("Set %s of %s: %s", resolved.label, before, version)
    return version


def bump_part(version: Version, part: PartLike) -> Version:
    """Increment major, minor or patch by one, leaving everything else alone.

    Examples:
        >>> from flexver import parse_version
        >>> str(bump_part(parse_version("1.1.1-beta"), "major"))
        '2.1.1-beta'
    """
    resolved = _segment_part("bump", part)
    _check_increment(version, resolved)

    before = str(version)
    version.segments[resolved] += 1
    logger.debug("Bumped %s of %s: %s", resolved.label, before, version)
    return version


def bump_version(version: Version, part: PartLike) -> Version:
    """Bump a part and reset every lesser part.

    Pre-release and build metadata are cleared, bumping minor resets patch to
    0 and bumping major resets both minor and patch to 0.

    Raises:
        UnsupportedPartError: If part is prerelease or metadata
        OverflowError: If the part is already at MAX_SEGMENT_VALUE

    Examples:
        >>> from flexver import parse_version
        >>> str(bump_version(parse_version("1.1.0-beta1"), "minor"))
        '1.2.0'
        >>> str(bump_version(parse_version("2"), "minor"))
        '2.1.0'
    """
    resolved = _segment_part("bump", part)
    _check_increment(version, resolved)

    before = str(version)
    version.prerelease = ""
    version.metadata = ""
    for lesser in range(resolved + 1, VersionPart.PATCH + 1):
        version.segments[lesser] = 0
    version.segments[resolved] += 1
    logger.debug("Bumped version %s to %s (%s)", before, version, resolved.label)
    return version
