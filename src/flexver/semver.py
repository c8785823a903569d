# SPDX-License-Identifier: MIT
"""Version parsing for flexver.

Supports one to three numeric segments with optional pre-release and build
metadata:
- Segments: 1, 1.2, 1.2.3 (missing segments are padded with 0)
- Pre-release: -beta, -beta.2, -rc1-with-hyphen
- Build metadata: +build, +build.123, +20240101
"""

from __future__ import annotations

import enum
import functools
import re
from dataclasses import dataclass
from typing import Union

from . import precedence

# Number of numeric segments every parsed version carries (major.minor.patch)
SEGMENT_COUNT = 3

# Segments must fit a signed 32-bit integer
MAX_SEGMENT_VALUE = 2**31 - 1

_TOKENS = r"[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*"

VERSION_PATTERN_RAW = (
    r"(?P<segments>[0-9]+(?:\.[0-9]+){0,2})"
    rf"(?:-(?P<prerelease>{_TOKENS}))?"
    rf"(?:\+(?P<metadata>{_TOKENS}))?"
)

# Always applied with fullmatch() so a trailing newline cannot slip past "$"
VERSION_PATTERN = re.compile(VERSION_PATTERN_RAW)


class VersionError(Exception):
    """Base exception for all flexver errors."""

    pass


class ParseError(VersionError):
    """Raised when a string is not a valid version."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Malformed version: {version!r}"
        super().__init__(self.message)


class SegmentRangeError(ParseError):
    """Raised when a numeric segment does not fit a signed 32-bit integer."""

    def __init__(self, version: str, segment: str):
        self.segment = segment
        super().__init__(
            version,
            f"Error parsing version {version!r}: segment {segment} "
            f"exceeds {MAX_SEGMENT_VALUE}",
        )


class UnsupportedPartError(VersionError):
    """Raised when a mutation targets a part that cannot be mutated."""

    def __init__(self, operation: str, part: VersionPart):
        self.operation = operation
        self.part = part
        super().__init__(f"Unable to {operation} version part {part.label}")


class VersionPart(enum.IntEnum):
    """The addressable parts of a version."""

    MAJOR = 0
    MINOR = 1
    PATCH = 2
    PRERELEASE = 3
    METADATA = 4

    @property
    def label(self) -> str:
        return self.name.lower()

    @property
    def is_segment(self) -> bool:
        """Return True for major, minor and patch."""
        return self <= VersionPart.PATCH

    @classmethod
    def coerce(cls, part: Union[VersionPart, str]) -> VersionPart:
        """Return the VersionPart for a member or a case-insensitive name.

        Raises:
            ValueError: If the name does not identify a part
        """
        if isinstance(part, cls):
            return part
        if isinstance(part, str):
            try:
                return cls[part.strip().upper()]
            except KeyError:
                pass
        raise ValueError(f"Unknown version part: {part!r}")


@functools.total_ordering
@dataclass(eq=False, slots=True)
class Version:
    """A parsed version.

    Versions are mutable through set_part, bump_part and bump_version only;
    comparison and rendering never modify them. Equality follows version
    precedence, so build metadata is ignored and instances are unhashable.

    Attributes:
        segments: Exactly three non-negative integers (major, minor, patch)
        original_segment_count: How many segments the parsed string supplied
        prerelease: Raw dot-delimited pre-release identifier, "" if absent
        metadata: Raw dot-delimited build metadata, "" if absent
    """

    segments: list[int]
    original_segment_count: int = SEGMENT_COUNT
    prerelease: str = ""
    metadata: str = ""

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = self.base_version
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.metadata:
            version += f"+{self.metadata}"
        return version

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    @property
    def major(self) -> int:
        return self.segments[VersionPart.MAJOR]

    @property
    def minor(self) -> int:
        return self.segments[VersionPart.MINOR]

    @property
    def patch(self) -> int:
        return self.segments[VersionPart.PATCH]

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.prerelease != ""

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return ".".join(str(segment) for segment in self.segments)

    def compare(self, other: Version) -> int:
        """Compare against another version, returning -1, 0 or 1.

        Identical canonical strings short-circuit to 0. Otherwise the
        segments decide, then the pre-release (a release outranks any
        pre-release). Build metadata never takes part.
        """
        if str(self) == str(other):
            return 0

        result = precedence.compare_segments(self.segments, other.segments)
        if result != 0:
            return result

        if not self.prerelease and not other.prerelease:
            return 0
        if not self.prerelease:
            return 1
        if not other.prerelease:
            return -1
        return precedence.compare_prereleases(self.prerelease, other.prerelease)

    def copy(self) -> Version:
        """Return an independent copy of this version."""
        return Version(
            segments=list(self.segments),
            original_segment_count=self.original_segment_count,
            prerelease=self.prerelease,
            metadata=self.metadata,
        )

    def set_part(self, part: Union[VersionPart, str], value: int) -> Version:
        """Set major, minor or patch to value. See flexver.bump.set_part."""
        from .bump import set_part

        return set_part(self, part, value)

    def bump_part(self, part: Union[VersionPart, str]) -> Version:
        """Increment major, minor or patch by one. See flexver.bump.bump_part."""
        from .bump import bump_part

        return bump_part(self, part)

    def bump_version(self, part: Union[VersionPart, str]) -> Version:
        """Bump a part and reset lesser parts. See flexver.bump.bump_version."""
        from .bump import bump_version

        return bump_version(self, part)


def parse_version(version_string: str) -> Version:
    """Parse a version string into a Version object.

    Args:
        version_string: A string of the form
            MAJOR[.MINOR[.PATCH]][-prerelease][+metadata]

    Returns:
        A Version object with segments padded to three

    Raises:
        ParseError: If the string does not match the version grammar
        SegmentRangeError: If a numeric segment does not fit 32 bits

    Examples:
        >>> str(parse_version("1.2"))
        '1.2.0'

        >>> parse_version("1.2.0-x.Y.0+metadata").prerelease
        'x.Y.0'

        >>> parse_version("1.2.3.4")
        Traceback (most recent call last):
        ...
        flexver.semver.ParseError: Malformed version: '1.2.3.4'
    """
    if not isinstance(version_string, str):
        raise ParseError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    match = VERSION_PATTERN.fullmatch(version_string)
    if not match:
        raise ParseError(version_string)

    segments = []
    for raw in match.group("segments").split("."):
        # Length check first: int() refuses very long digit strings
        if len(raw.lstrip("0")) > len(str(MAX_SEGMENT_VALUE)) or int(raw) > MAX_SEGMENT_VALUE:
            raise SegmentRangeError(version_string, raw)
        segments.append(int(raw))
    original_segment_count = len(segments)
    segments.extend([0] * (SEGMENT_COUNT - original_segment_count))

    return Version(
        segments=segments,
        original_segment_count=original_segment_count,
        prerelease=match.group("prerelease") or "",
        metadata=match.group("metadata") or "",
    )


parse = parse_version


def is_valid_version(version_string: str) -> bool:
    """Check if a string parses as a version.

    Examples:
        >>> is_valid_version("1.2-beta.5")
        True
        >>> is_valid_version("1.2.beta")
        False
    """
    try:
        parse_version(version_string)
    except ParseError:
        return False
    return True
