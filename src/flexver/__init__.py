# SPDX-License-Identifier: MIT
"""Version parsing, comparison and bumping.

Versions carry one to three numeric segments (padded to major.minor.patch),
an optional pre-release and optional build metadata.

Example:
    >>> from flexver import parse_version, compare_versions, bump_version
    >>>
    >>> version = parse_version("1.2-beta.2+build.7")
    >>> str(version)
    '1.2.0-beta.2+build.7'
    >>> version.segments
    [1, 2, 0]
    >>>
    >>> compare_versions("1.2-beta", "1.2-beta.3")
    -1
    >>>
    >>> str(bump_version(version, "minor"))
    '1.3.0'
"""

__version__ = "0.1.0"

from .semver import (
    Version,
    VersionPart,
    parse,
    parse_version,
    is_valid_version,
    VersionError,
    ParseError,
    SegmentRangeError,
    UnsupportedPartError,
    MAX_SEGMENT_VALUE,
    SEGMENT_COUNT,
    VERSION_PATTERN,
    VERSION_PATTERN_RAW,
)
from .compare import (
    compare_versions,
    equal,
    less_than,
    greater_than,
    version_key,
    sort_versions,
    max_version,
)
from .bump import (
    set_part,
    bump_part,
    bump_version,
)
from .serialization import (
    DeserializationError,
    VersionField,
    VersionJSONEncoder,
    register_yaml_representer,
    version_from_json,
    version_from_yaml,
    version_to_json,
    version_to_yaml,
)

__all__ = [
    # Version parsing
    "Version",
    "VersionPart",
    "parse",
    "parse_version",
    "is_valid_version",
    "MAX_SEGMENT_VALUE",
    "SEGMENT_COUNT",
    "VERSION_PATTERN",
    "VERSION_PATTERN_RAW",
    # Errors
    "VersionError",
    "ParseError",
    "SegmentRangeError",
    "UnsupportedPartError",
    "DeserializationError",
    # Version comparison
    "compare_versions",
    "equal",
    "less_than",
    "greater_than",
    "version_key",
    "sort_versions",
    "max_version",
    # Version mutation
    "set_part",
    "bump_part",
    "bump_version",
    # Serialization
    "VersionField",
    "VersionJSONEncoder",
    "register_yaml_representer",
    "version_from_json",
    "version_from_yaml",
    "version_to_json",
    "version_to_yaml",
]
