# SPDX-License-Identifier: MIT
"""Text serialization adapters for versions.

Every format stores a version as its canonical string and decodes by parsing
that string. A malformed payload raises DeserializationError; no default
version is ever substituted.

Example:
    >>> from flexver import parse_version
    >>> from flexver.serialization import version_to_json, version_from_json
    >>>
    >>> version_to_json(parse_version("1.2-beta"))
    '"1.2.0-beta"'
    >>> str(version_from_json('"1.2.3"'))
    '1.2.3'
"""

from __future__ import annotations

import json
from typing import Annotated, Any, Union

import yaml
from pydantic import PlainSerializer, PlainValidator

from .semver import ParseError, Version, VersionError, parse_version


class DeserializationError(VersionError):
    """Raised when a serialized payload does not hold a valid version.

    Attributes:
        payload: The raw payload that failed to decode
    """

    def __init__(self, payload: Any, message: str):
        self.payload = payload
        self.message = message
        super().__init__(message)


def _parse_scalar(value: Any, payload: Any, format_name: str) -> Version:
    if not isinstance(value, str):
        raise DeserializationError(
            payload, f"Expected a {format_name} string for a version, got {type(value).__name__}"
        )
    try:
        return parse_version(value)
    except ParseError as e:
        raise DeserializationError(payload, f"Invalid version in {format_name}: {e.message}") from e


# =============================================================================
# JSON
# =============================================================================


class VersionJSONEncoder(json.JSONEncoder):
    """JSON encoder that writes Version objects as their canonical string."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Version):
            return str(o)
        return super().default(o)


def version_to_json(version: Version) -> str:
    """Encode a version as a JSON string scalar."""
    return json.dumps(str(version))


def version_from_json(data: Union[str, bytes]) -> Version:
    """Decode a JSON string scalar into a version.

    Raises:
        DeserializationError: If data is not JSON, not a string, or not a version
    """
    try:
        value = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DeserializationError(data, f"Invalid JSON: {e}") from e
    return _parse_scalar(value, data, "JSON")


# =============================================================================
# YAML
# =============================================================================


def _represent_version(dumper: yaml.SafeDumper, version: Version) -> yaml.ScalarNode:
    return dumper.represent_str(str(version))


def register_yaml_representer(dumper: type[yaml.SafeDumper] = yaml.SafeDumper) -> None:
    """Teach a PyYAML dumper class to write Version objects as plain strings."""
    dumper.add_representer(Version, _represent_version)


def version_to_yaml(version: Version) -> str:
    """Encode a version as a YAML document holding a single string scalar."""
    # PyYAML closes a bare top-level scalar with an explicit "..." end marker
    return yaml.safe_dump(str(version)).removesuffix("...\n")


def version_from_yaml(data: Union[str, bytes]) -> Version:
    """Decode a YAML document holding a single scalar into a version.

    The scalar's source text is used as-is, so unquoted values that YAML
    would otherwise resolve to numbers (1.2, 3) still decode.

    Raises:
        DeserializationError: If data is not YAML, not a scalar, or not a version
    """
    try:
        node = yaml.compose(data, Loader=yaml.SafeLoader)
    except yaml.YAMLError as e:
        raise DeserializationError(data, f"Invalid YAML: {e}") from e
    if not isinstance(node, yaml.ScalarNode):
        kind = "empty document" if node is None else node.id
        raise DeserializationError(data, f"Expected a YAML scalar for a version, got {kind}")
    return _parse_scalar(node.value, data, "YAML")


# =============================================================================
# pydantic
# =============================================================================


def _validate_field(value: Any) -> Version:
    if isinstance(value, Version):
        return value.copy()
    try:
        return _parse_scalar(value, value, "field")
    except DeserializationError as e:
        # pydantic only wraps ValueError/AssertionError into ValidationError
        raise ValueError(e.message) from e


VersionField = Annotated[
    Version,
    PlainValidator(_validate_field),
    PlainSerializer(str, return_type=str),
]
"""pydantic field type: accepts a Version or a version string, dumps a string."""
