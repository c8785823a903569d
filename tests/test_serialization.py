# SPDX-License-Identifier: MIT
"""Unit tests for JSON, YAML and pydantic adapters."""

import json

import pytest
import yaml
from pydantic import BaseModel, ValidationError

from flexver import (
    DeserializationError,
    ParseError,
    Version,
    VersionField,
    VersionJSONEncoder,
    parse_version,
    register_yaml_representer,
    version_from_json,
    version_from_yaml,
    version_to_json,
    version_to_yaml,
)


class TestJSON:
    """Tests for the JSON adapter."""

    def test_encode(self):
        """Test that a version encodes as a JSON string."""
        assert version_to_json(parse_version("1.2-beta")) == '"1.2.0-beta"'

    def test_decode(self):
        """Test decoding a JSON string."""
        v = version_from_json('"1.2.3"')
        assert isinstance(v, Version)
        assert str(v) == "1.2.3"

    def test_decode_bytes(self):
        """Test decoding JSON bytes."""
        assert str(version_from_json(b'"1.2.0-x.Y.0+metadata"')) == "1.2.0-x.Y.0+metadata"

    def test_encoder_nested(self):
        """Test that VersionJSONEncoder handles nested versions."""
        data = {"Ver": parse_version("1.2.3")}
        assert json.dumps(data, cls=VersionJSONEncoder) == '{"Ver": "1.2.3"}'

    def test_encoder_rejects_other_objects(self):
        """Test that unrelated objects still fail to encode."""
        with pytest.raises(TypeError):
            json.dumps({"x": object()}, cls=VersionJSONEncoder)

    def test_very_long_segment(self):
        """Test that an oversized segment surfaces as DeserializationError."""
        with pytest.raises(DeserializationError):
            version_from_json(json.dumps("1" * 5000))

    def test_invalid_version(self):
        """Test that a malformed version string raises DeserializationError."""
        with pytest.raises(DeserializationError) as exc_info:
            version_from_json('"1.2.beta"')
        assert isinstance(exc_info.value.__cause__, ParseError)
        assert exc_info.value.payload == '"1.2.beta"'

    @pytest.mark.parametrize("payload", ["1.2", "null", "[]", "{", ""])
    def test_invalid_payload(self, payload):
        """Test that non-string or broken JSON raises DeserializationError."""
        with pytest.raises(DeserializationError):
            version_from_json(payload)


class TestYAML:
    """Tests for the YAML adapter."""

    def test_encode(self):
        """Test that a version encodes as a plain YAML scalar."""
        text = version_to_yaml(parse_version("1.2-beta"))
        assert text.strip() == "1.2.0-beta"
        assert yaml.safe_load(text) == "1.2.0-beta"

    def test_decode(self):
        """Test decoding a YAML scalar."""
        assert str(version_from_yaml("1.2.0-x.Y.0+metadata\n")) == "1.2.0-x.Y.0+metadata"

    @pytest.mark.parametrize("payload,expected", [("1.2", "1.2.0"), ("3", "3.0.0"), ("'1.2'", "1.2.0")])
    def test_decode_numeric_looking_scalar(self, payload, expected):
        """Test that scalars YAML would resolve to numbers still decode."""
        assert str(version_from_yaml(payload)) == expected

    @pytest.mark.parametrize("payload", ["", "[1, 2]", "a: b", "1.2.beta", "~"])
    def test_invalid_payload(self, payload):
        """Test that non-scalar or malformed YAML raises DeserializationError."""
        with pytest.raises(DeserializationError):
            version_from_yaml(payload)

    def test_register_representer(self):
        """Test dumping versions nested in a document."""

        class Dumper(yaml.SafeDumper):
            pass

        register_yaml_representer(Dumper)
        text = yaml.dump({"version": parse_version("1.2+build.5")}, Dumper=Dumper)
        assert text == "version: 1.2.0+build.5\n"
        assert str(version_from_yaml(yaml.safe_load(text)["version"])) == "1.2.0+build.5"


class Release(BaseModel):
    name: str
    version: VersionField


class TestPydantic:
    """Tests for the pydantic field type."""

    def test_validate_string(self):
        """Test that a string field value is parsed."""
        release = Release(name="demo", version="1.2-beta")
        assert isinstance(release.version, Version)
        assert release.version.prerelease == "beta"

    def test_validate_version(self):
        """Test that a Version field value is accepted as a copy."""
        v = parse_version("2.0")
        release = Release(name="demo", version=v)
        assert release.version == v
        assert release.version is not v

    def test_dump(self):
        """Test that the field dumps its canonical string."""
        release = Release(name="demo", version="1.2-beta+7")
        assert release.model_dump() == {"name": "demo", "version": "1.2.0-beta+7"}
        assert json.loads(release.model_dump_json())["version"] == "1.2.0-beta+7"

    def test_validate_json(self):
        """Test validating from a JSON document."""
        release = Release.model_validate_json('{"name": "demo", "version": "1.1.0-beta1"}')
        assert str(release.version.bump_version("minor")) == "1.2.0"

    @pytest.mark.parametrize("value", ["1.2.3.4", 12, None])
    def test_invalid(self, value):
        """Test that invalid values raise ValidationError."""
        with pytest.raises(ValidationError):
            Release(name="demo", version=value)
