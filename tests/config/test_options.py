"""Tests for generator options and config file loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from imgres.config import (
    USAGE,
    GeneratorOptions,
    build_options,
    load_yaml_file,
    merge_options,
)
from imgres.errors import ConfigurationError


class TestGeneratorOptions:
    """Test the options model."""

    def test_defaults(self) -> None:
        """Test optional fields default to off."""
        options = GeneratorOptions(dir=Path("assets"), out=Path("src/images.ts"))
        assert options.read is None
        assert options.ts is False

    def test_resource_base_without_read(self) -> None:
        """Test the base is the output file's directory."""
        options = GeneratorOptions(dir=Path("assets"), out=Path("src/images.ts"))
        assert options.resource_base == Path("src")

    def test_resource_base_with_read(self) -> None:
        """Test the read prefix is joined onto the output directory."""
        options = GeneratorOptions(
            dir=Path("assets"), out=Path("src/images.ts"), read=Path("../lib")
        )
        assert options.resource_base == Path("src/../lib")

    def test_frozen(self) -> None:
        """Test options cannot change after creation."""
        options = GeneratorOptions(dir=Path("assets"), out=Path("images.ts"))
        with pytest.raises(ValidationError):
            options.ts = True  # type: ignore[misc]

    def test_unknown_field_rejected(self) -> None:
        """Test unknown keys are refused."""
        with pytest.raises(ValidationError):
            GeneratorOptions(dir="a", out="b", watch=True)  # type: ignore[call-arg]


class TestBuildOptions:
    """Test validation of raw option values."""

    def test_valid(self) -> None:
        """Test complete values build options."""
        options = build_options({"dir": "assets", "out": "images.ts", "ts": True})
        assert options.dir == Path("assets")
        assert options.ts is True

    def test_missing_dir(self) -> None:
        """Test a missing dir raises with usage text."""
        with pytest.raises(ConfigurationError) as exc_info:
            build_options({"out": "images.ts"})

        assert "--dir" in exc_info.value.message
        assert USAGE in str(exc_info.value)

    def test_missing_out(self) -> None:
        """Test a missing out raises."""
        with pytest.raises(ConfigurationError, match="--out"):
            build_options({"dir": "assets", "out": None})

    def test_invalid_value(self) -> None:
        """Test invalid values become configuration errors."""
        with pytest.raises(ConfigurationError, match="Invalid options"):
            build_options({"dir": "assets", "out": "images.ts", "ts": "maybe"})


class TestLoadYamlFile:
    """Test reading options from YAML."""

    def test_paths_resolved_against_file(self, tmp_path: Path) -> None:
        """Test relative dir and out are rebased, read is kept."""
        config_file = tmp_path / "imgres.yaml"
        config_file.write_text("dir: assets\nout: src/images.ts\nread: ..\nts: true\n")

        values = load_yaml_file(config_file)

        assert values["dir"] == tmp_path / "assets"
        assert values["out"] == tmp_path / "src/images.ts"
        assert values["read"] == ".."
        assert values["ts"] is True

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test an empty file provides no values."""
        config_file = tmp_path / "imgres.yaml"
        config_file.write_text("")
        assert load_yaml_file(config_file) == {}

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        """Test a non-mapping document is rejected."""
        config_file = tmp_path / "imgres.yaml"
        config_file.write_text("- dir\n- out\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            load_yaml_file(config_file)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test malformed YAML is rejected."""
        config_file = tmp_path / "imgres.yaml"
        config_file.write_text("dir: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_yaml_file(config_file)


def test_merge_options_cli_wins() -> None:
    """Test command-line values override file values unless None."""
    merged = merge_options(
        {"dir": "a", "out": "o.ts", "ts": True}, {"dir": "b", "out": None, "ts": None}
    )
    assert merged == {"dir": "b", "out": "o.ts", "ts": True}
