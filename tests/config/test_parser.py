"""Unit tests for configuration parser."""

import pytest
from pathlib import Path

from goxplatforms.config.parser import (
    DEFAULT_CONFIG_NAME,
    GoxPlatformsConfig,
    TargetsConfig,
    find_config,
    parse_config,
    parse_config_data,
)
from goxplatforms.core.exceptions import ConfigError
from goxplatforms.cross.selection import PlatformFilter


@pytest.mark.unit
def test_parse_sample_config(sample_config_yaml):
    """Test parsing the shared sample configuration."""
    config = parse_config(sample_config_yaml)

    assert config.version == 1
    assert config.go_version == "go1.9.2"
    assert config.targets.os == ["linux", "!plan9"]
    assert config.targets.arch == ["amd64", "arm64"]
    assert config.targets.osarch == []
    assert config.targets.all is False


@pytest.mark.unit
def test_parse_minimal_config(tmp_path):
    """Test only version is required."""
    config_file = tmp_path / "goxplatforms.yaml"
    config_file.write_text("version: 1\n")

    config = parse_config(config_file)

    assert config == GoxPlatformsConfig(version=1)
    assert config.targets.to_filter().is_empty()


@pytest.mark.unit
def test_parse_full_targets(tmp_path):
    """Test all targets fields."""
    config_file = tmp_path / "goxplatforms.yaml"
    config_file.write_text(
        """
version: 1
targets:
  osarch:
    - windows/386
    - "!linux/mips"
  all: true
"""
    )

    config = parse_config(config_file)

    assert config.targets.osarch == ["windows/386", "!linux/mips"]
    assert config.targets.all is True
    assert config.targets.to_filter() == PlatformFilter(
        osarch=["windows/386", "!linux/mips"]
    )


@pytest.mark.unit
def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        parse_config(tmp_path / "missing.yaml")


@pytest.mark.unit
def test_invalid_yaml(tmp_path):
    config_file = tmp_path / "goxplatforms.yaml"
    config_file.write_text("invalid: yaml: : :")

    with pytest.raises(ConfigError, match="Invalid YAML"):
        parse_config(config_file)


@pytest.mark.unit
def test_empty_file(tmp_path):
    config_file = tmp_path / "goxplatforms.yaml"
    config_file.write_text("")

    with pytest.raises(ConfigError, match="empty"):
        parse_config(config_file)


@pytest.mark.unit
def test_directory_instead_of_file(tmp_path):
    """Test a directory path is reported as a config error."""
    with pytest.raises(ConfigError, match="Failed to read configuration file"):
        parse_config(tmp_path)


@pytest.mark.unit
def test_undecodable_file(tmp_path):
    config_file = tmp_path / "goxplatforms.yaml"
    config_file.write_bytes(b"version: 1\ngo_version: \xff\xfe\n")

    with pytest.raises(ConfigError, match="Failed to read configuration file"):
        parse_config(config_file)


@pytest.mark.unit
def test_unquoted_numeric_arch(tmp_path):
    """Test 'arch: 386' loads although YAML reads it as an integer."""
    config_file = tmp_path / "goxplatforms.yaml"
    config_file.write_text("version: 1\ntargets:\n  arch: 386\n")

    config = parse_config(config_file)

    assert config.targets.arch == ["386"]


@pytest.mark.unit
def test_boolean_version_in_file(tmp_path):
    config_file = tmp_path / "goxplatforms.yaml"
    config_file.write_text("version: true\n")

    with pytest.raises(ConfigError, match="Unsupported version"):
        parse_config(config_file)


class TestParseConfigData:
    """Validation of already-loaded configuration data."""

    def test_not_a_mapping(self):
        with pytest.raises(ConfigError, match="mapping"):
            parse_config_data(["version", 1])

    def test_missing_version(self):
        with pytest.raises(ConfigError, match="Missing required field: version"):
            parse_config_data({"go_version": "go1.9"})

    def test_unsupported_version(self):
        with pytest.raises(ConfigError, match="Unsupported version: 2"):
            parse_config_data({"version": 2})

    def test_boolean_version_rejected(self):
        """Test 'version: true' is not taken for version 1."""
        with pytest.raises(ConfigError, match="Unsupported version: True"):
            parse_config_data({"version": True})

    def test_go_version_must_be_string(self):
        with pytest.raises(ConfigError, match="go_version"):
            parse_config_data({"version": 1, "go_version": 1.9})

    def test_targets_must_be_mapping(self):
        with pytest.raises(ConfigError, match="'targets' must be a mapping"):
            parse_config_data({"version": 1, "targets": ["linux"]})

    def test_unknown_targets_field(self):
        with pytest.raises(ConfigError, match="platforms"):
            parse_config_data({"version": 1, "targets": {"platforms": "linux"}})

    @pytest.mark.parametrize("value", [True, 1.5, {"linux": True}])
    def test_wrong_target_type(self, value):
        with pytest.raises(ConfigError, match="targets.os"):
            parse_config_data({"version": 1, "targets": {"os": value}})

    def test_numeric_arch_is_accepted(self):
        config = parse_config_data({"version": 1, "targets": {"arch": 386}})
        assert config.targets.arch == ["386"]

    def test_numeric_arch_in_list(self):
        config = parse_config_data({"version": 1, "targets": {"arch": [386, "amd64"]}})
        assert config.targets.arch == ["386", "amd64"]

    def test_all_must_be_bool(self):
        with pytest.raises(ConfigError, match="targets.all"):
            parse_config_data({"version": 1, "targets": {"all": "yes"}})

    def test_invalid_osarch(self):
        with pytest.raises(ConfigError, match="Invalid target"):
            parse_config_data({"version": 1, "targets": {"osarch": "linux"}})

    def test_string_targets_are_split(self):
        config = parse_config_data({"version": 1, "targets": {"os": "linux,darwin"}})
        assert config.targets == TargetsConfig(os=["linux", "darwin"])


class TestFindConfig:
    def test_found(self, sample_config_yaml):
        assert find_config(sample_config_yaml.parent) == sample_config_yaml

    def test_not_found(self, tmp_path):
        assert find_config(tmp_path) is None

    def test_missing_directory(self):
        assert find_config(Path("/nonexistent-dir")) is None

    def test_default_name(self):
        assert DEFAULT_CONFIG_NAME == "goxplatforms.yaml"
