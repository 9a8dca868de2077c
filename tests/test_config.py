"""
Tests for configuration loading.
"""

import pytest
from pydantic import ValidationError

from breakoverlap.config import TimelineConfig, load_config


class TestTimelineConfig:
    """Tests for TimelineConfig."""

    def test_defaults(self):
        """Test the default parsing policy."""
        config = TimelineConfig()

        assert config.time_format == "HH:mm"
        assert config.time_string_length == 10
        assert config.half_length == 5
        assert config.allow_equal_endpoints is True
        assert config.all_or_nothing_file_load is False

    @pytest.mark.parametrize("length", [0, -2, 9])
    def test_invalid_length(self, length):
        """Test that the combined length must split evenly."""
        with pytest.raises(ValueError, match="positive even number"):
            TimelineConfig(time_string_length=length)

    def test_empty_format(self):
        """Test that a time pattern is required."""
        with pytest.raises(ValueError):
            TimelineConfig(time_format=" ")

    def test_is_immutable(self):
        """Test that configuration cannot change after startup."""
        config = TimelineConfig()

        with pytest.raises(ValidationError):
            config.time_string_length = 12

    def test_load_from_yaml(self, tmp_path):
        """Test loading settings from a YAML file."""
        path = tmp_path / "breakoverlap.yaml"
        path.write_text(
            "time_format: HHmm\n"
            "time_string_length: 8\n"
            "all_or_nothing_file_load: true\n",
            encoding="utf-8",
        )

        config = TimelineConfig.load_from_yaml(path)

        assert config.time_format == "HHmm"
        assert config.time_string_length == 8
        assert config.allow_equal_endpoints is True
        assert config.all_or_nothing_file_load is True

    def test_load_from_missing_yaml(self, tmp_path):
        """Test that a missing explicit config file is an error."""
        with pytest.raises(FileNotFoundError):
            TimelineConfig.load_from_yaml(tmp_path / "nope.yaml")

    def test_load_from_invalid_yaml(self, tmp_path):
        """Test that malformed YAML is reported as ValueError."""
        path = tmp_path / "breakoverlap.yaml"
        path.write_text("time_format: [HH:mm\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid YAML"):
            TimelineConfig.load_from_yaml(path)

    def test_load_from_non_mapping_yaml(self, tmp_path):
        """Test that the YAML root must be a mapping."""
        path = tmp_path / "breakoverlap.yaml"
        path.write_text("- HH:mm\n", encoding="utf-8")

        with pytest.raises(ValueError, match="mapping"):
            TimelineConfig.load_from_yaml(path)


def test_load_config_prefers_file_in_cwd(tmp_path, monkeypatch):
    """The default location is the current directory."""
    (tmp_path / "breakoverlap.yaml").write_text("allow_equal_endpoints: false\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert load_config().allow_equal_endpoints is False


def test_load_config_explicit_path(tmp_path):
    """An explicit path is loaded as given."""
    path = tmp_path / "custom.yaml"
    path.write_text("time_string_length: 12\n", encoding="utf-8")

    assert load_config(path).time_string_length == 12
