"""Tests for configuration loading and validation."""

import json
import logging

import pytest

from sun_image.config import (
    Config,
    ImageConfig,
    LocationConfig,
    _dict_to_config,
    load_config,
)


class TestLocationConfig:
    """Tests for LocationConfig validation."""

    def test_valid_location(self):
        """Test valid location config."""
        loc = LocationConfig(
            name="Boston, MA",
            region="USA",
            timezone="America/New_York",
            latitude=42.36,
            longitude=-71.06,
        )
        assert loc.validate() == []

    def test_invalid_latitude(self):
        """Test latitude over 90 is invalid."""
        errors = LocationConfig(latitude=91.0).validate()
        assert any("latitude" in e.lower() for e in errors)

    def test_invalid_longitude(self):
        """Test longitude under -180 is invalid."""
        errors = LocationConfig(longitude=-181.0).validate()
        assert any("longitude" in e.lower() for e in errors)

    def test_empty_timezone(self):
        """Test empty timezone is invalid."""
        errors = LocationConfig(timezone="").validate()
        assert any("timezone" in e.lower() for e in errors)

    def test_unknown_timezone(self):
        """Test a timezone name that does not exist."""
        errors = LocationConfig(timezone="Mars/Olympus_Mons").validate()
        assert any("timezone" in e.lower() for e in errors)


class TestImageConfig:
    """Tests for ImageConfig validation."""

    def test_defaults(self):
        """Test the default HD size and quality."""
        image = ImageConfig()
        assert (image.width, image.height) == (1920, 1080)
        assert image.jpeg_quality == 80
        assert image.validate() == []

    def test_invalid_dimensions(self):
        """Test zero width is invalid."""
        errors = ImageConfig(width=0).validate()
        assert any("dimensions" in e.lower() for e in errors)

    @pytest.mark.parametrize("quality", [0, 96, -5])
    def test_invalid_quality(self, quality):
        """Test JPEG quality outside 1-95."""
        errors = ImageConfig(jpeg_quality=quality).validate()
        assert any("jpeg_quality" in e for e in errors)


class TestLoadConfig:
    """Tests for load_config."""

    def test_load_file(self, temp_config_file):
        """Test loading an explicit config file."""
        config = load_config(temp_config_file)
        assert config.location.name == "Onset, MA"
        assert config.image.jpeg_quality == 80

    def test_missing_explicit_path(self, tmp_path):
        """Test an explicit missing path raises."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.json")

    def test_no_file_uses_defaults(self, tmp_path, monkeypatch):
        """Test defaults when no config file exists on the search path."""
        monkeypatch.setattr(
            "sun_image.config.CONFIG_PATHS", [tmp_path / "nope.json"]
        )
        config = load_config()
        assert isinstance(config, Config)
        assert config.image.width == 1920

    def test_invalid_json(self, tmp_path):
        """Test a malformed file raises ValueError."""
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_config(path)

    def test_validation_errors(self, tmp_path, sample_config_dict):
        """Test invalid values are reported together."""
        sample_config_dict["location"]["latitude"] = 100
        sample_config_dict["image"]["jpeg_quality"] = 0
        path = tmp_path / "config.json"
        path.write_text(json.dumps(sample_config_dict))

        with pytest.raises(ValueError) as exc_info:
            load_config(path)

        message = str(exc_info.value)
        assert "latitude" in message
        assert "jpeg_quality" in message

    def test_partial_section(self):
        """Test missing keys fall back to defaults."""
        config = _dict_to_config({"location": {"name": "Somewhere"}})
        assert config.location.name == "Somewhere"
        assert config.location.timezone == "America/New_York"
        assert config.image.height == 1080

    def test_unknown_section_ignored(self, caplog):
        """Test unknown top-level keys are skipped with a warning."""
        with caplog.at_level(logging.WARNING, logger="sun_image.config"):
            config = _dict_to_config({"weather": {"api_key": "x"}})

        assert config.location.name == "Onset, MA"
        assert "weather" in caplog.text
