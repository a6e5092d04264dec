"""Configuration loading and validation for Sun Image."""

import dataclasses
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

# Default paths to search for config
CONFIG_PATHS = [
    Path("config.json"),
    Path.home() / ".config" / "sun-image" / "config.json",
    Path("/etc/sun-image/config.json"),
]


@dataclass
class LocationConfig:
    """Location shown in the title and used for sun/moon calculations."""

    name: str = "Onset, MA"
    region: str = "USA"
    timezone: str = "America/New_York"
    latitude: float = 42.4
    longitude: float = -71.6

    def validate(self) -> list[str]:
        """Return list of validation errors, empty if valid."""
        errors = []
        if not -90 <= self.latitude <= 90:
            errors.append(f"Invalid latitude {self.latitude}: must be -90 to 90")
        if not -180 <= self.longitude <= 180:
            errors.append(f"Invalid longitude {self.longitude}: must be -180 to 180")
        if not self.timezone:
            errors.append("Timezone must not be empty")
        else:
            try:
                ZoneInfo(self.timezone)
            except (ZoneInfoNotFoundError, ValueError):
                errors.append(f"Unknown timezone '{self.timezone}'")
        return errors


@dataclass
class ImageConfig:
    """Output image settings."""

    width: int = 1920
    height: int = 1080
    jpeg_quality: int = 80

    def validate(self) -> list[str]:
        errors = []
        if self.width <= 0 or self.height <= 0:
            errors.append(f"Invalid image dimensions: {self.width}x{self.height}")
        if not 1 <= self.jpeg_quality <= 95:
            errors.append(
                f"Invalid jpeg_quality {self.jpeg_quality}: must be 1-95"
            )
        return errors


@dataclass
class Config:
    """Main configuration container."""

    location: LocationConfig = field(default_factory=LocationConfig)
    image: ImageConfig = field(default_factory=ImageConfig)

    def validate(self) -> list[str]:
        """Validate all configuration sections. Returns list of errors."""
        errors = []
        errors.extend(self.location.validate())
        errors.extend(self.image.validate())
        return errors


def _dataclass_from_dict(cls, data: dict):
    """Create a dataclass instance from a dict, using field defaults for missing keys."""
    kwargs = {}
    for f in dataclasses.fields(cls):
        if f.name in data:
            kwargs[f.name] = data[f.name]
        elif f.default is not dataclasses.MISSING:
            kwargs[f.name] = f.default
        elif f.default_factory is not dataclasses.MISSING:
            kwargs[f.name] = f.default_factory()
    return cls(**kwargs)


# Mapping from config JSON keys to their dataclass types
_CONFIG_SECTIONS = {
    "location": ("location", LocationConfig),
    "image": ("image", ImageConfig),
}


def _dict_to_config(data: dict) -> Config:
    """Convert a dictionary to a Config object."""
    config = Config()
    for key, value in data.items():
        if key not in _CONFIG_SECTIONS:
            logger.warning(f"Ignoring unknown config section '{key}'")
            continue
        attr, cls = _CONFIG_SECTIONS[key]
        setattr(config, attr, _dataclass_from_dict(cls, value))
    return config


def load_config(config_path: Optional[Path] = None) -> Config:
    """
    Load configuration from JSON file.

    Args:
        config_path: Explicit path to config file. If None, searches default paths.

    Returns:
        Config object with loaded settings.

    Raises:
        FileNotFoundError: If no config file found and config_path was explicit.
        ValueError: If config file has validation errors.
    """
    if config_path is not None:
        paths_to_try = [config_path]
    else:
        paths_to_try = CONFIG_PATHS

    found_path = None
    for path in paths_to_try:
        if path.exists():
            found_path = path
            break

    if found_path is None:
        if config_path is not None:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        logger.warning("No config file found, using defaults")
        return Config()

    logger.info(f"Loading config from {found_path}")
    try:
        with open(found_path, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {found_path}: {e}")

    config = _dict_to_config(data)

    errors = config.validate()
    if errors:
        error_msg = "Config validation errors:\n" + "\n".join(
            f"  - {e}" for e in errors
        )
        raise ValueError(error_msg)

    return config
