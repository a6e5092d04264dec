"""Builds the sun dial JPEG from event times."""

import datetime
import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PIL import Image

from .config import Config, load_config
from .data.record import SunRecord
from .data.solar import SolarProvider, format_date_label
from .twilight import apply_twilight
from .views.dial import DialRenderer

logger = logging.getLogger(__name__)

DEFAULT_JPEG_QUALITY = 80


@dataclass
class ImageResult:
    """Encoded image and its type ("jpg")."""

    image_type: str
    image_data: bytes


def render(
    record: Optional[SunRecord],
    location: str,
    date_label: str,
    width: int = 1920,
    height: int = 1080,
) -> Optional[Image.Image]:
    """
    Render the sun dial for one day.

    The record gets its moon times normalized and first_light/last_light
    written back before drawing.

    Args:
        record: Event times, or None when no data could be obtained
        location: Location name for the title (e.g. "Boston, MA")
        date_label: Generation timestamp shown bottom right
        width: Image width in pixels
        height: Image height in pixels

    Returns:
        RGBA image, or None if there is no image available
    """
    if record is None:
        logger.warning("No sun data, no image available")
        return None

    try:
        apply_twilight(record)
        canvas = DialRenderer(width, height).render(record, location, date_label)
    except Exception as e:
        logger.error(f"Failed to render sun dial: {e}", exc_info=True)
        return None

    return canvas.image


def encode_jpeg(image: Image.Image, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    """Encode an image as JPEG bytes (alpha is dropped)."""
    buffer = io.BytesIO()
    image.convert("RGB").save(buffer, format="JPEG", quality=quality)
    return buffer.getvalue()


class SunImageBuilder:
    """Gets the day's event times and produces the encoded sun dial."""

    def __init__(self, config: Config, provider: SolarProvider):
        """
        Initialize the builder.

        Args:
            config: Application configuration
            provider: Source of the day's SunRecord
        """
        self.config = config
        self.provider = provider

    @classmethod
    def from_config(cls, config: Config) -> "SunImageBuilder":
        return cls(config, SolarProvider.from_config(config.location))

    @classmethod
    def from_config_file(cls, config_path: Optional[Path] = None) -> "SunImageBuilder":
        """
        Create a builder from a JSON config file.

        Args:
            config_path: Explicit config file. If None, searches default paths.

        Raises:
            FileNotFoundError: If an explicit config_path does not exist.
            ValueError: If the config file is invalid.
        """
        return cls.from_config(load_config(config_path))

    def get_image(
        self,
        date: Optional[datetime.date] = None,
        now: Optional[datetime.datetime] = None,
    ) -> Optional[ImageResult]:
        """
        Build the JPEG for a date.

        Args:
            date: Date to render (default: today at the location)
            now: Time used for the sun marker and timestamp (default: now)

        Returns:
            ImageResult, or None if no image is available
        """
        try:
            if now is None:
                now = self.provider.now()
            record = self.provider.get_sun_record(date, now)
            date_label = format_date_label(now.astimezone(self.provider.tz))
        except Exception as e:
            logger.error(f"Failed to get sun data: {e}", exc_info=True)
            return None

        image = render(
            record,
            self.config.location.name,
            date_label,
            self.config.image.width,
            self.config.image.height,
        )
        if image is None:
            return None

        try:
            data = encode_jpeg(image, self.config.image.jpeg_quality)
        except Exception as e:
            logger.error(f"Failed to encode JPEG: {e}", exc_info=True)
            return None

        logger.info(
            f"Built sun image for {self.config.location.name} "
            f"({record.date}, {len(data)} bytes)"
        )
        return ImageResult(image_type="jpg", image_data=data)
