"""Font manager singleton for centralized font caching."""

import logging
from typing import Union

from PIL import ImageFont

logger = logging.getLogger(__name__)

# Font paths (in order of preference)
FONT_PATHS = [
    "/usr/share/fonts/truetype/open-sans/OpenSans-Regular.ttf",  # Debian/Ubuntu
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",  # Debian/Ubuntu/Raspbian
    "/usr/share/fonts/TTF/DejaVuSans.ttf",  # Arch Linux
    "/System/Library/Fonts/Helvetica.ttc",  # macOS
    "/usr/share/fonts/dejavu/DejaVuSans.ttf",  # Alternative Linux path
]

BOLD_FONT_PATHS = [
    "/usr/share/fonts/truetype/open-sans/OpenSans-Bold.ttf",  # Debian/Ubuntu
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",  # Debian/Ubuntu/Raspbian
    "/usr/share/fonts/TTF/DejaVuSans-Bold.ttf",  # Arch Linux
    "/System/Library/Fonts/Helvetica.ttc",  # macOS (bold variant)
    "/usr/share/fonts/dejavu/DejaVuSans-Bold.ttf",  # Alternative Linux path
]

Font = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


class FontSize:
    """Pixel sizes used on the dial (approximate capital letter height)."""

    LARGE = 72  # Title
    MEDIUM = 60  # Event labels
    SMALL = 40  # Cardinal times and generation date
    EXTRA_SMALL = 22


class FontManager:
    """
    Singleton font manager for centralized font caching.

    Fonts come from the system font directories; the Pillow default
    font scaled to the requested size is used when none is installed.
    """

    _instance = None
    _initialized = False

    def __new__(cls):
        """Ensure only one instance exists."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize the font manager (only once)."""
        if not FontManager._initialized:
            self._fonts: dict[int, Font] = {}
            self._bold_fonts: dict[int, Font] = {}
            FontManager._initialized = True
            logger.debug("FontManager singleton initialized")

    def get_font(self, size: int) -> Font:
        """
        Get a font at the specified size.

        Args:
            size: Font size in pixels

        Returns:
            PIL ImageFont
        """
        if size not in self._fonts:
            self._fonts[size] = self._load(FONT_PATHS, size)
        return self._fonts[size]

    def get_bold_font(self, size: int) -> Font:
        """Get a bold font at the specified size, or the regular one."""
        if size not in self._bold_fonts:
            self._bold_fonts[size] = self._load(BOLD_FONT_PATHS, size)
        return self._bold_fonts[size]

    def _load(self, paths: list[str], size: int) -> Font:
        for path in paths:
            try:
                return ImageFont.truetype(path, size)
            except OSError:
                continue
        logger.warning(f"No system fonts found for size {size}, using default")
        return ImageFont.load_default(size)

    def clear_cache(self) -> None:
        """Clear the font cache (useful for testing or memory management)."""
        self._fonts.clear()
        self._bold_fonts.clear()
        logger.debug("Font cache cleared")


# Global instance
_font_manager = FontManager()


def get_font_manager() -> FontManager:
    """
    Get the global FontManager instance.

    Returns:
        FontManager singleton instance
    """
    return _font_manager
