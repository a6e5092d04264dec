"""Sun Image - sunrise, sunset and twilight clock-face image generator."""

from .builder import ImageResult, SunImageBuilder, encode_jpeg, render
from .data import NO_EVENT, SolarProvider, SunRecord
from .timeangle import format_time, to_dial_angle, to_render_angle
from .twilight import derive_first_light, derive_last_light

__version__ = "1.0.0"

__all__ = [
    "ImageResult",
    "SunImageBuilder",
    "encode_jpeg",
    "render",
    "NO_EVENT",
    "SolarProvider",
    "SunRecord",
    "format_time",
    "to_dial_angle",
    "to_render_angle",
    "derive_first_light",
    "derive_last_light",
]
