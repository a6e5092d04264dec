"""Data providers for Sun Image."""

from .record import NO_EVENT, SunRecord
from .solar import SolarProvider, format_date_label

__all__ = ["NO_EVENT", "SunRecord", "SolarProvider", "format_date_label"]
