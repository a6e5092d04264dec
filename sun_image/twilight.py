"""First light / last light derivation and moon time normalization."""

import logging

from .data.record import NO_EVENT, SunRecord
from .timeangle import MINUTES_PER_DEGREE, TimeParseError, parse_time

logger = logging.getLogger(__name__)

# First light is this far before sunrise, last light this far after sunset
TWILIGHT_DEGREES = 24
TWILIGHT_MINUTES = TWILIGHT_DEGREES * MINUTES_PER_DEGREE  # 96

# Substitutes for a missing moon event
MOONRISE_MIDNIGHT = "0:0"
MOONSET_MIDNIGHT = "23:59"


def derive_first_light(sunrise: str) -> str:
    """
    Get the time 96 minutes before sunrise.

    The hour is not wrapped, so a sunrise before 01:36 yields a negative
    hour (e.g. "-1:24"). Supported latitudes never get there.

    Args:
        sunrise: Sunrise in "HH:MM" format

    Returns:
        First light in "HH:MM" format, or "" if sunrise is malformed
    """
    try:
        t = parse_time(sunrise)
    except TimeParseError as e:
        logger.warning(f"derive_first_light() failed on input {sunrise!r}: {e}")
        return ""

    hour, minute = t.hour, t.minute
    if minute >= 36:
        minute -= 36
        hour -= 1
    else:
        minute += 24
        hour -= 2
    return f"{hour:02d}:{minute:02d}"


def derive_last_light(sunset: str) -> str:
    """
    Get the time 96 minutes after sunset.

    Mirror of derive_first_light(); the hour may reach 24 or more for a
    sunset after 22:24.
    """
    try:
        t = parse_time(sunset)
    except TimeParseError as e:
        logger.warning(f"derive_last_light() failed on input {sunset!r}: {e}")
        return ""

    hour, minute = t.hour, t.minute
    if minute < 24:
        minute += 36
        hour += 1
    else:
        minute -= 24
        hour += 2
    return f"{hour:02d}:{minute:02d}"


def normalize_moon_times(record: SunRecord) -> None:
    """Replace missing moonrise/moonset with the start/end of the day."""
    if record.moonrise == NO_EVENT:
        record.moonrise = MOONRISE_MIDNIGHT
    if record.moonset == NO_EVENT:
        record.moonset = MOONSET_MIDNIGHT


def apply_twilight(record: SunRecord) -> SunRecord:
    """
    Normalize the moon times and fill in first_light / last_light.

    The record is updated in place and returned for convenience.
    """
    normalize_moon_times(record)
    record.first_light = derive_first_light(record.sunrise)
    record.last_light = derive_last_light(record.sunset)
    logger.debug(
        f"Twilight: first light {record.first_light}, last light {record.last_light}"
    )
    return record
