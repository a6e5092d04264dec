"""Clock time to dial angle conversion and 12-hour display formatting.

The dial maps one day onto a full circle: 0 degrees is midnight, 180 is
noon, and every hour advances the angle 15 degrees clockwise (one degree
every four minutes).
"""

import logging
import math
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEGREES_PER_HOUR = 15
MINUTES_PER_DEGREE = 4

# ASCII digits only; int() alone also takes "1_2" and full-width digits
_INTEGER_FIELD = re.compile(r"\s*[+-]?\d+\s*", re.ASCII)


class TimeParseError(ValueError):
    """Raised when a clock string is not a valid "HH:MM" time of day."""


@dataclass(frozen=True)
class TimeOfDay:
    """Wall-clock time with hour 0-23 and minute 0-59."""

    hour: int
    minute: int


def parse_time(time_str: str) -> TimeOfDay:
    """
    Parse a colon-delimited clock string.

    Accepts "HH:MM", "HH:MM:SS" and "HH:MM:SS.mmm"; anything after the
    minute field is ignored.

    Args:
        time_str: Time string in 24 hour format

    Returns:
        Parsed TimeOfDay

    Raises:
        TimeParseError: If the string has no minute field, a non-integer
            component, or an hour/minute out of range.
    """
    fields = str(time_str).split(":")
    if len(fields) < 2:
        raise TimeParseError(f"Expected HH:MM, got {time_str!r}")

    if not all(_INTEGER_FIELD.fullmatch(field) for field in fields[:2]):
        raise TimeParseError(f"Non-numeric time {time_str!r}")
    hour = int(fields[0])
    minute = int(fields[1])

    if not 0 <= hour <= 23 or not 0 <= minute <= 59:
        raise TimeParseError(f"Time out of range {time_str!r}")

    return TimeOfDay(hour=hour, minute=minute)


def to_dial_angle(time_str: str) -> float:
    """
    Convert a clock string to its position on the dial.

    Args:
        time_str: "HH:MM" or "HH:MM:SS[.mmm]"

    Returns:
        Degrees clockwise from midnight ("00:00" -> 0, "23:59" -> 359.75).
        Malformed input logs a warning and returns 0.
    """
    try:
        t = parse_time(time_str)
    except TimeParseError as e:
        logger.warning(f"to_dial_angle() failed on input {time_str!r}: {e}")
        return 0.0
    return t.hour * DEGREES_PER_HOUR + t.minute / MINUTES_PER_DEGREE


def to_render_angle(dial_angle: float) -> float:
    """
    Convert a dial angle to a drawing rotation in radians.

    Drawing angles start on the positive X axis and run clockwise (Y
    points down), so the dial is turned a quarter then half turn and
    wrapped into 0-360 before conversion. Python's modulo keeps negative
    inputs (e.g. a twilight start just before midnight) non-negative.
    """
    return math.radians((dial_angle + 180 - 90) % 360)


def format_time(time_str: str) -> str:
    """
    Format a 24 hour time for display. "22:45" -> "10:45 PM".

    Returns an empty string (and logs a warning) for malformed input.
    """
    try:
        t = parse_time(time_str)
    except TimeParseError as e:
        logger.warning(f"format_time() failed on input {time_str!r}: {e}")
        return ""

    hour = t.hour % 12
    if hour == 0:
        hour = 12
    am_pm = "PM" if t.hour >= 12 else "AM"
    return f"{hour}:{t.minute:02d} {am_pm}"
