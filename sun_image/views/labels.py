"""Placement of the sunrise/sunset/first light/last light labels.

Labels go into nine fixed slots on either side of the dial:

    +---------+--------+
    | slot 0  | slot 4 |
    | slot 1  | slot 5 |
    +---------+--------+
    | slot 2  | slot 6 |
    | slot 3  | slot 7 |
    |         | slot 8 |   mid summer, sunset well after 8 PM
    +---------+--------+

Slot choice depends only on the sunrise and sunset dial angles, so each
label sits beside its end of the arc without two labels sharing a slot.
"""

from dataclasses import dataclass

from ..twilight import TWILIGHT_DEGREES


@dataclass(frozen=True)
class LabelSlot:
    """Anchor point (center of the label's first baseline) in canvas pixels."""

    x: int
    y: int


LABEL_SLOTS = (
    LabelSlot(400, 330),
    LabelSlot(350, 450),
    LabelSlot(350, 700),
    LabelSlot(400, 820),
    LabelSlot(1490, 330),
    LabelSlot(1540, 450),
    LabelSlot(1540, 700),
    LabelSlot(1490, 820),
    LabelSlot(1440, 940),
)

SIX_AM = 90
SIX_PM = 270
# Sunsets up to 20 degrees (80 minutes) past 6 PM still fit in slots 6/7
LATE_SUNSET_MARGIN = 20


@dataclass(frozen=True)
class LabelPlacement:
    """Slot index for each of the four event labels."""

    sunrise: int
    first_light: int
    sunset: int
    last_light: int

    def anchor(self, slot: int) -> LabelSlot:
        return LABEL_SLOTS[slot]


def place_sunrise(sunrise_angle: float) -> tuple[int, int]:
    """Return (sunrise slot, first light slot)."""
    if sunrise_angle <= SIX_AM:
        # Sunrise and first light both before 6 AM
        return 2, 3
    if sunrise_angle < SIX_AM + TWILIGHT_DEGREES:
        # Sunrise after 6 AM, first light before
        return 1, 2
    return 0, 1


def place_sunset(sunset_angle: float) -> tuple[int, int]:
    """Return (sunset slot, last light slot)."""
    if sunset_angle <= SIX_PM - TWILIGHT_DEGREES:
        # Sunset and last light both before 6 PM
        return 4, 5
    if sunset_angle < SIX_PM:
        # Sunset before 6 PM, last light after
        return 5, 6
    if sunset_angle <= SIX_PM + LATE_SUNSET_MARGIN:
        return 6, 7
    return 7, 8


def place_labels(sunrise_angle: float, sunset_angle: float) -> LabelPlacement:
    """
    Choose label slots from the sunrise and sunset dial angles.

    Args:
        sunrise_angle: Sunrise dial angle in degrees (0-360)
        sunset_angle: Sunset dial angle in degrees (0-360)

    Returns:
        LabelPlacement with a slot index for every label
    """
    sunrise, first_light = place_sunrise(sunrise_angle)
    sunset, last_light = place_sunset(sunset_angle)
    return LabelPlacement(
        sunrise=sunrise,
        first_light=first_light,
        sunset=sunset,
        last_light=last_light,
    )
