"""Sun and moon event record consumed by the renderer."""

import dataclasses
from dataclasses import dataclass
from typing import Any

# Upstream marker for "no moonrise/moonset on this date"
NO_EVENT = "-:-"


@dataclass
class SunRecord:
    """
    Event times for one day at one location.

    All times are 24 hour "HH:MM" strings in the location's time zone,
    except current_time which is "HH:MM:SS.mmm". first_light and
    last_light are derived and written back by the twilight step.
    """

    sunrise: str
    sunset: str
    moonrise: str = NO_EVENT
    moonset: str = NO_EVENT
    current_time: str = "00:00:00.000"
    date: str = ""
    first_light: str = ""
    last_light: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SunRecord":
        """
        Build a record from an astronomy API style dictionary.

        Unknown keys (sun_altitude, moon_status, ...) are ignored. Both
        "first_light" and the upstream camelCase "firstLight" are accepted.
        """
        aliases = {"firstLight": "first_light", "lastLight": "last_light"}
        names = {f.name for f in dataclasses.fields(cls)}
        kwargs = {}
        for key, value in data.items():
            key = aliases.get(key, key)
            if key in names:
                kwargs[key] = str(value)
        return cls(**kwargs)

    def to_dict(self) -> dict[str, str]:
        """Return the record as a plain dictionary."""
        return dataclasses.asdict(self)
