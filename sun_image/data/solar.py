"""Offline sun and moon event provider using astral and ephem."""

import datetime
import logging
from typing import Optional
from zoneinfo import ZoneInfo

import ephem
from astral import LocationInfo
from astral.sun import sunrise, sunset

from .record import NO_EVENT, SunRecord

logger = logging.getLogger(__name__)


def format_clock(dt: datetime.datetime) -> str:
    """Format a datetime as a 24 hour "HH:MM" string."""
    return dt.strftime("%H:%M")


def format_current_time(dt: datetime.datetime) -> str:
    """Format a datetime as "HH:MM:SS.mmm"."""
    return f"{dt:%H:%M:%S}.{dt.microsecond // 1000:03d}"


MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def format_date_label(dt: datetime.datetime) -> str:
    """
    Format the generation timestamp, e.g. "Oct 18, 2026, 3:07 PM".

    Month names and the AM/PM suffix are fixed English, independent of locale.
    """
    month = MONTH_ABBREVIATIONS[dt.month - 1]
    hour = dt.hour % 12 or 12
    suffix = "AM" if dt.hour < 12 else "PM"
    return f"{month} {dt.day}, {dt.year}, {hour}:{dt.minute:02d} {suffix}"


class SolarProvider:
    """
    Provides the sun/moon event record for a location.

    Sunrise and sunset come from astral, moonrise and moonset from ephem.
    Times are reported in the location's time zone.
    """

    def __init__(
        self,
        name: str,
        region: str,
        timezone: str,
        latitude: float,
        longitude: float,
    ):
        """
        Initialize solar provider.

        Args:
            name: Location name
            region: Region/country
            timezone: Timezone string (e.g., "America/New_York")
            latitude: Location latitude
            longitude: Location longitude
        """
        self.location = LocationInfo(
            name=name,
            region=region,
            timezone=timezone,
            latitude=latitude,
            longitude=longitude,
        )
        self.tz = ZoneInfo(timezone)

    @classmethod
    def from_config(cls, location) -> "SolarProvider":
        """Create a provider from a LocationConfig."""
        return cls(
            name=location.name,
            region=location.region,
            timezone=location.timezone,
            latitude=location.latitude,
            longitude=location.longitude,
        )

    def now(self) -> datetime.datetime:
        """Current time in the location's time zone."""
        return datetime.datetime.now(self.tz)

    def get_sun_record(
        self,
        date: Optional[datetime.date] = None,
        now: Optional[datetime.datetime] = None,
    ) -> Optional[SunRecord]:
        """
        Get the event record for a date.

        Args:
            date: Date to get times for (default: today at the location)
            now: Time used for current_time (default: now)

        Returns:
            SunRecord, or None when the sun does not rise or set that day
        """
        if now is None:
            now = self.now()
        else:
            now = now.astimezone(self.tz)
        if date is None:
            date = now.date()

        observer = self.location.observer
        try:
            rise = sunrise(observer, date=date, tzinfo=self.tz)
            set_ = sunset(observer, date=date, tzinfo=self.tz)
        except ValueError as e:
            # Polar day/night
            logger.warning(f"Could not calculate sun times for {date}: {e}")
            return None

        moonrise, moonset = self._get_moon_times(date)

        return SunRecord(
            sunrise=format_clock(rise),
            sunset=format_clock(set_),
            moonrise=moonrise,
            moonset=moonset,
            current_time=format_current_time(now),
            date=date.isoformat(),
        )

    def _get_moon_times(self, date: datetime.date) -> tuple[str, str]:
        """
        Get moonrise and moonset for the local date.

        Returns NO_EVENT for an event that does not happen on that date.
        """
        local_midnight = datetime.datetime.combine(date, datetime.time(), self.tz)
        start_utc = local_midnight.astimezone(datetime.timezone.utc)

        observer = ephem.Observer()
        observer.lat = str(self.location.latitude)
        observer.lon = str(self.location.longitude)
        observer.date = ephem.Date(start_utc.replace(tzinfo=None))

        moon = ephem.Moon()
        moonrise = self._next_event(observer.next_rising, moon, date)
        moonset = self._next_event(observer.next_setting, moon, date)
        return moonrise, moonset

    def _next_event(self, finder, body, date: datetime.date) -> str:
        """Run an ephem rising/setting search and format the local time."""
        try:
            event = finder(body)
        except (ephem.NeverUpError, ephem.AlwaysUpError):
            return NO_EVENT

        local = (
            ephem.Date(event)
            .datetime()
            .replace(tzinfo=datetime.timezone.utc)
            .astimezone(self.tz)
        )
        if local.date() != date:
            return NO_EVENT
        return format_clock(local)
