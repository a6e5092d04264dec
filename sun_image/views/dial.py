"""Sun dial renderer - 24 hour clock face with day and twilight arcs."""

import logging
import math
from dataclasses import dataclass

from ..data.record import SunRecord
from ..timeangle import format_time, to_dial_angle, to_render_angle
from ..twilight import TWILIGHT_DEGREES
from .canvas import (
    Canvas,
    Transform,
    center_text,
    fill_circle,
    fill_text,
    radial_line,
    stroke_arc,
    text_width,
)
from .colors import (
    BACKGROUND,
    LABEL_COLOR,
    SUN_ARC_COLOR,
    SUN_CIRCLE_COLOR,
    SUN_DOWN_COLOR,
    SUN_UP_COLOR,
    TICK_COLOR,
    TIME_LABEL_COLOR,
    TITLE_COLOR,
    TWILIGHT_COLOR,
)
from .font_manager import FontSize, get_font_manager
from .labels import LabelPlacement, place_labels

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DialAngles:
    """Dial angles (degrees, 0 = midnight) for one render."""

    sunrise: float
    sunset: float
    am_twilight: float
    pm_twilight: float
    current: float

    @property
    def sun_up(self) -> bool:
        return self.sunrise < self.current < self.sunset


def compute_angles(record: SunRecord) -> DialAngles:
    """Convert the record's times to dial angles."""
    sunrise = to_dial_angle(record.sunrise)
    sunset = to_dial_angle(record.sunset)
    return DialAngles(
        sunrise=sunrise,
        sunset=sunset,
        am_twilight=sunrise - TWILIGHT_DEGREES,
        pm_twilight=sunset + TWILIGHT_DEGREES,
        # Only hours and minutes of "HH:MM:SS.mmm" are used
        current=to_dial_angle(record.current_time),
    )


class DialRenderer:
    """
    Draws the sun dial image.

    Midnight is at the bottom of the dial and noon at the top; the day
    arc runs clockwise from sunrise on the left to sunset on the right.
    """

    title_format = "Sunrise and Sunset for {location}"
    title_y = 90

    radius = 380
    arc_width = 70
    sun_radius = 70
    # Dial center sits below the image center to leave room for the title
    center_offset_y = 40

    def __init__(self, width: int = 1920, height: int = 1080):
        self.width = width
        self.height = height
        self.center_x = width / 2
        self.center_y = height / 2 + self.center_offset_y
        self.fonts = get_font_manager()
        self._origin = Transform().translate(self.center_x, self.center_y)

    def render(self, record: SunRecord, location: str, date_label: str) -> Canvas:
        """
        Render the dial for a record whose first/last light are filled in.

        Args:
            record: Event times (see twilight.apply_twilight)
            location: Location name for the title
            date_label: Generation timestamp shown bottom right

        Returns:
            Canvas holding the finished RGBA image
        """
        angles = compute_angles(record)
        placement = place_labels(angles.sunrise, angles.sunset)
        logger.debug(f"Dial angles {angles}, label slots {placement}")

        canvas = Canvas(self.width, self.height)
        canvas.fill_rect(0, 0, self.width, self.height, BACKGROUND)

        self._draw_title(canvas, self.title_format.format(location=location))
        self._draw_ticks(canvas)
        self._draw_dial_circle(canvas)
        self._draw_time_labels(canvas)
        self._draw_arcs(canvas, angles)
        self._draw_markers(canvas, angles)
        self._draw_sun(canvas, angles)
        self._draw_event_labels(canvas, record, placement)
        self._draw_date(canvas, date_label)
        return canvas

    def _draw_title(self, canvas: Canvas, title: str) -> None:
        font = self.fonts.get_bold_font(FontSize.LARGE)
        center_text(canvas, title, self.width / 2, self.title_y, font, TITLE_COLOR)

    def _draw_ticks(self, canvas: Canvas) -> None:
        """Minor ticks every hour, major ticks every six hours."""
        for angle in range(15, 361, 15):
            t = self._origin.rotate(math.radians(angle))
            radial_line(
                canvas, t, self.radius - 25, self.radius + 25, 2, TICK_COLOR, True
            )
        for angle in range(90, 361, 90):
            t = self._origin.rotate(math.radians(angle))
            radial_line(
                canvas, t, self.radius - 40, self.radius + 45, 8, TICK_COLOR, True
            )

    def _draw_dial_circle(self, canvas: Canvas) -> None:
        # Narrower than the arcs so no edge shows once they are drawn over it
        stroke_arc(
            canvas,
            self.center_x,
            self.center_y,
            self.radius,
            0,
            2 * math.pi,
            self.arc_width - 4,
            SUN_CIRCLE_COLOR,
        )

    def _draw_time_labels(self, canvas: Canvas) -> None:
        font = self.fonts.get_font(FontSize.SMALL)
        cx, cy, r = self.center_x, self.center_y, self.radius
        center_text(canvas, "12 PM", cx, cy - (r + 50), font, TIME_LABEL_COLOR)
        center_text(
            canvas, "12 AM", cx, cy + (r + FontSize.SMALL + 50), font, TIME_LABEL_COLOR
        )
        six_am_x = cx - (r + text_width(canvas, "6 AM", font) + 60)
        label_y = cy + FontSize.SMALL / 2
        fill_text(canvas, "6 AM", six_am_x, label_y, font, TIME_LABEL_COLOR)
        fill_text(canvas, "6 PM", cx + r + 60, label_y, font, TIME_LABEL_COLOR)

    def _draw_arcs(self, canvas: Canvas, angles: DialAngles) -> None:
        """Day arc, then the morning and evening twilight arcs."""
        spans = [
            (angles.sunrise, angles.sunset, SUN_ARC_COLOR),
            (angles.am_twilight, angles.sunrise, TWILIGHT_COLOR),
            (angles.sunset, angles.pm_twilight, TWILIGHT_COLOR),
        ]
        for start, end, color in spans:
            stroke_arc(
                canvas,
                self.center_x,
                self.center_y,
                self.radius,
                to_render_angle(start),
                to_render_angle(end),
                self.arc_width,
                color,
            )

    def _draw_markers(self, canvas: Canvas, angles: DialAngles) -> None:
        """Long ticks at sunrise, first light, sunset and last light."""
        for angle in (
            angles.sunrise,
            angles.am_twilight,
            angles.sunset,
            angles.pm_twilight,
        ):
            t = self._origin.rotate(to_render_angle(angle))
            radial_line(canvas, t, self.radius - 50, self.radius + 80, 3, LABEL_COLOR)

    def _draw_sun(self, canvas: Canvas, angles: DialAngles) -> None:
        """
        Draw the sun at the current time.

        A background disc erases the arcs underneath first, then the sun is
        filled in the arc color with a slightly smaller disc on top in the
        day or night color.
        """
        t = self._origin.rotate(to_render_angle(angles.current))
        inner_color = SUN_UP_COLOR if angles.sun_up else SUN_DOWN_COLOR
        fill_circle(canvas, t, self.radius, 0, self.sun_radius + 5, BACKGROUND)
        fill_circle(canvas, t, self.radius, 0, self.sun_radius, SUN_ARC_COLOR)
        fill_circle(canvas, t, self.radius, 0, self.sun_radius - 3, inner_color)

    def _draw_event_labels(
        self, canvas: Canvas, record: SunRecord, placement: LabelPlacement
    ) -> None:
        font = self.fonts.get_font(FontSize.MEDIUM)
        labels = [
            ("Sunrise", record.sunrise, placement.sunrise),
            ("Sunset", record.sunset, placement.sunset),
            ("First light", record.first_light, placement.first_light),
            ("Last light", record.last_light, placement.last_light),
        ]
        for name, time_str, slot in labels:
            anchor = placement.anchor(slot)
            center_text(canvas, name, anchor.x, anchor.y, font, LABEL_COLOR)
            center_text(
                canvas,
                format_time(time_str),
                anchor.x,
                anchor.y + FontSize.MEDIUM,
                font,
                LABEL_COLOR,
            )

    def _draw_date(self, canvas: Canvas, date_label: str) -> None:
        font = self.fonts.get_font(FontSize.SMALL)
        fill_text(
            canvas,
            date_label,
            self.width * 11 / 16,
            self.height - 20,
            font,
            TITLE_COLOR,
        )
