"""Tests for the sun dial renderer."""

import math

import pytest

from sun_image.data.record import SunRecord
from sun_image.twilight import apply_twilight
from sun_image.views.colors import (
    BACKGROUND,
    SUN_ARC_COLOR,
    SUN_CIRCLE_COLOR,
    SUN_DOWN_COLOR,
    SUN_UP_COLOR,
    TWILIGHT_COLOR,
)
from sun_image.views.dial import DialRenderer, compute_angles

CENTER_X = 960
CENTER_Y = 580
RADIUS = 380


def _dial_point(dial_angle, radius=RADIUS):
    """Canvas position of a dial angle at the given radius."""
    render = math.radians((dial_angle + 90) % 360)
    return (
        int(round(CENTER_X + radius * math.cos(render))),
        int(round(CENTER_Y + radius * math.sin(render))),
    )


def _pixel(canvas, x, y):
    return tuple(canvas.to_buffer()[y, x][:3])


@pytest.fixture
def renderer():
    return DialRenderer()


@pytest.fixture
def june_canvas(renderer, june_record):
    apply_twilight(june_record)
    return renderer.render(june_record, "Onset, MA", "Jun 21, 2021, 1:30 PM")


@pytest.fixture
def december_canvas(renderer, december_record):
    apply_twilight(december_record)
    return renderer.render(december_record, "Onset, MA", "Dec 21, 2021, 10:15 PM")


class TestComputeAngles:
    """Tests for compute_angles."""

    def test_june(self, june_record):
        """Test record times become dial angles."""
        angles = compute_angles(june_record)

        assert angles.sunrise == pytest.approx(77.5)
        assert angles.sunset == pytest.approx(306.25)
        assert angles.am_twilight == pytest.approx(53.5)
        assert angles.pm_twilight == pytest.approx(330.25)
        assert angles.current == pytest.approx(202.5)
        assert angles.sun_up is True

    def test_night(self, december_record):
        """Test the sun is down after sunset."""
        assert compute_angles(december_record).sun_up is False

    def test_early_sunrise_twilight_negative(self):
        """Test first light before midnight is allowed to go negative."""
        record = SunRecord(sunrise="01:00", sunset="23:00")
        assert compute_angles(record).am_twilight == pytest.approx(-9)

    def test_bad_time_is_zero(self):
        """Test a malformed time becomes angle 0."""
        record = SunRecord(sunrise="bad", sunset="18:00", current_time="??")
        angles = compute_angles(record)
        assert angles.sunrise == 0
        assert angles.current == 0


class TestDialRenderer:
    """Tests for DialRenderer.render."""

    def test_geometry(self, renderer):
        """Test the dial center leaves room for the title."""
        assert renderer.center_x == CENTER_X
        assert renderer.center_y == CENTER_Y

    def test_dimensions(self, june_canvas):
        """Test the image is 1920x1080 RGBA."""
        assert june_canvas.image.size == (1920, 1080)
        assert june_canvas.image.mode == "RGBA"
        assert len(june_canvas.to_buffer().tobytes()) == 1920 * 1080 * 4

    def test_background(self, june_canvas):
        """Test the corners keep the background color."""
        assert _pixel(june_canvas, 0, 0) == BACKGROUND
        assert _pixel(june_canvas, 1919, 0) == BACKGROUND
        assert _pixel(june_canvas, 5, 1075) == BACKGROUND

    def test_major_tick_outside_arc(self, june_canvas):
        """Test the 6 PM major tick is drawn beyond the arc."""
        assert _pixel(june_canvas, CENTER_X + 420, CENTER_Y) != BACKGROUND

    def test_midnight_major_tick(self, june_canvas):
        """Test the midnight major tick below the dial."""
        assert _pixel(june_canvas, CENTER_X, CENTER_Y + 420) != BACKGROUND

    def test_day_arc_at_noon(self, june_canvas):
        """Test the day arc covers noon."""
        assert _pixel(june_canvas, *_dial_point(180)) == SUN_ARC_COLOR

    def test_am_twilight_arc(self, june_canvas):
        """Test the twilight arc between first light and sunrise."""
        assert _pixel(june_canvas, *_dial_point(65.5)) == TWILIGHT_COLOR

    def test_pm_twilight_arc(self, june_canvas):
        """Test the twilight arc between sunset and last light."""
        assert _pixel(june_canvas, *_dial_point(318)) == TWILIGHT_COLOR

    def test_night_uses_dial_color(self, june_canvas):
        """Test the dial at midnight is not covered by an arc."""
        assert _pixel(june_canvas, *_dial_point(0)) == SUN_CIRCLE_COLOR

    def test_sun_up_marker(self, june_canvas):
        """Test the sun marker at 13:30 uses the daytime color."""
        assert _pixel(june_canvas, *_dial_point(202.5)) == SUN_UP_COLOR

    def test_sun_down_marker(self, december_canvas):
        """Test the sun marker at 22:15 uses the night color."""
        assert _pixel(december_canvas, *_dial_point(333.75)) == SUN_DOWN_COLOR

    def test_sun_marker_clears_arc(self, june_canvas):
        """Test the ring around the sun erases the day arc under it."""
        theta = math.radians((202.5 + 90) % 360)
        sun_x = CENTER_X + RADIUS * math.cos(theta)
        sun_y = CENTER_Y + RADIUS * math.sin(theta)
        # 73 px along the dial from the sun center, still on the arc band
        x = int(round(sun_x - 73 * math.sin(theta)))
        y = int(round(sun_y + 73 * math.cos(theta)))
        assert _pixel(june_canvas, x, y) == BACKGROUND

    def test_december_day_arc(self, december_canvas):
        """Test winter day arc still covers noon."""
        assert _pixel(december_canvas, *_dial_point(180)) == SUN_ARC_COLOR

    def test_malformed_times_still_render(self, renderer):
        """Test garbage input draws a dial instead of failing."""
        record = SunRecord(sunrise="xx", sunset="yy", current_time="")
        apply_twilight(record)
        canvas = renderer.render(record, "Nowhere", "")
        assert canvas.image.size == (1920, 1080)
