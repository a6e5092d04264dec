"""Raster canvas and drawing helpers for the sun dial.

Drawing positions relative to the dial are expressed with an explicit
Transform value rather than a mutable translate/rotate context. Angles
follow the Pillow convention: radians from the positive X axis,
increasing clockwise because Y points down.
"""

import math
from dataclasses import dataclass

import numpy as np
from PIL import Image, ImageDraw

from .colors import rgba
from .font_manager import Font

Color = tuple[int, int, int]


@dataclass(frozen=True)
class Transform:
    """
    2D affine transform.

    Maps (x, y) to (a*x + c*y + e, b*x + d*y + f). translate() and
    rotate() return a new transform applied before this one, so
    Transform().translate(cx, cy).rotate(t) places (r, 0) at radius r
    and angle t around (cx, cy).
    """

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    def translate(self, tx: float, ty: float) -> "Transform":
        return Transform(
            self.a,
            self.b,
            self.c,
            self.d,
            self.a * tx + self.c * ty + self.e,
            self.b * tx + self.d * ty + self.f,
        )

    def rotate(self, angle: float) -> "Transform":
        cos = math.cos(angle)
        sin = math.sin(angle)
        return Transform(
            self.a * cos + self.c * sin,
            self.b * cos + self.d * sin,
            self.c * cos - self.a * sin,
            self.d * cos - self.b * sin,
            self.e,
            self.f,
        )

    def apply(self, x: float, y: float) -> tuple[float, float]:
        return (
            self.a * x + self.c * y + self.e,
            self.b * x + self.d * y + self.f,
        )


class Canvas:
    """RGBA image plus its ImageDraw handle, owned by a single render."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.image = Image.new("RGBA", (width, height))
        self.draw = ImageDraw.Draw(self.image)

    def fill_rect(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        """
        Fill a rectangle by writing the pixel buffer directly.

        Much faster than a drawing primitive for a full 1920x1080 fill.
        """
        pixels = np.array(self.image, dtype=np.uint8)
        pixels[max(y, 0) : y + h, max(x, 0) : x + w] = rgba(color)
        self.image.frombytes(pixels.tobytes())

    def to_buffer(self) -> np.ndarray:
        """Return the pixels as a (height, width, 4) uint8 array."""
        return np.asarray(self.image, dtype=np.uint8)


def text_width(canvas: Canvas, text: str, font: Font) -> float:
    return canvas.draw.textlength(text, font=font)


def fill_text(
    canvas: Canvas, text: str, x: float, y: float, font: Font, fill: Color
) -> None:
    """Draw text with its left end of the baseline at (x, y)."""
    canvas.draw.text((x, y), text, font=font, fill=fill, anchor="ls")


def center_text(
    canvas: Canvas, text: str, x: float, y: float, font: Font, fill: Color
) -> None:
    """Draw text horizontally centered on x with its baseline at y."""
    canvas.draw.text((x, y), text, font=font, fill=fill, anchor="ms")


def stroke_arc(
    canvas: Canvas,
    cx: float,
    cy: float,
    radius: float,
    start: float,
    end: float,
    width: int,
    fill: Color,
) -> None:
    """
    Stroke an arc centered on the circle of the given radius.

    start and end are radians, drawn clockwise from start to end. An end
    smaller than start wraps through 0, the same as a 2D canvas arc.
    """
    outer = radius + width / 2
    canvas.draw.arc(
        [(cx - outer, cy - outer), (cx + outer, cy + outer)],
        math.degrees(start),
        math.degrees(end),
        fill=fill,
        width=width,
    )


def fill_circle(
    canvas: Canvas,
    transform: Transform,
    x: float,
    y: float,
    radius: float,
    fill: Color,
) -> None:
    """Fill a disc whose center is (x, y) in transform space."""
    px, py = transform.apply(x, y)
    canvas.draw.ellipse(
        [(px - radius, py - radius), (px + radius, py + radius)], fill=fill
    )


def radial_line(
    canvas: Canvas,
    transform: Transform,
    inner: float,
    outer: float,
    width: int,
    fill: Color,
    round_cap: bool = False,
) -> None:
    """Draw a segment along the transform's X axis from inner to outer."""
    start = transform.apply(inner, 0)
    end = transform.apply(outer, 0)
    canvas.draw.line([start, end], fill=fill, width=width)
    if round_cap and width > 2:
        for x in (inner, outer):
            fill_circle(canvas, transform, x, 0, width / 2, fill)
