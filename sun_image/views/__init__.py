"""Rendering for the Sun Image dial."""

from .canvas import Canvas, Transform, center_text
from .dial import DialAngles, DialRenderer, compute_angles
from .labels import LABEL_SLOTS, LabelPlacement, LabelSlot, place_labels

__all__ = [
    "Canvas",
    "Transform",
    "center_text",
    "DialAngles",
    "DialRenderer",
    "compute_angles",
    "LABEL_SLOTS",
    "LabelPlacement",
    "LabelSlot",
    "place_labels",
]
