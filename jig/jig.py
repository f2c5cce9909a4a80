"""Drilling jig geometry from one fixture spacing.

The jig butts against a corner piece: its first hole sits one full spacing
from the corner piece's own hole, so the first offset from the jig edge is
the spacing less the corner half-size. As many further holes as fit within
the nominal maximum length are added, but never fewer than two.
"""
import math
from typing import NamedTuple

from shared.types import FrameLayout
from shared.geometry import GeometryError, INCH_TO_MM
from jig.constants import (
    PIPE_RADIUS, SLOT_WIDTH, JIG_WIDTH, JIG_HEIGHT, HOLE_DIAMETER, MARKER_SIZE,
    CORNER_HALF_SIZE, END_MARGIN, MAX_JIG_LENGTH,
)


class JigLayout(NamedTuple):
    """Flat jig description. Linear fields in mm except spacing_in."""
    label: str
    spacing_in: float
    spacing_mm: float
    first_hole_offset: float
    hole_offsets: tuple[float, ...]
    length: float
    width: float
    height: float
    pipe_radius: float
    slot_width: float
    hole_diameter: float
    marker_size: tuple[float, float, float]


def hole_count(first_offset: float, spacing_mm: float) -> int:
    """Most holes that keep the jig within MAX_JIG_LENGTH, at least two."""
    n = math.floor((MAX_JIG_LENGTH - first_offset - END_MARGIN) / spacing_mm) + 1
    return max(2, n)


def jig_spacings(layout: FrameLayout) -> list[tuple[str, float]]:
    """(label, spacing) for each distinct spacing in a frame layout.

    Sides that share a spacing share one jig; their labels are joined.
    """
    sides = [("Top-Bottom", layout.horizontal.actual_spacing),
             ("Sides", layout.vertical.actual_spacing)]
    if layout.arc is not None:
        sides[0] = ("Bottom", layout.horizontal.actual_spacing)
        sides.append(("Arc", layout.arc.actual_spacing))
    merged: list[tuple[str, float]] = []
    for label, spacing in sides:
        for i, (l, s) in enumerate(merged):
            if abs(s - spacing) < 1e-9:
                merged[i] = (f"{l} & {label}", s)
                break
        else:
            merged.append((label, spacing))
    return merged


def build_jig(spacing: float, label: str) -> JigLayout:
    """Jig layout for an actual fixture *spacing* in inches.

    Raises GeometryError if the spacing is too small for the first hole to
    land on the jig.
    """
    spacing_mm = spacing * INCH_TO_MM
    first = spacing_mm - CORNER_HALF_SIZE
    if first <= 0:
        raise GeometryError(
            f"Spacing {spacing_mm:.2f}mm does not clear the corner half-size {CORNER_HALF_SIZE}mm")
    n = hole_count(first, spacing_mm)
    offsets = tuple(first + i * spacing_mm for i in range(n))
    return JigLayout(
        label=label,
        spacing_in=spacing,
        spacing_mm=spacing_mm,
        first_hole_offset=first,
        hole_offsets=offsets,
        length=offsets[-1] + END_MARGIN,
        width=JIG_WIDTH,
        height=JIG_HEIGHT,
        pipe_radius=PIPE_RADIUS,
        slot_width=SLOT_WIDTH,
        hole_diameter=HOLE_DIAMETER,
        marker_size=MARKER_SIZE,
    )
