"""Spacing solver for one straight side or one circular arc.

Every side is spanned between the hole centres of its two corner pieces, so
the usable span is the nominal dimension less one corner size. The segment
count is rounded to the nearest integer so the actual spacing stays as close
to the ideal as possible while dividing the span exactly.
"""
import math

from shared.types import Point, SideLayout, ArcLayout
from shared.geometry import (
    GeometryError, round_half_up, arc_poly, segment_radius, segment_half_angle,
)
from frame.constants import CORNER_SIZE


def _segments_for(span: float, ideal_spacing: float) -> int:
    """Nearest whole number of gaps, never fewer than one (both corners lit)."""
    return max(1, round_half_up(span / ideal_spacing))


def solve_side(length: float, ideal_spacing: float) -> SideLayout:
    """Fixture count and exact spacing for a straight side of *length*.

    Callers validate inputs first; a non-positive spacing is a precondition
    violation, not a handled case.
    """
    available = length - CORNER_SIZE
    segments = _segments_for(available, ideal_spacing)
    return SideLayout(fixture_count=segments + 1, actual_spacing=available / segments)


def solve_arc(chord_width: float, rise: float, ideal_spacing: float) -> ArcLayout:
    """Fixture count, spacing and cut geometry for an arched top.

    The arc runs between the two top corner-hole centres (chord =
    chord_width - CORNER_SIZE) and bulges *rise* above them. Spacing is
    measured along the curve.

    Raises GeometryError for rise <= 0 or rise > chord/2 (more than a
    semicircle has no single-valued corner cut).
    """
    chord = chord_width - CORNER_SIZE
    if rise > chord / 2 + 1e-12:
        raise GeometryError(f"Arc rise exceeds half the chord: rise={rise}, chord={chord:.6f}")
    radius = segment_radius(chord, rise)
    half = segment_half_angle(chord, radius)
    arc_length = radius * 2 * half
    segments = _segments_for(arc_length, ideal_spacing)
    return ArcLayout(
        fixture_count=segments + 1,
        actual_spacing=arc_length / segments,
        radius=radius,
        arc_length=arc_length,
        corner_angle_deg=90.0 - math.degrees(half),
        half_angle=half,
        chord=chord,
        rise=rise,
    )


def arc_center(left: Point, right: Point, arc: ArcLayout) -> Point:
    """Centre of the arc through two level corner points, bulging upward."""
    cx = (left[0] + right[0]) / 2
    cy = left[1] + arc.rise - arc.radius
    return (cx, cy)


def arc_fixture_points(center: Point, arc: ArcLayout) -> list[Point]:
    """Fixture positions along the arc, left corner to right corner.

    Equal angle steps on a fixed radius are equal arc-length steps, so the
    angle is interpolated rather than x.
    """
    sa = math.pi / 2 + arc.half_angle
    ea = math.pi / 2 - arc.half_angle
    return arc_poly(center[0], center[1], arc.radius, sa, ea, arc.fixture_count - 1)
