"""Shared types, geometry, formatting, and SVG utilities."""

from .types import Point, FrameSpec, SideLayout, ArcLayout, FrameLayout
from .geometry import (
    GeometryError, INCH_TO_MM,
    round_half_up, arc_poly, segment_radius, segment_half_angle,
    decimal_to_fraction, fmt_spacing,
)
from .svg import make_svg_transform, app_version, W, H
