"""Shared type definitions for the frame light layout project."""
from typing import NamedTuple, Optional

Point = tuple[float, float]

class FrameSpec(NamedTuple):
    """Outer frame dimensions and target spacing. Linear values in inches."""
    width: float
    height: float
    ideal_spacing: float
    arched: bool = False
    arch_rise: Optional[float] = None
    hole_diameter_mm: float = 12.0

class SideLayout(NamedTuple):
    fixture_count: int; actual_spacing: float

class ArcLayout(NamedTuple):
    fixture_count: int; actual_spacing: float
    radius: float; arc_length: float; corner_angle_deg: float
    half_angle: float   # radians, half the central angle
    chord: float; rise: float

class FrameLayout(NamedTuple):
    horizontal: SideLayout
    vertical: SideLayout
    arc: Optional[ArcLayout]
    total: int
