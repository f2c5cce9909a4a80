"""Whole-frame aggregation: per-side solves, corner sharing, fixture positions."""
import numpy as np

from shared.types import FrameSpec, FrameLayout
from shared.geometry import GeometryError
from frame.constants import CORNER_SIZE, CORNER_HOLE_INSET
from frame.solver import solve_side, solve_arc, arc_center, arc_fixture_points


def validate_frame_spec(spec: FrameSpec) -> None:
    """Reject inputs the solvers are not defined for.

    The solvers themselves assume valid input; this is the check a caller
    runs before invoking them.
    """
    for name in ("width", "height", "ideal_spacing", "hole_diameter_mm"):
        val = getattr(spec, name)
        if not val > 0:
            raise GeometryError(f"{name} must be positive: {val}")
    for name in ("width", "height"):
        val = getattr(spec, name)
        if val <= CORNER_SIZE:
            raise GeometryError(f"{name} must exceed the corner size {CORNER_SIZE}: {val}")
    if spec.arched:
        if spec.arch_rise is None or not spec.arch_rise > 0:
            raise GeometryError(f"Arched frame needs a positive arch_rise: {spec.arch_rise}")


def compute_frame_layout(spec: FrameSpec) -> FrameLayout:
    """Solve every side and count fixtures with each corner counted once."""
    horizontal = solve_side(spec.width, spec.ideal_spacing)
    vertical = solve_side(spec.height, spec.ideal_spacing)
    if spec.arched:
        arc = solve_arc(spec.width, spec.arch_rise, spec.ideal_spacing)
        total = arc.fixture_count + horizontal.fixture_count + 2*vertical.fixture_count - 4
    else:
        arc = None
        total = 2*horizontal.fixture_count + 2*vertical.fixture_count - 4
    return FrameLayout(horizontal=horizontal, vertical=vertical, arc=arc, total=total)


def corner_holes(spec: FrameSpec) -> dict[str, tuple[float, float]]:
    """Corner-hole centres in frame inches (origin outer bottom-left, y up)."""
    lo = CORNER_HOLE_INSET
    xr = spec.width - CORNER_HOLE_INSET
    yt = spec.height - CORNER_HOLE_INSET
    return {"BL": (lo, lo), "BR": (xr, lo), "TR": (xr, yt), "TL": (lo, yt)}


def fixture_positions(spec: FrameSpec, layout: FrameLayout) -> np.ndarray:
    """All fixture centres as an (N, 2) array, N == layout.total.

    Order runs clockwise from the top-left corner: top side or arc left to
    right, right side down, bottom right to left, left side up. Each corner
    appears once.
    """
    c = corner_holes(spec)
    h = layout.horizontal
    v = layout.vertical
    xs = c["TL"][0] + np.arange(h.fixture_count) * h.actual_spacing
    ys = c["BL"][1] + np.arange(v.fixture_count) * v.actual_spacing

    if layout.arc is not None:
        top = np.array(arc_fixture_points(arc_center(c["TL"], c["TR"], layout.arc), layout.arc))
    else:
        top = np.column_stack([xs, np.full(h.fixture_count, c["TL"][1])])

    # right side: top corner already placed
    right = np.column_stack([np.full(v.fixture_count - 1, c["TR"][0]), ys[::-1][1:]])
    # bottom: right corner already placed
    bottom = np.column_stack([xs[::-1][1:], np.full(h.fixture_count - 1, c["BL"][1])])
    # left side: both corners already placed
    left = np.column_stack([np.full(v.fixture_count - 2, c["BL"][0]), ys[1:-1]])
    return np.vstack([top, right, bottom, left])
