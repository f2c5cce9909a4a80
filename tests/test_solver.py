"""Tests for frame/solver.py — side and arc spacing."""
import math
import pytest
from shared.geometry import GeometryError
from shared.types import SideLayout, ArcLayout
from frame.constants import CORNER_SIZE
from frame.solver import solve_side, solve_arc, arc_center, arc_fixture_points


class TestSolveSide:
    def test_square_example(self):
        side = solve_side(48, 4)
        assert isinstance(side, SideLayout)
        assert side.fixture_count == 13
        assert abs(side.actual_spacing - 47 / 12) < 1e-12

    @pytest.mark.parametrize("length,ideal", [
        (48, 4), (36, 3.5), (80, 2.75), (1.5, 10), (100, 0.3), (7, 7),
    ])
    def test_exact_fit(self, length, ideal):
        side = solve_side(length, ideal)
        assert side.fixture_count >= 2
        span = length - CORNER_SIZE
        assert side.actual_spacing * (side.fixture_count - 1) == pytest.approx(span, rel=1e-9)

    def test_short_side_keeps_both_corners(self):
        # span 0.5 at 10" ideal rounds to 0 segments; clamped to 1
        side = solve_side(1.5, 10)
        assert side.fixture_count == 2
        assert abs(side.actual_spacing - 0.5) < 1e-12

    def test_tie_rounds_up(self):
        # span 5 / 2 = 2.5 segments -> 3
        side = solve_side(6, 2)
        assert side.fixture_count == 4

    def test_rounds_to_nearest_not_floor(self):
        # span 47 / 4.1 = 11.46 -> 11; 47 / 3.9 = 12.05 -> 12
        assert solve_side(48, 4.1).fixture_count == 12
        assert solve_side(48, 3.9).fixture_count == 13

    def test_idempotent(self):
        assert solve_side(61.25, 3.3) == solve_side(61.25, 3.3)


class TestSolveArc:
    def test_returns_arc_layout(self):
        assert isinstance(solve_arc(48, 10, 4), ArcLayout)

    def test_radius(self):
        arc = solve_arc(48, 10, 4)
        assert abs(arc.chord - 47) < 1e-12
        assert abs(arc.radius - 32.6125) < 1e-12

    def test_angles(self):
        arc = solve_arc(48, 10, 4)
        half = math.asin(23.5 / 32.6125)
        assert abs(arc.half_angle - half) < 1e-12
        assert abs(arc.corner_angle_deg - (90 - math.degrees(half))) < 1e-12
        assert abs(arc.corner_angle_deg - 43.898) < 0.01

    def test_arc_length_and_spacing(self):
        arc = solve_arc(48, 10, 4)
        assert abs(arc.arc_length - arc.radius * 2 * arc.half_angle) < 1e-12
        # 52.48 / 4 = 13.1 -> 13 segments
        assert arc.fixture_count == 14
        assert arc.actual_spacing * 13 == pytest.approx(arc.arc_length, rel=1e-9)

    @pytest.mark.parametrize("rise", [0.25, 2, 10, 20, 23.4])
    def test_invariants(self, rise):
        arc = solve_arc(48, rise, 4)
        assert arc.radius > rise
        assert 0 < arc.corner_angle_deg < 90
        assert arc.arc_length > arc.chord

    def test_semicircle(self):
        arc = solve_arc(48, 23.5, 4)
        assert abs(arc.radius - 23.5) < 1e-12
        assert abs(arc.corner_angle_deg) < 1e-9

    def test_zero_rise_raises(self):
        with pytest.raises(GeometryError, match="rise must be positive"):
            solve_arc(48, 0, 4)

    def test_rise_beyond_half_chord_raises(self):
        with pytest.raises(GeometryError, match="exceeds half the chord"):
            solve_arc(48, 30, 4)


class TestArcPoints:
    def test_endpoints_on_corners(self):
        arc = solve_arc(48, 10, 4)
        left, right = (0.5, 35.5), (47.5, 35.5)
        pts = arc_fixture_points(arc_center(left, right, arc), arc)
        assert len(pts) == arc.fixture_count
        assert pts[0] == pytest.approx(left)
        assert pts[-1] == pytest.approx(right)

    def test_apex_height(self):
        arc = solve_arc(48, 10, 4)
        cx, cy = arc_center((0.5, 35.5), (47.5, 35.5), arc)
        assert abs(cx - 24.0) < 1e-12
        assert abs(cy + arc.radius - (35.5 + 10)) < 1e-12

    def test_equal_chords(self):
        # equal arc-length steps give equal chord lengths
        arc = solve_arc(48, 10, 4)
        pts = arc_fixture_points(arc_center((0.5, 35.5), (47.5, 35.5), arc), arc)
        chords = [math.dist(pts[i], pts[i + 1]) for i in range(len(pts) - 1)]
        assert max(chords) - min(chords) < 1e-9
        step = 2 * arc.radius * math.sin(arc.actual_spacing / (2 * arc.radius))
        assert chords[0] == pytest.approx(step)
