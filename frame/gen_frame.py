"""Generate an SVG preview of a lit frame.

Draws the frame outline (with the arched top when present), the four corner
pieces, every fixture coloured from the C9 palette, and spacing dimension
lines on the bottom and left sides.
"""
import os, math, datetime

from shared.types import FrameSpec, FrameLayout
from shared.geometry import INCH_TO_MM, arc_poly, decimal_to_fraction, fmt_spacing
from shared.svg import make_svg_transform, app_version, W, H
from frame.constants import CORNER_SIZE, CORNER_HOLE_INSET, FRAME_MARGIN, GLOW_FACTOR, C9_COLORS
from frame.layout import compute_frame_layout, corner_holes, fixture_positions
from frame.solver import arc_center

# ============================================================
# SVG Helpers
# ============================================================

def dim_line_h(out, x1, y, x2, label, sublabel, to_svg):
    """Horizontal dimension line with vertical tick marks and a two-line label."""
    sx1, sy = to_svg(x1, y); sx2, _ = to_svg(x2, y)
    _t = 6
    out.append(f'<line x1="{sx1:.1f}" y1="{sy:.1f}" x2="{sx2:.1f}" y2="{sy:.1f}" stroke="#52c7ff" stroke-width="1" stroke-dasharray="5,5"/>')
    out.append(f'<line x1="{sx1:.1f}" y1="{sy-_t:.1f}" x2="{sx1:.1f}" y2="{sy+_t:.1f}" stroke="#52c7ff" stroke-width="1"/>')
    out.append(f'<line x1="{sx2:.1f}" y1="{sy-_t:.1f}" x2="{sx2:.1f}" y2="{sy+_t:.1f}" stroke="#52c7ff" stroke-width="1"/>')
    cx = (sx1 + sx2) / 2
    out.append(f'<text x="{cx:.1f}" y="{sy-8:.1f}" text-anchor="middle" font-family="Arial" font-size="12" font-weight="bold" fill="#52c7ff">{label}</text>')
    out.append(f'<text x="{cx:.1f}" y="{sy+16:.1f}" text-anchor="middle" font-family="Arial" font-size="11" fill="#52c7ff">{sublabel}</text>')

def dim_line_v(out, x, y1, y2, label, sublabel, to_svg):
    """Vertical dimension line with horizontal tick marks and rotated labels."""
    sx, sy1 = to_svg(x, y1); _, sy2 = to_svg(x, y2)
    _t = 6
    out.append(f'<line x1="{sx:.1f}" y1="{sy1:.1f}" x2="{sx:.1f}" y2="{sy2:.1f}" stroke="#52c7ff" stroke-width="1" stroke-dasharray="5,5"/>')
    out.append(f'<line x1="{sx-_t:.1f}" y1="{sy1:.1f}" x2="{sx+_t:.1f}" y2="{sy1:.1f}" stroke="#52c7ff" stroke-width="1"/>')
    out.append(f'<line x1="{sx-_t:.1f}" y1="{sy2:.1f}" x2="{sx+_t:.1f}" y2="{sy2:.1f}" stroke="#52c7ff" stroke-width="1"/>')
    cy = (sy1 + sy2) / 2
    for dx, text, weight, size in ((-8, label, ' font-weight="bold"', 12), (14, sublabel, "", 11)):
        lx = sx + dx
        out.append(f'<text x="{lx:.1f}" y="{cy:.1f}" text-anchor="middle" font-family="Arial" font-size="{size}"{weight}'
                   f' fill="#52c7ff" transform="rotate(-90,{lx:.1f},{cy:.1f})">{text}</text>')

def fixture_circle(out, sx, sy, r, color):
    """Bulb with a radial glow; color is a (base, glow, name) palette entry."""
    base, glow, name = color
    out.append(f'<circle cx="{sx:.1f}" cy="{sy:.1f}" r="{r*GLOW_FACTOR:.2f}" fill="url(#glow-{name})"/>')
    out.append(f'<circle cx="{sx:.1f}" cy="{sy:.1f}" r="{r:.2f}" fill="{base}" stroke="#ffffff" stroke-width="1"/>')

def frame_outline(spec: FrameSpec, layout: FrameLayout, n_arc: int = 60):
    """Outer frame boundary as a closed polyline in frame inches.

    With an arched top the outer edge follows the fixture arc offset outward
    by the corner-hole inset.
    """
    if layout.arc is None:
        return [(0, 0), (spec.width, 0), (spec.width, spec.height), (0, spec.height)]
    c = corner_holes(spec)
    cx, cy = arc_center(c["TL"], c["TR"], layout.arc)
    r = layout.arc.radius + CORNER_HOLE_INSET
    half = math.asin(min(1.0, (spec.width / 2) / r))
    top = arc_poly(cx, cy, r, math.pi/2 - half, math.pi/2 + half, n_arc)
    y_join = cy + r * math.cos(half)
    return [(0, 0), (spec.width, 0), (spec.width, y_join)] + top[1:-1] + [(0, y_join)]

# ============================================================
# Preview session
# ============================================================

class PreviewSession:
    """Preview state for one frame: its layout, fixture positions and colours.

    Recreate the session when the spec changes; nothing is shared between
    sessions.
    """

    def __init__(self, spec: FrameSpec):
        self.spec = spec
        self.layout = compute_frame_layout(spec)
        self.positions = fixture_positions(spec, self.layout)
        self.colors = [C9_COLORS[i % len(C9_COLORS)] for i in range(len(self.positions))]
        self.outline = frame_outline(spec, self.layout)
        _top = max(p[1] for p in self.outline)
        self.extent = (spec.width + 2*FRAME_MARGIN, _top + 2*FRAME_MARGIN)

    def render_svg(self) -> str:
        spec, layout = self.spec, self.layout
        _to_svg, s = make_svg_transform(*self.extent)
        def to_svg(x, y):
            return _to_svg(x + FRAME_MARGIN, y + FRAME_MARGIN)
        hole_r = spec.hole_diameter_mm / INCH_TO_MM * s / 2

        out = [f'<svg xmlns="http://www.w3.org/2000/svg" width="{W}" height="{H}" viewBox="0 0 {W} {H}">']
        out.append('<defs>')
        for base, glow, name in C9_COLORS:
            out.append(f'<radialGradient id="glow-{name}"><stop offset="0" stop-color="{glow}" stop-opacity="1"/>'
                       f'<stop offset="0.4" stop-color="{glow}" stop-opacity="0.53"/>'
                       f'<stop offset="1" stop-color="{glow}" stop-opacity="0"/></radialGradient>')
        out.append('</defs>')
        out.append(f'<rect x="0" y="0" width="{W}" height="{H}" fill="#1a1a2e"/>')

        # --- Frame outline ---
        svg_p = " ".join(f"{to_svg(x, y)[0]:.1f},{to_svg(x, y)[1]:.1f}" for x, y in self.outline)
        out.append(f'<polygon points="{svg_p}" fill="none" stroke="#34495e" stroke-width="2"/>')

        # --- Corner pieces ---
        cs = CORNER_SIZE * s
        for x, y in corner_holes(spec).values():
            sx, sy = to_svg(x - CORNER_HOLE_INSET, y + CORNER_HOLE_INSET)
            out.append(f'<rect x="{sx:.1f}" y="{sy:.1f}" width="{cs:.1f}" height="{cs:.1f}"'
                       f' fill="#2c3e50" stroke="#34495e" stroke-width="1"/>')

        # --- Fixtures ---
        for (x, y), color in zip(self.positions, self.colors):
            sx, sy = to_svg(x, y)
            fixture_circle(out, sx, sy, hole_r, color)

        # --- Spacing dimensions (bottom and left sides) ---
        c = corner_holes(spec)
        if layout.horizontal.fixture_count > 1:
            hs = layout.horizontal.actual_spacing
            y_dim = c["BL"][1] + CORNER_HOLE_INSET + hole_r / s + 1.0
            dim_line_h(out, c["BL"][0], y_dim, c["BL"][0] + hs,
                       f"{decimal_to_fraction(hs)}&#8243;", f"{hs * INCH_TO_MM:.2f}mm", to_svg)
        if layout.vertical.fixture_count > 1:
            vs = layout.vertical.actual_spacing
            x_dim = c["BL"][0] + CORNER_HOLE_INSET + hole_r / s + 1.0
            dim_line_v(out, x_dim, c["BL"][1], c["BL"][1] + vs,
                       f"{decimal_to_fraction(vs)}&#8243;", f"{vs * INCH_TO_MM:.2f}mm", to_svg)

        # --- Title block ---
        lines = [f"Total fixtures: {layout.total}",
                 f"Top/bottom: {layout.horizontal.fixture_count} @ {fmt_spacing(layout.horizontal.actual_spacing)}",
                 f"Sides: {layout.vertical.fixture_count} @ {fmt_spacing(layout.vertical.actual_spacing)}"]
        if layout.arc is not None:
            lines.append(f"Arc: {layout.arc.fixture_count} @ {fmt_spacing(layout.arc.actual_spacing)},"
                         f" corner cut {layout.arc.corner_angle_deg:.1f}&#176;")
        lines.append(f"Scale 1:{1 / s * 72:.2f}")
        lines.append(f"Generated {datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')} by {app_version()}")
        for i, text in enumerate(lines):
            out.append(f'<text x="12" y="{20 + i*13}" font-family="Arial" font-size="10" fill="#cccccc">'
                       f'{text.replace(chr(34), "&quot;")}</text>')

        out.append('</svg>')
        return "\n".join(out)


def write_frame_svg(spec: FrameSpec, directory: str, filename: str = "frame.svg") -> str:
    """Render the preview for *spec* into *directory*; returns the path."""
    path = os.path.join(directory, filename)
    with open(path, "w") as f:
        f.write(PreviewSession(spec).render_svg())
    return path
