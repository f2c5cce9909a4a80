"""Pure geometry functions and measurement formatting."""
import math
from .types import Point

INCH_TO_MM = 25.4

# ============================================================
# Error Type
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry operations."""

# ============================================================
# Geometry Utilities
# ============================================================
def round_half_up(x: float) -> int:
    """Nearest integer, ties toward +infinity (not banker's rounding)."""
    return math.floor(x + 0.5)

def arc_poly(cx: float, cy: float, r: float, sa: float, ea: float, n: int = 60) -> list[Point]:
    """Generate n+1 points along a circular arc from angle sa to ea (radians)."""
    return [(cx+r*math.cos(sa+(ea-sa)*i/n), cy+r*math.sin(sa+(ea-sa)*i/n))
            for i in range(n+1)]

def segment_radius(chord: float, rise: float) -> float:
    """Radius of the circle through a chord's endpoints with the given sagitta.

    Raises GeometryError for a non-positive rise.
    """
    if rise <= 0:
        raise GeometryError(f"Arc rise must be positive: rise={rise}")
    return (chord**2/4 + rise**2)/(2*rise)

def segment_half_angle(chord: float, radius: float) -> float:
    """Half the central angle (radians) subtended by a chord."""
    s = (chord/2)/radius
    if s > 1 + 1e-12:
        raise GeometryError(f"Chord longer than diameter: chord={chord:.6f}, r={radius:.6f}")
    return math.asin(min(1.0, s))

# ============================================================
# Formatting Helpers
# ============================================================
def decimal_to_fraction(decimal: float, denominator: int = 8) -> str:
    """Format inches as a whole number plus reduced fraction, e.g. '3 7/8'.

    The fractional part is rounded to the nearest 1/denominator; a fraction
    that rounds up to a whole carries into the whole number.
    """
    whole = math.floor(decimal)
    num = round_half_up((decimal - whole) * denominator)
    if num == 0:
        return f"{whole}"
    if num == denominator:
        return f"{whole + 1}"
    g = math.gcd(num, denominator)
    frac = f"{num // g}/{denominator // g}"
    return frac if whole == 0 else f"{whole} {frac}"

def fmt_spacing(inches: float) -> str:
    """Spacing in both units, e.g. '3 7/8\" / 99.48mm'."""
    return f"{decimal_to_fraction(inches)}\" / {inches * INCH_TO_MM:.2f}mm"
