"""SVG transform factory, page constants and version stamp."""
from importlib.metadata import version, PackageNotFoundError
from typing import Callable

# US Letter landscape at 72 dpi (11" x 8.5")
W, H = 792, 612


def app_version() -> str:
    """Installed package version, or a dev marker when running from a checkout."""
    try:
        return version("framelights")
    except PackageNotFoundError:
        return "0.0.0-dev"


def make_svg_transform(width: float, height: float, margin: float = 72,
                       page_w: float = W, page_h: float = H
                       ) -> tuple[Callable[[float, float], tuple[float, float]], float]:
    """Fit a width x height frame region (inches, y up) centred on the page.

    Returns (to_svg, scale) where scale is SVG points per frame inch.
    """
    s = min((page_w - 2*margin)/width, (page_h - 2*margin)/height)
    px = (page_w - width*s)/2
    py = (page_h + height*s)/2
    def to_svg(x: float, y: float) -> tuple[float, float]:
        return (px + x*s, py - y*s)
    return to_svg, s
