"""Emit OpenSCAD source for a drilling jig.

The jig is a block with a semicircular pipe channel, an open slot below the
channel so it slides onto the pipe from the side, and one marker cut per
fixture hole. A text label on the side records the spacing.
"""
import os, re, logging

from shared.svg import app_version
from jig.constants import SCAD_FN, LABEL_SIZE, LABEL_DEPTH
from jig.jig import JigLayout

logger = logging.getLogger(__name__)


def render_jig_scad(jig: JigLayout) -> str:
    """OpenSCAD document for *jig*."""
    mx, my, mz = jig.marker_size
    out = [
        f"// LED Drilling Jig - {jig.label}",
        f"// Generated for {jig.spacing_in:.4f}\" ({jig.spacing_mm:.2f}mm) spacing",
        f"// {len(jig.hole_offsets)} holes total",
        "// OPEN-ENDED DESIGN - slides onto pipe from side",
        f"// framelights {app_version()}",
        "",
        f"$fn = {SCAD_FN}; // Smoothness of circles",
        "",
        "// Parameters",
        f"jig_length = {jig.length:.2f};",
        f"jig_width = {jig.width:g};",
        f"jig_height = {jig.height:g};",
        f"pipe_radius = {jig.pipe_radius:.2f};",
        f"hole_diameter = {jig.hole_diameter:g};",
        f"slot_width = {jig.slot_width:.2f}; // Slightly wider than pipe for easy sliding",
        "",
        "// Main jig",
        "difference() {",
        "    // Start with solid block",
        "    cube([jig_length, jig_width, jig_height], center=false);",
        "",
        "    // Subtract pipe groove (semicircular channel)",
        "    translate([0, jig_width/2, pipe_radius])",
        "        rotate([0, 90, 0])",
        "            cylinder(h=jig_length, r=pipe_radius);",
        "",
        "    // Cut opening slot from bottom to allow sliding onto pipe",
        "    translate([-1, (jig_width - slot_width)/2, -1])",
        "        cube([jig_length + 2, slot_width, pipe_radius + 2]);",
        "",
        "    // Subtract marking holes (go all the way through)",
    ]
    for i, pos in enumerate(jig.hole_offsets):
        out.append(f"    // Hole {i + 1} at {pos:.2f}mm")
        out.append(f"    translate([{pos:.2f}, jig_width/2, jig_height])")
        out.append(f"        cube([{mx:g}, {my:g}, {mz:g}], center=true);")
        out.append("")
    out += [
        "}",
        "",
        "// Add text label on side",
        "translate([10, 0, jig_height/2])",
        "    rotate([90, 0, 0])",
        f"        linear_extrude(height={LABEL_DEPTH:g})",
        f"            text(\"Pixel Spacing: {jig.spacing_in:.4f}\\\" / {jig.spacing_mm:.1f}mm\","
        f" size={LABEL_SIZE:g}, halign=\"left\", valign=\"center\");",
        "",
    ]
    return "\n".join(out)


def jig_filename(label: str) -> str:
    """File name for a jig, e.g. 'led_jig_top_bottom.scad'."""
    slug = re.sub(r"[^a-z0-9]+", "_", label.lower()).strip("_") or "jig"
    return f"led_jig_{slug}.scad"


def write_jig_scad(jig: JigLayout, directory: str) -> str:
    """Write the jig's OpenSCAD source into *directory*; returns the path."""
    path = os.path.join(directory, jig_filename(jig.label))
    with open(path, "w") as f:
        f.write(render_jig_scad(jig))
    logger.info(f"Jig '{jig.label}' written to {path} ({len(jig.hole_offsets)} holes)")
    return path
