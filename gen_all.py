"""Compute a frame layout and write its SVG preview and drilling jigs.

    python gen_all.py --width 48 --height 48 --spacing 4
    python gen_all.py --width 36 --height 80 --spacing 3 --arch-rise 8 --save door
    python gen_all.py --load door --out-dir out/

Writes frame.svg and one led_jig_*.scad per distinct spacing into --out-dir
and prints the per-side report. A spacing too small to clear the corner piece
gets no jig; the other jigs are still written.
"""
import argparse, datetime, logging, os, sys

from shared.types import FrameSpec
from shared.geometry import GeometryError, fmt_spacing
from frame.constants import DEFAULT_CONFIG_FILE
from frame.layout import validate_frame_spec, compute_frame_layout
from frame.configs import ConfigStore, ConfigError
from frame.gen_frame import write_frame_svg
from jig.jig import build_jig, jig_spacings
from jig.gen_jig import write_jig_scad

logger = logging.getLogger("framelights")


def build_parser():
    parser = argparse.ArgumentParser(description="Lay out perimeter lights on a window/door frame.")
    parser.add_argument('--width', type=float, help='Frame outer width in inches.')
    parser.add_argument('--height', type=float, help='Frame side height in inches.')
    parser.add_argument('--spacing', type=float, help='Ideal fixture spacing in inches.')
    parser.add_argument('--arch-rise', type=float, default=None,
                        help='Rise of an arched top above the top corners, in inches.')
    parser.add_argument('--hole-diameter', type=float, default=12.0, help='Hole diameter in mm (preview).')
    parser.add_argument('--out-dir', default='.', help='Directory for frame.svg and jig files.')
    parser.add_argument('--no-jigs', action='store_true', help='Skip writing OpenSCAD jigs.')
    parser.add_argument('--config-file', default=DEFAULT_CONFIG_FILE, help='Named configuration store (JSON).')
    parser.add_argument('--save', metavar='NAME', help='Save the frame under NAME (overwrites).')
    parser.add_argument('--load', metavar='NAME', help='Use the saved frame NAME.')
    parser.add_argument('--delete', metavar='NAME', help='Delete the saved frame NAME and exit.')
    parser.add_argument('--list', action='store_true', help='List saved frames and exit.')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging.')
    return parser


def spec_from_args(args, store: ConfigStore) -> FrameSpec:
    if args.load:
        return store.load(args.load)
    missing = [f"--{n}" for n in ("width", "height", "spacing") if getattr(args, n) is None]
    if missing:
        raise GeometryError(f"Missing {', '.join(missing)} (or use --load NAME)")
    return FrameSpec(
        width=args.width, height=args.height, ideal_spacing=args.spacing,
        arched=args.arch_rise is not None, arch_rise=args.arch_rise,
        hole_diameter_mm=args.hole_diameter,
    )


def print_report(spec, layout):
    print(f"Frame {spec.width:g}\" x {spec.height:g}\", ideal spacing {spec.ideal_spacing:g}\"")
    top = "Bottom" if layout.arc is not None else "Top/bottom"
    print(f"  {top + ':':<12s} {layout.horizontal.fixture_count:3d} @ {fmt_spacing(layout.horizontal.actual_spacing)}")
    print(f"  {'Left/right:':<12s} {layout.vertical.fixture_count:3d} @ {fmt_spacing(layout.vertical.actual_spacing)}")
    if layout.arc is not None:
        a = layout.arc
        print(f"  {'Arc:':<12s} {a.fixture_count:3d} @ {fmt_spacing(a.actual_spacing)}")
        print(f"    radius {a.radius:.4f}\"  arc length {a.arc_length:.4f}\"  corner cut {a.corner_angle_deg:.2f} deg")
    print(f"  Total fixtures: {layout.total}")


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")
    store = ConfigStore(args.config_file)

    try:
        if args.list:
            for c in store.entries():
                saved = datetime.datetime.fromtimestamp(c.timestamp / 1000).strftime("%Y-%m-%d")
                print(f"{c.name} ({saved})  {c.spec.width:g}\" x {c.spec.height:g}\" @ {c.spec.ideal_spacing:g}\"")
            return 0
        if args.delete:
            store.delete(args.delete)
            return 0

        spec = spec_from_args(args, store)
        validate_frame_spec(spec)
        layout = compute_frame_layout(spec)
        if args.save:
            store.save(args.save, spec, overwrite=True)

        os.makedirs(args.out_dir, exist_ok=True)
        svg_path = write_frame_svg(spec, args.out_dir)
        print_report(spec, layout)
        print(f"Preview written to {svg_path}")
        if not args.no_jigs:
            for label, spacing in jig_spacings(layout):
                try:
                    jig = build_jig(spacing, label)
                except GeometryError as e:
                    logger.error(f"No jig for {label}: {e}")
                    continue
                path = write_jig_scad(jig, args.out_dir)
                print(f"Jig written to {path}")
    except (GeometryError, ConfigError) as e:
        logger.error(e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
