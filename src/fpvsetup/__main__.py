"""
Command-line interface.

Usage:
    $ python -m fpvsetup --width 60 --height 34 --distance 70
    $ fpvsetup --diagonal 27 --aspect 16:9 --distance 70 --reference-distance 2 --reference-unit m
"""
import argparse
import logging
import sys
from typing import Optional, Sequence

from fpvsetup.config import (
    ASPECT_ROUNDING,
    DEFAULT_APP_UNITS_PER_METER,
    DEFAULT_DIAGONAL_UNIT,
    DEFAULT_DISTANCE_UNIT,
    DEFAULT_MONITOR_UNIT,
    DEFAULT_SETBACK_UNIT,
)
from fpvsetup.logging_config import setup_logging
from fpvsetup.model.aspect import parse_aspect_ratio
from fpvsetup.model.errors import InvalidInputError, require_positive
from fpvsetup.model.fov import ViewMode
from fpvsetup.model.monitor import MonitorGeometry, ViewerDistance
from fpvsetup.model.state import SetupState
from fpvsetup.model.units import UnitScale, from_meters, parse_unit, to_meters, unit_label
from fpvsetup.utils import format_angle, format_number

logger = logging.getLogger("fpvsetup.cli")

BOTH_MODES = "both"


def build_parser() -> argparse.ArgumentParser:
    epilog = """\
examples:
  %(prog)s --width 60 --height 34 --distance 70
  %(prog)s --diagonal 27 --aspect 16:9 --distance 70
  %(prog)s --width 24 --height 13.5 --monitor-unit in --distance 2 --distance-unit ft
  %(prog)s --diagonal 27 --aspect 21:9 --distance 70 --mode focused --reference-distance 5 --reference-unit m
"""
    parser = argparse.ArgumentParser(
        prog="fpvsetup",
        description="Calculate first-person camera FOV from monitor size and viewing distance",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    monitor = parser.add_argument_group("monitor")
    monitor.add_argument("--width", type=float, help="Visible screen width")
    monitor.add_argument("--height", type=float, help="Visible screen height")
    monitor.add_argument("--monitor-unit", default=DEFAULT_MONITOR_UNIT,
                         help=f"Unit of width and height (default: {DEFAULT_MONITOR_UNIT})")
    monitor.add_argument("--diagonal", type=float, help="Screen diagonal, used together with --aspect")
    monitor.add_argument("--aspect", help="Aspect ratio, e.g. 16:9 or 1.78")
    monitor.add_argument("--diagonal-unit", default=DEFAULT_DIAGONAL_UNIT,
                         help=f"Unit of the diagonal (default: {DEFAULT_DIAGONAL_UNIT})")

    viewer = parser.add_argument_group("viewer")
    viewer.add_argument("--distance", type=float, required=True,
                        help="Distance from the eye to the screen")
    viewer.add_argument("--distance-unit", default=DEFAULT_DISTANCE_UNIT,
                        help=f"Unit of the viewing distance (default: {DEFAULT_DISTANCE_UNIT})")

    output = parser.add_argument_group("output")
    output.add_argument("--mode", choices=[m.value for m in ViewMode] + [BOTH_MODES], default=BOTH_MODES,
                        help="Which FOV to compute (default: both)")
    output.add_argument("--reference-distance", type=float,
                        help="Focused mode: distance at which objects keep accurate scale")
    output.add_argument("--reference-unit",
                        help="Unit of the reference distance (default: same as --distance-unit)")
    output.add_argument("--relative-to", choices=["monitor", "eye"], default="monitor",
                        help="Measure the reference distance from the screen or from the eye (default: monitor)")
    output.add_argument("--app-units-per-meter", type=float, default=DEFAULT_APP_UNITS_PER_METER,
                        help="How many application units one real meter spans (default: 1)")
    output.add_argument("--setback-unit", default=DEFAULT_SETBACK_UNIT,
                        help=f"Unit used to report the camera setback (default: {DEFAULT_SETBACK_UNIT})")

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", help="Also write the log to this file")
    return parser


def state_from_args(args: argparse.Namespace) -> SetupState:
    """Build the setup state from parsed arguments; raises InvalidInputError."""
    if args.width is not None or args.height is not None:
        if args.width is None or args.height is None:
            raise InvalidInputError("Both --width and --height are required.")
        geometry = MonitorGeometry.from_unit(args.width, args.height, args.monitor_unit)
    elif args.diagonal is not None and args.aspect is not None:
        geometry = MonitorGeometry.from_diagonal_unit(
            args.diagonal, parse_aspect_ratio(args.aspect), args.diagonal_unit
        )
    else:
        raise InvalidInputError("Give the monitor size as --width/--height or as --diagonal/--aspect.")

    state = SetupState(
        geometry=geometry,
        distance=ViewerDistance.from_unit(args.distance, args.distance_unit),
        unit_scale=UnitScale(app_units_per_meter=args.app_units_per_meter),
        relative_to_monitor=args.relative_to == "monitor",
    )
    if args.reference_distance is not None:
        reference_unit = args.reference_unit or args.distance_unit
        # Rejected before any report line is rendered
        state.reference_distance = require_positive(
            to_meters(args.reference_distance, reference_unit), "Reference distance"
        )
    return state


def render_report(state: SetupState, args: argparse.Namespace) -> str:
    monitor_unit = parse_unit(args.monitor_unit)
    diagonal_unit = parse_unit(args.diagonal_unit)
    distance_unit = parse_unit(args.distance_unit)

    width, height = state.geometry.width_and_height(monitor_unit)
    n, d = state.geometry.common_aspect_ratio(ASPECT_ROUNDING)
    lines = [
        f"Monitor: {format_number(width)} x {format_number(height)} {unit_label(monitor_unit)}, "
        f"diagonal {format_number(from_meters(state.geometry.diagonal, diagonal_unit))} {unit_label(diagonal_unit)}, "
        f"aspect {format_number(n)}:{format_number(d)}",
        f"Viewing distance: {format_number(state.distance.to_unit(distance_unit))} {unit_label(distance_unit)}",
    ]

    if args.mode in (ViewMode.PORTAL_LIKE, BOTH_MODES):
        portal = state.portal_like()
        setback = state.setback()
        setback_unit = parse_unit(args.setback_unit)
        lines += [
            "",
            "Portal-like",
            f"  Field of view: {format_angle(portal.horizontal)} horizontal, "
            f"{format_angle(portal.vertical)} vertical",
            f"  Move the camera back {format_number(from_meters(setback.meters, setback_unit))} "
            f"{unit_label(setback_unit)} ({format_number(setback.app_units)} units)",
        ]

    if args.mode in (ViewMode.FOCUSED, BOTH_MODES):
        focused = state.focused()
        if focused is None:
            if args.mode == ViewMode.FOCUSED:
                raise InvalidInputError("Focused mode requires --reference-distance.")
        else:
            reference_unit = parse_unit(args.reference_unit or args.distance_unit)
            anchor = "the screen" if state.relative_to_monitor else "the eye"
            lines += [
                "",
                f"Focused (accurate scale {format_number(args.reference_distance)} "
                f"{unit_label(reference_unit)} away from {anchor})",
                f"  Camera field of view: {format_angle(focused.horizontal)} horizontal, "
                f"{format_angle(focused.vertical)} vertical",
                f"  Scale factor: {format_number(focused.scale_factor)}",
            ]

    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=logging.DEBUG if args.verbose else logging.WARNING, log_file=args.log_file)
    logger.info(f"Arguments: {vars(args)}")

    try:
        state = state_from_args(args)
        report = render_report(state, args)
    except InvalidInputError as e:
        logger.warning(f"Invalid input: {e}")
        print(f"fpvsetup: error: {e}", file=sys.stderr)
        return 2

    print(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
