#!/usr/bin/env python3
"""
Demo command line for analytic3d.

Usage:
    python -m analytic3d [--precision {f,d,ld}] [--digits N]
                         [--log-level LEVEL] [--log-file PATH]

Builds a point, two lines and three planes (given by the coefficients
of ``ax + by + cz + d = 0``) and prints their relations: the point where
Plane1 meets Line1, the line shared by Plane1 and Plane2, the distance
from Plane1 to the point and the angles Plane1 makes with Line2 and
Plane3, in degrees.
"""

import argparse
import logging
import sys

from analytic3d.formatting import format_angle, format_line, format_plane, format_point, round_to
from analytic3d.log import setup_logging
from analytic3d.precision import Precision, family

logger = logging.getLogger("analytic3d.demo")


def run_demo(precision: Precision, digits: int = 2, out=None) -> None:
    """Print the demo scenario computed in ``precision`` to ``out``."""
    out = out or sys.stdout
    Point = family("point", precision)
    Vector = family("vector", precision)
    Line = family("line", precision)
    Plane = family("plane", precision)

    def emit(text=""):
        print(text, file=out)

    point1 = Point(7, 4, 3)
    emit(f"Point1{format_point(point1, digits)}")
    emit()

    line1 = Line(Point(1, 2, 0), Vector(-1, 1, 3))
    line2 = Line(Point(1, 1, 2), Vector(1, 3, -1))
    emit("Line1:")
    emit(format_line(line1, digits))
    emit()
    emit("Line2:")
    emit(format_line(line2, digits))
    emit()

    plane1 = Plane.from_coefficients(5, -6, 4, 2)
    plane2 = Plane.from_coefficients(9, 0, -2, 1)
    plane3 = Plane.from_coefficients(1, 1, 3, 1)
    for name, plane in (("Plane1", plane1), ("Plane2", plane2), ("Plane3", plane3)):
        emit(f"{name}: {format_plane(plane, digits)}")
    emit()

    crossing = plane1.point_of_intersection(line1)
    if crossing is not None:
        emit(f"Point of intersection (between Plane1 and Line1): P{format_point(crossing, digits)}")
    else:
        logger.info("Plane1 and Line1 do not intersect")
    emit()

    shared = plane1.line_of_intersection(plane2)
    if shared is not None:
        emit("Line of intersection (between Plane1 and Plane2):")
        emit(format_line(shared, digits))
    else:
        logger.info("Plane1 and Plane2 are parallel")
    emit()

    emit(f"Distance (from Plane1 to Point): {round_to(plane1.distance_to(point1), digits)}")
    emit(f"Angle (between Plane1 and Line2): {format_angle(plane1.angle_between(line2), digits)}")
    emit(f"Angle (between Plane1 and Plane3): {format_angle(plane1.angle_between(plane3), digits)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="analytic3d",
        description="Print the relations between a few sample points, lines and planes.",
    )
    parser.add_argument("--precision", choices=[p.suffix for p in Precision], default="f",
                        help="scalar precision: f (single), d (double) or ld (extended)")
    parser.add_argument("--digits", type=int, default=2,
                        help="decimal places shown in the output")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="logging level for the analytic3d logger")
    parser.add_argument("--log-file", default=None,
                        help="also write log records to this file")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    precision = Precision.from_suffix(args.precision)
    logger.info("running demo in %s precision", precision.name.lower())
    run_demo(precision, args.digits)
    return 0


if __name__ == "__main__":
    sys.exit(main())
