"""Text rendering of analytic3d values for diagnostics and the demo.

Nothing in the geometric core depends on this module; it only reads
the public components of points, vectors, lines and planes.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from analytic3d.precision import rad_to_deg


def round_to(value, digits: int = 2) -> float:
    """Round ``value`` to ``digits`` decimal places as a Python float.

    Halves round away from zero, so ``round_to(2.125)`` is ``2.13`` and
    ``round_to(-2.125)`` is ``-2.13``.
    """
    value = float(value)
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(repr(abs(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded) if value >= 0 else -float(rounded)


def _num(value, digits: int) -> str:
    r = round_to(value, digits)
    if r == 0:
        return "0"      # also folds -0.0
    if r.is_integer():
        return str(int(r))
    return str(r)


def _sign(value) -> str:
    return "+" if value >= 0 else "-"


def format_point(point, digits: int = 2) -> str:
    """``(x, y, z)``"""
    return "(" + ", ".join(_num(c, digits) for c in point) + ")"


def format_vector(vector, digits: int = 2) -> str:
    """``<x, y, z>``"""
    return "<" + ", ".join(_num(c, digits) for c in vector) + ">"


def format_line(line, digits: int = 2) -> str:
    """Parametric equations of ``line``, one coordinate per row: ::

       | x = 1 - 1t
       | y = 2 + 1t
       | z = 0 + 3t
    """
    rows = []
    for name, p, d in zip("xyz", line.point, line.direction):
        rows.append(f"| {name} = {_num(p, digits)} {_sign(d)} {_num(abs(d), digits)}t")
    return "\n".join(rows)


def format_plane(plane, digits: int = 2) -> str:
    """General equation of ``plane``, e.g. ``5x - 6y + 4z + 2 = 0``."""
    a, b, c, d = plane.coefficients()
    return (f"{_num(a, digits)}x"
            f" {_sign(b)} {_num(abs(b), digits)}y"
            f" {_sign(c)} {_num(abs(c), digits)}z"
            f" {_sign(d)} {_num(abs(d), digits)} = 0")


def format_angle(radians, digits: int = 2) -> str:
    """An angle given in radians, shown in degrees."""
    return _num(rad_to_deg(radians), digits)


__all__ = [
    "format_angle",
    "format_line",
    "format_plane",
    "format_point",
    "format_vector",
    "round_to",
]
