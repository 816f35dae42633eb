"""Exceptions raised by analytic3d and the invariant-violation helper.

Two kinds of outcome exist besides a definite value:

- an *absent* result (two lines that do not meet, parallel planes) is
  returned as ``None`` and is never an error;
- a violated precondition (zero direction or normal, a near-zero
  divisor, skew lines where a plane was requested) raises
  ``InvalidGeometryError``.  These are programming errors; callers are
  expected to validate their input rather than catch them.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class GeometryError(ValueError):
    """Base class for analytic3d errors."""


class InvalidGeometryError(GeometryError):
    """A geometric precondition was violated (degenerate input)."""


def require(condition: bool, message: str, *args) -> None:
    """Raise ``InvalidGeometryError`` unless ``condition`` holds.

    ``message`` is %-formatted with ``args`` only when the check fails.
    """
    if condition:
        return
    text = message % args if args else message
    logger.debug("precondition failed: %s", text)
    raise InvalidGeometryError(text)


__all__ = ["GeometryError", "InvalidGeometryError", "require"]
