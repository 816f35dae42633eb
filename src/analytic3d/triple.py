"""Shared storage for the three-component value types (vectors, points)."""

from __future__ import annotations

from typing import Iterator, Sequence, Tuple

from analytic3d.precision import Precision, is_zero


class Triple:
    """Three scalar components stored in the precision of the class.

    Subclasses set the ``precision`` class attribute; components are
    cast to its numpy dtype on construction.
    """

    __slots__ = ("x", "y", "z")
    precision = Precision.DOUBLE

    # keeps numpy scalars on the left of an operator from broadcasting
    # over the components; they defer to the reflected method instead
    __array_ufunc__ = None

    def __init__(self, x=0.0, y=0.0, z=0.0):
        dtype = self.precision.dtype
        self.x = dtype(x)
        self.y = dtype(y)
        self.z = dtype(z)

    @classmethod
    def of(cls, values: Sequence[float]):
        """Build an instance from any three-element sequence."""
        if len(values) != 3:
            raise ValueError(f"{cls.__name__} needs exactly three components, got {len(values)}")
        return cls(values[0], values[1], values[2])

    def __iter__(self) -> Iterator:
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    def __getitem__(self, i):
        return (self.x, self.y, self.z)[i]

    def to_tuple(self) -> Tuple:
        return (self.x, self.y, self.z)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x}, {self.y}, {self.z})"

    def _same_components(self, other: "Triple") -> bool:
        # component-wise, not by distance
        return (is_zero(self.x - other.x)
                and is_zero(self.y - other.y)
                and is_zero(self.z - other.z))

    # equality is tolerance based, so no hash can agree with it
    __hash__ = None


__all__ = ["Triple"]
