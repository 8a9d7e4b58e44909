"""Homogeneous point and vector algebra.

Points and vectors share one four component representation ``(x, y, z, w)``
where ``w`` is 1 for points and 0 for vectors. Only the operators that keep
``w`` meaningful are defined, so ``point - point`` yields a vector while
``point + point`` raises ``TypeError``.

The coordinate system is left-handed: x points right, y up and z forward.
Keep that in mind when interpreting the direction of a cross product.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from .misc import divide, equal


@dataclass(frozen=True, eq=False)
class _Tuple4:
    x: float
    y: float
    z: float
    w: float

    def __add__(self, other: "_Tuple4") -> "_Tuple4":
        return _Tuple4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: "_Tuple4") -> "_Tuple4":
        return _Tuple4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> "_Tuple4":
        return _Tuple4(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> "_Tuple4":
        return _Tuple4(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def __truediv__(self, scalar: float) -> "_Tuple4":
        return _Tuple4(
            divide(self.x, scalar),
            divide(self.y, scalar),
            divide(self.z, scalar),
            divide(self.w, scalar),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Tuple4):
            return NotImplemented
        return (
            equal(self.x, other.x)
            and equal(self.y, other.y)
            and equal(self.z, other.z)
            and equal(self.w, other.w)
        )

    def dot(self, other: "_Tuple4") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w


class _Homogeneous:
    """Read-only coordinate access shared by points and vectors."""

    __slots__ = ("_tuple",)

    _W = 0.0

    def __init__(self, x: float, y: float, z: float) -> None:
        object.__setattr__(self, "_tuple", _Tuple4(x, y, z, self._W))

    @classmethod
    def _wrap(cls, values: _Tuple4):
        instance = cls.__new__(cls)
        object.__setattr__(instance, "_tuple", values)
        return instance

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        # Rebuild through the constructor; slot restoration would hit __setattr__.
        return (type(self), (self.x, self.y, self.z))

    @property
    def x(self) -> float:
        return self._tuple.x

    @property
    def y(self) -> float:
        return self._tuple.y

    @property
    def z(self) -> float:
        return self._tuple.z

    def __eq__(self, other: object) -> bool:
        # Points and vectors never compare equal to each other.
        if type(other) is not type(self):
            return NotImplemented
        return self._tuple == other._tuple

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x!r}, {self.y!r}, {self.z!r})"


class Point3(_Homogeneous):
    """A location in 3D space (``w == 1``)."""

    __slots__ = ()

    _W = 1.0

    def __add__(self, other: "Vector3") -> "Point3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Point3._wrap(self._tuple + other._tuple)

    def __sub__(self, other):
        """Return the displacement to another point, or translate by a vector.

        ``p1 - p2`` is the vector pointing from ``p2`` to ``p1``. ``p - v``
        moves the point backwards along ``v``.
        """

        if isinstance(other, Point3):
            return Vector3._wrap(self._tuple - other._tuple)
        if isinstance(other, Vector3):
            return Point3._wrap(self._tuple - other._tuple)
        return NotImplemented


class Vector3(_Homogeneous):
    """A direction or displacement in 3D space (``w == 0``)."""

    __slots__ = ()

    _W = 0.0

    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3._wrap(self._tuple + other._tuple)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3._wrap(self._tuple - other._tuple)

    def __neg__(self) -> "Vector3":
        return Vector3._wrap(-self._tuple)

    def __mul__(self, scalar: float) -> "Vector3":
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector3._wrap(self._tuple * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector3":
        """Divide by a scalar; a zero divisor produces inf/nan components."""

        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector3._wrap(self._tuple / scalar)

    def magnitude(self) -> float:
        # All four components take part; w is zero so it never contributes.
        return math.sqrt(self._tuple.dot(self._tuple))

    def normalize(self) -> "Vector3":
        """Return the unit vector pointing in the same direction.

        The vector must have a non-zero magnitude. Normalizing the zero
        vector yields nan components rather than raising.
        """

        return self / self.magnitude()

    def dot(self, other: "Vector3") -> float:
        _require_vector(other, "dot")
        return self._tuple.dot(other._tuple)

    def cross(self, other: "Vector3") -> "Vector3":
        _require_vector(other, "cross")
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )


def _require_vector(other: object, operation: str) -> None:
    if not isinstance(other, Vector3):
        raise TypeError(f"Vector3.{operation} requires a Vector3, got {type(other).__name__}")
