"""Short Weierstrass curves ``y^2 = x^3 + a*x + b`` in XYZZ coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Union

from .naf import naf_mul_by_scalar


@dataclass(frozen=True)
class Point:
    """Projective point in XYZZ form: ``x = X/ZZ``, ``y = Y/ZZZ``; ``zz == 0`` is infinity."""

    x: Any
    y: Any
    zz: Any
    zzz: Any


@dataclass(frozen=True)
class PointAffine:
    """Affine point; ``(0, 0)`` stands for the point at infinity."""

    x: Any
    y: Any


AnyPoint = Union[Point, PointAffine]


class _AKind(Enum):
    ZERO = auto()
    ONE = auto()
    NEG_ONE = auto()
    LONG = auto()


_COUNTER_NAMES = (
    "add_mixed",
    "add",
    "add_affine",
    "dbl",
    "dbl_mixed",
    "eq",
    "eq_mixed",
    "to_affine",
)


def _check_point(p: object) -> None:
    if not isinstance(p, (Point, PointAffine)):
        raise TypeError(f"expected Point or PointAffine, got {type(p).__name__}")


class Curve:
    """Group of points of a short Weierstrass curve over ``field``.

    ``field`` is any object with the field interface used here (``zero``,
    ``one``, ``neg_one``, ``add``, ``sub``, ``neg``, ``mul``, ``square``,
    ``div``, ``is_zero``, ``eq``, ``from_string`` and ``to_string``).
    Operation counts are kept and can be read with :meth:`counters`.
    """

    def __init__(self, field, a, b, gx, gy) -> None:
        self.field = field
        self.a = a
        self.b = b
        f = field
        self._one = Point(gx, gy, f.one(), f.one())
        self._one_affine = PointAffine(gx, gy)
        self._zero = Point(f.one(), f.one(), f.zero(), f.zero())
        self._zero_affine = PointAffine(f.zero(), f.zero())

        if f.is_zero(a):
            self._a_kind = _AKind.ZERO
        elif f.eq(a, f.one()):
            self._a_kind = _AKind.ONE
        elif f.eq(a, f.neg_one()):
            self._a_kind = _AKind.NEG_ONE
        else:
            self._a_kind = _AKind.LONG

        self._counts: dict[str, int] = {}
        self.reset_counters()

    @classmethod
    def from_strings(cls, field, a, b, gx, gy) -> "Curve":
        """Build a curve from decimal strings parsed by ``field.from_string``."""
        return cls(
            field,
            field.from_string(a),
            field.from_string(b),
            field.from_string(gx),
            field.from_string(gy),
        )

    def __repr__(self) -> str:
        return f"Curve({self.field!r}, a={self.a!r}, b={self.b!r})"

    # Distinguished points

    def one(self) -> Point:
        return self._one

    def one_affine(self) -> PointAffine:
        return self._one_affine

    def zero(self) -> Point:
        return self._zero

    def zero_affine(self) -> PointAffine:
        return self._zero_affine

    # Counters

    def reset_counters(self) -> None:
        self._counts = dict.fromkeys(_COUNTER_NAMES, 0)

    def counters(self) -> dict[str, int]:
        """A snapshot of the operation counters."""
        return dict(self._counts)

    def _count(self, name: str) -> None:
        self._counts[name] += 1

    # Helpers

    def _mul_by_a(self, v):
        f = self.field
        if self._a_kind is _AKind.ZERO:
            return f.zero()
        if self._a_kind is _AKind.ONE:
            return v
        if self._a_kind is _AKind.NEG_ONE:
            return f.neg(v)
        return f.mul(self.a, v)

    def is_zero(self, p: AnyPoint) -> bool:
        _check_point(p)
        f = self.field
        if isinstance(p, Point):
            return f.is_zero(p.zz)
        return f.is_zero(p.x) and f.is_zero(p.y)

    # Conversions

    def to_point(self, p: AnyPoint) -> Point:
        """Projective form of ``p``."""
        _check_point(p)
        if isinstance(p, Point):
            return p
        if self.is_zero(p):
            return self._zero
        f = self.field
        return Point(p.x, p.y, f.one(), f.one())

    def to_affine(self, p: AnyPoint) -> PointAffine:
        """Affine form of ``p``; infinity becomes ``(0, 0)``."""
        _check_point(p)
        if isinstance(p, PointAffine):
            return p
        self._count("to_affine")
        if self.is_zero(p):
            return self._zero_affine
        f = self.field
        return PointAffine(f.div(p.x, p.zz), f.div(p.y, p.zzz))

    # Addition

    def add(self, p1: AnyPoint, p2: AnyPoint) -> Point:
        _check_point(p1)
        _check_point(p2)
        if isinstance(p1, PointAffine):
            if isinstance(p2, PointAffine):
                return self._add_affine(p1, p2)
            return self._add_mixed(p2, p1)
        if isinstance(p2, PointAffine):
            return self._add_mixed(p1, p2)
        return self._add_projective(p1, p2)

    def _add_projective(self, p1: Point, p2: Point) -> Point:
        self._count("add")
        if self.is_zero(p1):
            return p2
        if self.is_zero(p2):
            return p1
        f = self.field
        u1 = f.mul(p1.x, p2.zz)
        u2 = f.mul(p2.x, p1.zz)
        s1 = f.mul(p1.y, p2.zzz)
        s2 = f.mul(p2.y, p1.zzz)
        p = f.sub(u2, u1)
        r = f.sub(s2, s1)
        if f.is_zero(p) and f.is_zero(r):
            return self._dbl_projective(p1)
        pp = f.square(p)
        ppp = f.mul(p, pp)
        q = f.mul(u1, pp)
        x3 = f.sub(f.sub(f.sub(f.square(r), ppp), q), q)
        y3 = f.sub(f.mul(f.sub(q, x3), r), f.mul(s1, ppp))
        zz3 = f.mul(f.mul(p1.zz, p2.zz), pp)
        zzz3 = f.mul(f.mul(p1.zzz, p2.zzz), ppp)
        return Point(x3, y3, zz3, zzz3)

    def _add_mixed(self, p1: Point, p2: PointAffine) -> Point:
        self._count("add_mixed")
        if self.is_zero(p1):
            return self.to_point(p2)
        if self.is_zero(p2):
            return p1
        f = self.field
        u2 = f.mul(p2.x, p1.zz)
        s2 = f.mul(p2.y, p1.zzz)
        p = f.sub(u2, p1.x)
        r = f.sub(s2, p1.y)
        if f.is_zero(p) and f.is_zero(r):
            return self._dbl_affine(p2)
        pp = f.square(p)
        ppp = f.mul(p, pp)
        q = f.mul(p1.x, pp)
        x3 = f.sub(f.sub(f.sub(f.square(r), ppp), q), q)
        y3 = f.sub(f.mul(f.sub(q, x3), r), f.mul(p1.y, ppp))
        return Point(x3, y3, f.mul(p1.zz, pp), f.mul(p1.zzz, ppp))

    def _add_affine(self, p1: PointAffine, p2: PointAffine) -> Point:
        self._count("add_affine")
        if self.is_zero(p1):
            return self.to_point(p2)
        if self.is_zero(p2):
            return self.to_point(p1)
        f = self.field
        p = f.sub(p2.x, p1.x)
        r = f.sub(p2.y, p1.y)
        if f.is_zero(p) and f.is_zero(r):
            return self._dbl_affine(p2)
        pp = f.square(p)
        ppp = f.mul(p, pp)
        q = f.mul(p1.x, pp)
        x3 = f.sub(f.sub(f.sub(f.square(r), ppp), q), q)
        y3 = f.sub(f.mul(f.sub(q, x3), r), f.mul(p1.y, ppp))
        return Point(x3, y3, pp, ppp)

    def sub(self, p1: AnyPoint, p2: AnyPoint) -> Point:
        return self.add(p1, self.neg(p2))

    # Doubling

    def dbl(self, p: AnyPoint) -> Point:
        _check_point(p)
        if isinstance(p, PointAffine):
            return self._dbl_affine(p)
        return self._dbl_projective(p)

    def _dbl_projective(self, p: Point) -> Point:
        self._count("dbl")
        if self.is_zero(p):
            return p
        f = self.field
        u = f.add(p.y, p.y)
        v = f.square(u)
        w = f.mul(u, v)
        s = f.mul(p.x, v)
        x_sq = f.square(p.x)
        m = f.add(x_sq, f.add(x_sq, x_sq))
        if self._a_kind is not _AKind.ZERO:
            m = f.add(m, self._mul_by_a(f.square(p.zz)))
        x3 = f.sub(f.sub(f.square(m), s), s)
        y3 = f.sub(f.mul(m, f.sub(s, x3)), f.mul(w, p.y))
        return Point(x3, y3, f.mul(v, p.zz), f.mul(w, p.zzz))

    def _dbl_affine(self, p: PointAffine) -> Point:
        self._count("dbl_mixed")
        if self.is_zero(p):
            return self._zero
        f = self.field
        u = f.add(p.y, p.y)
        v = f.square(u)
        w = f.mul(u, v)
        s = f.mul(p.x, v)
        x_sq = f.square(p.x)
        m = f.add(f.add(f.add(x_sq, x_sq), x_sq), self.a)
        x3 = f.sub(f.sub(f.square(m), s), s)
        y3 = f.sub(f.mul(m, f.sub(s, x3)), f.mul(w, p.y))
        return Point(x3, y3, v, w)

    # Negation and comparison

    def neg(self, p: AnyPoint) -> AnyPoint:
        """Negation, in the same representation as ``p``."""
        _check_point(p)
        f = self.field
        if isinstance(p, PointAffine):
            return PointAffine(p.x, f.neg(p.y))
        return Point(p.x, f.neg(p.y), p.zz, p.zzz)

    def eq(self, p1: AnyPoint, p2: AnyPoint) -> bool:
        _check_point(p1)
        _check_point(p2)
        if isinstance(p1, PointAffine):
            if isinstance(p2, PointAffine):
                f = self.field
                return f.eq(p1.x, p2.x) and f.eq(p1.y, p2.y)
            return self._eq_mixed(p2, p1)
        if isinstance(p2, PointAffine):
            return self._eq_mixed(p1, p2)
        return self._eq_projective(p1, p2)

    def _eq_projective(self, p1: Point, p2: Point) -> bool:
        self._count("eq")
        if self.is_zero(p1):
            return self.is_zero(p2)
        f = self.field
        u1 = f.mul(p1.x, p2.zz)
        u2 = f.mul(p2.x, p1.zz)
        s1 = f.mul(p1.y, p2.zzz)
        s2 = f.mul(p2.y, p1.zzz)
        return f.is_zero(f.sub(u2, u1)) and f.is_zero(f.sub(s2, s1))

    def _eq_mixed(self, p1: Point, p2: PointAffine) -> bool:
        self._count("eq_mixed")
        if self.is_zero(p1):
            return self.is_zero(p2)
        f = self.field
        u2 = f.mul(p2.x, p1.zz)
        s2 = f.mul(p2.y, p1.zzz)
        return f.is_zero(f.sub(u2, p1.x)) and f.is_zero(f.sub(s2, p1.y))

    # Output and scalar multiplication

    def to_string(self, p: AnyPoint, radix: int = 10) -> str:
        a = self.to_affine(p)
        f = self.field
        return f"({f.to_string(a.x, radix)},{f.to_string(a.y, radix)})"

    def mul_by_scalar(self, base: AnyPoint, scalar) -> Point:
        """Multiply ``base`` by a little-endian byte scalar or a non-negative int."""
        _check_point(base)
        if isinstance(scalar, int):
            if scalar < 0:
                raise ValueError(f"scalar must be non-negative, got {scalar}")
            scalar = scalar.to_bytes(max(1, (scalar.bit_length() + 7) // 8), "little")
        return naf_mul_by_scalar(self, base, bytes(scalar))