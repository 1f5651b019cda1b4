"""Quadratic extension ``F[u] / (u^2 - nr)`` of a prime field."""

from __future__ import annotations

from enum import Enum, auto

from .splitparstr import split_par_str


class _NrKind(Enum):
    ZERO = auto()
    ONE = auto()
    NEG_ONE = auto()
    LONG = auto()


class F2Field:
    """Elements are pairs ``(a, b)`` standing for ``a + b*u`` with ``u^2 = nr``."""

    def __init__(self, base, nr) -> None:
        self.base = base
        self.nr = base.from_string(nr) if isinstance(nr, str) else base.from_int(nr)
        if base.is_zero(self.nr):
            self._nr_kind = _NrKind.ZERO
        elif base.eq(self.nr, base.one()):
            self._nr_kind = _NrKind.ONE
        elif base.eq(self.nr, base.neg_one()):
            self._nr_kind = _NrKind.NEG_ONE
        else:
            self._nr_kind = _NrKind.LONG

    def _mul_by_nr(self, a: int) -> int:
        f = self.base
        if self._nr_kind is _NrKind.ZERO:
            return f.zero()
        if self._nr_kind is _NrKind.ONE:
            return a
        if self._nr_kind is _NrKind.NEG_ONE:
            return f.neg(a)
        return f.mul(self.nr, a)

    def zero(self) -> tuple[int, int]:
        return (self.base.zero(), self.base.zero())

    def one(self) -> tuple[int, int]:
        return (self.base.one(), self.base.zero())

    def neg_one(self) -> tuple[int, int]:
        return (self.base.neg_one(), self.base.zero())

    def add(self, a, b) -> tuple[int, int]:
        f = self.base
        return (f.add(a[0], b[0]), f.add(a[1], b[1]))

    def sub(self, a, b) -> tuple[int, int]:
        f = self.base
        return (f.sub(a[0], b[0]), f.sub(a[1], b[1]))

    def neg(self, a) -> tuple[int, int]:
        f = self.base
        return (f.neg(a[0]), f.neg(a[1]))

    def mul(self, a, b) -> tuple[int, int]:
        f = self.base
        aa = f.mul(a[0], b[0])
        bb = f.mul(a[1], b[1])
        real = f.add(aa, self._mul_by_nr(bb))
        cross = f.mul(f.add(a[0], a[1]), f.add(b[0], b[1]))
        imag = f.sub(f.sub(cross, aa), bb)
        return (real, imag)

    def square(self, a) -> tuple[int, int]:
        f = self.base
        ab = f.mul(a[0], a[1])
        if self._nr_kind is _NrKind.NEG_ONE:
            real = f.mul(f.add(a[0], a[1]), f.sub(a[0], a[1]))
        else:
            t1 = f.add(a[0], a[1])
            t2 = f.add(a[0], self._mul_by_nr(a[1]))
            real = f.sub(f.mul(t1, t2), f.add(ab, self._mul_by_nr(ab)))
        return (real, f.add(ab, ab))

    def inv(self, a) -> tuple[int, int]:
        """Inverse; raises ZeroDivisionError when the norm vanishes."""
        f = self.base
        norm = f.sub(f.square(a[0]), self._mul_by_nr(f.square(a[1])))
        t = f.inv(norm)
        return (f.mul(a[0], t), f.neg(f.mul(a[1], t)))

    def div(self, a, b) -> tuple[int, int]:
        return self.mul(a, self.inv(b))

    def is_zero(self, a) -> bool:
        return self.base.is_zero(a[0]) and self.base.is_zero(a[1])

    def eq(self, a, b) -> bool:
        return self.base.eq(a[0], b[0]) and self.base.eq(a[1], b[1])

    def from_string(self, s: str) -> tuple[int, int]:
        """Parse ``"(a, b)"``; raises ValueError unless there are exactly two parts."""
        parts = split_par_str(s)
        if len(parts) != 2:
            raise ValueError(f"expected two components, got {len(parts)} in {s!r}")
        return (self.base.from_string(parts[0]), self.base.from_string(parts[1]))

    def to_string(self, a, radix: int = 10) -> str:
        f = self.base
        return f"({f.to_string(a[0], radix)},{f.to_string(a[1], radix)})"