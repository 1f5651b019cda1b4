"""Arithmetic in a prime field whose elements are plain Python integers."""

from __future__ import annotations

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _format_int(value: int, radix: int) -> str:
    if not 2 <= radix <= 36:
        raise ValueError(f"radix must be between 2 and 36, got {radix}")
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    value = abs(value)
    digits = []
    while value:
        value, digit = divmod(value, radix)
        digits.append(_DIGITS[digit])
    return sign + "".join(reversed(digits))


class PrimeField:
    """The field of integers modulo ``prime``.

    Elements are integers in ``range(prime)``. The Montgomery form uses
    ``R = 2**(64 * n64)``, where ``n64`` is the number of 64-bit words that
    hold the prime.
    """

    def __init__(self, prime: int) -> None:
        if prime < 2:
            raise ValueError(f"field modulus must be at least 2, got {prime}")
        self.prime = prime
        self.bits = prime.bit_length()
        self.n64 = (self.bits + 63) // 64
        self.n8 = self.n64 * 8
        self.mask = (1 << self.bits) - 1
        self._r = pow(2, 64 * self.n64, prime)
        self._r_inv = pow(self._r, -1, prime)

    def __repr__(self) -> str:
        return f"PrimeField({self.prime})"

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1 % self.prime

    def neg_one(self) -> int:
        return self.prime - 1

    def add(self, a: int, b: int) -> int:
        return (a + b) % self.prime

    def sub(self, a: int, b: int) -> int:
        return (a - b) % self.prime

    def neg(self, a: int) -> int:
        return -a % self.prime

    def mul(self, a: int, b: int) -> int:
        return (a * b) % self.prime

    def square(self, a: int) -> int:
        return (a * a) % self.prime

    def inv(self, a: int) -> int:
        """Multiplicative inverse; raises ZeroDivisionError for non-invertible values."""
        try:
            return pow(a % self.prime, -1, self.prime)
        except ValueError as exc:
            raise ZeroDivisionError(f"{a} has no inverse modulo {self.prime}") from exc

    def div(self, a: int, b: int) -> int:
        return self.mul(a, self.inv(b))

    def pow(self, a: int, b: int) -> int:
        return pow(a % self.prime, b % self.prime, self.prime)

    def idiv(self, a: int, b: int) -> int:
        """Integer (floor) division of the canonical representatives."""
        return (a % self.prime) // (b % self.prime)

    def mod(self, a: int, b: int) -> int:
        """Remainder of the canonical representatives."""
        return (a % self.prime) % (b % self.prime)

    def _shift_left(self, a: int, n: int) -> int:
        r = (a << n) & self.mask
        if r >= self.prime:
            r -= self.prime
        return r

    def shl(self, a: int, b: int) -> int:
        """Shift left; a shift amount close to the prime counts as a right shift."""
        a %= self.prime
        b %= self.prime
        if b < self.bits:
            return self._shift_left(a, b)
        back = self.prime - b
        if back < self.bits:
            return a >> back
        return 0

    def shr(self, a: int, b: int) -> int:
        """Shift right; a shift amount close to the prime counts as a left shift."""
        a %= self.prime
        b %= self.prime
        if b < self.bits:
            return a >> b
        back = self.prime - b
        if back < self.bits:
            return self._shift_left(a, back)
        return 0

    def eq(self, a: int, b: int) -> bool:
        return (a - b) % self.prime == 0

    def is_zero(self, a: int) -> bool:
        return a % self.prime == 0

    def from_int(self, v: int) -> int:
        return v % self.prime

    def from_string(self, s: str, radix: int = 10) -> int:
        return int(s.strip(), radix) % self.prime

    def to_string(self, a: int, radix: int = 10) -> str:
        return _format_int(a % self.prime, radix)

    def to_montgomery(self, a: int) -> int:
        return (a * self._r) % self.prime

    def from_montgomery(self, a: int) -> int:
        return (a * self._r_inv) % self.prime

    def to_bytes(self, a: int) -> bytes:
        """Little-endian encoding in ``n8`` bytes."""
        return (a % self.prime).to_bytes(self.n8, "little")

    def from_bytes(self, data: bytes) -> int:
        """Decode a little-endian integer and reduce it into the field."""
        return int.from_bytes(bytes(data), "little") % self.prime