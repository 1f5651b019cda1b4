"""Radix-2 number-theoretic transform over a prime field."""

from __future__ import annotations


def bit_reverse(x: int, domain_pow: int) -> int:
    """Reverse the 32 low bits of ``x`` and keep the top ``domain_pow`` of them."""
    if not 0 <= domain_pow <= 32:
        raise ValueError(f"domain power must be between 0 and 32, got {domain_pow}")
    reversed_bits = int(format(x & 0xFFFFFFFF, "032b")[::-1], 2)
    return reversed_bits >> (32 - domain_pow)


class FFT:
    """Forward and inverse transforms of length up to ``max_domain_size``.

    ``field`` is a prime field with a ``prime`` attribute and the usual
    arithmetic methods.
    """

    def __init__(self, field, max_domain_size: int) -> None:
        self.field = field
        domain_pow = self.log2(max_domain_size)
        q = field.prime
        q_minus_1_half = (q - 1) // 2

        nqr = 2
        while pow(nqr, q_minus_1_half, q) == 1:
            nqr += 1
        self.nqr = field.from_int(nqr)

        s = 1
        odd = q_minus_1_half
        while odd % 2 == 0 and s < domain_pow:
            odd //= 2
            s += 1
        if s < domain_pow:
            raise ValueError("domain size too big for the field")
        self.s = s

        generator = field.from_int(pow(nqr, odd, q))
        roots = [field.one()]
        for _ in range((1 << s) - 1):
            roots.append(field.mul(roots[-1], generator))
        self._roots = roots

        half = field.inv(field.from_int(2))
        pow_two_inv = [field.one()]
        for _ in range(s):
            pow_two_inv.append(field.mul(pow_two_inv[-1], half))
        self._pow_two_inv = pow_two_inv

    @staticmethod
    def log2(n: int) -> int:
        """Floor of the base-2 logarithm of a positive integer."""
        if n <= 0:
            raise ValueError(f"log2 needs a positive value, got {n}")
        return n.bit_length() - 1

    def root(self, domain_pow: int, idx: int):
        """The ``idx``-th power of the primitive ``2**domain_pow``-th root of unity."""
        if domain_pow > self.s:
            raise ValueError(f"domain power {domain_pow} exceeds maximum {self.s}")
        return self._roots[idx << (self.s - domain_pow)]

    def _domain_pow(self, n: int) -> int:
        domain_pow = self.log2(n)
        if 1 << domain_pow != n:
            raise ValueError(f"length must be a power of two, got {n}")
        if domain_pow > self.s:
            raise ValueError(f"length {n} exceeds the maximum domain size {1 << self.s}")
        return domain_pow

    def fft(self, values) -> list:
        """Evaluate the polynomial with coefficients ``values`` on the roots of unity."""
        values = list(values)
        n = len(values)
        domain_pow = self._domain_pow(n)
        f = self.field
        a = [values[bit_reverse(i, domain_pow)] for i in range(n)]
        for s in range(1, domain_pow + 1):
            m = 1 << s
            half = m >> 1
            for i in range(n >> 1):
                k = (i // half) * m
                j = i % half
                t = f.mul(self.root(s, j), a[k + j + half])
                u = a[k + j]
                a[k + j] = f.add(u, t)
                a[k + j + half] = f.sub(u, t)
        return a

    def ifft(self, values) -> list:
        """Inverse of :meth:`fft`."""
        a = self.fft(values)
        n = len(a)
        scale = self._pow_two_inv[self.log2(n)]
        f = self.field
        return [f.mul(a[-i % n], scale) for i in range(n)]