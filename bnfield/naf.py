"""Non-adjacent form of scalars and double-and-add scalar multiplication."""

from __future__ import annotations


def build_naf(scalar) -> list[int]:
    """Return the NAF digits (-1, 0, 1) of a little-endian scalar, least significant first.

    The list has ``(len(scalar) + 2) * 8`` entries, padded with zeros.
    """
    data = bytes(scalar)
    k = int.from_bytes(data, "little")
    digits: list[int] = []
    while k:
        if k & 1:
            digit = 2 - (k & 3)
            k -= digit
        else:
            digit = 0
        digits.append(digit)
        k >>= 1
    digits.extend([0] * ((len(data) + 2) * 8 - len(digits)))
    return digits


def naf_mul_by_scalar(group, base, scalar):
    """Multiply ``base`` by a little-endian byte scalar using its NAF.

    ``group`` supplies ``zero()``, ``dbl(p)``, ``add(p, q)`` and ``sub(p, q)``.
    """
    data = bytes(scalar)
    naf = build_naf(data)[: len(data) * 8 + 2]
    while naf and naf[-1] == 0:
        naf.pop()

    result = group.zero()
    for digit in reversed(naf):
        result = group.dbl(result)
        if digit == 1:
            result = group.add(result, base)
        elif digit == -1:
            result = group.sub(result, base)
    return result