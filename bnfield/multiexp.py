"""Multi-scalar multiplication with the bucket (Pippenger) method."""

from __future__ import annotations

from collections.abc import Iterator

PACK_FACTOR = 2
MAX_CHUNK_SIZE_BITS = 16
MIN_CHUNK_SIZE_BITS = 2


def log2(value: int) -> int:
    """Floor of the base-2 logarithm of a 32-bit value; ``log2(0)`` is 0."""
    value &= 0xFFFFFFFF
    return value.bit_length() - 1 if value else 0


def _split_scalars(data: bytes, size: int) -> Iterator[int]:
    view = memoryview(data)
    for start in range(0, len(data), size):
        yield int.from_bytes(view[start:start + size], "little")


def _sum_buckets(curve, buckets):
    """Return ``sum(i * buckets[i])`` using running sums from the top bucket down."""
    running = curve.zero()
    total = curve.zero()
    for bucket in reversed(buckets[1:]):
        if not curve.is_zero(bucket):
            running = curve.add(running, bucket)
        if not curve.is_zero(running):
            total = curve.add(total, running)
    return total


def multi_mul_by_scalar(curve, bases, scalars, scalar_size: int):
    """Compute ``sum(scalar_i * base_i)``.

    ``bases`` are affine points of ``curve``; ``scalars`` is one flat buffer of
    little-endian scalars, ``scalar_size`` bytes each, one per base.
    """
    if scalar_size <= 0:
        raise ValueError(f"scalar size must be positive, got {scalar_size}")
    bases = list(bases)
    data = bytes(scalars)
    n = len(bases)
    if len(data) != n * scalar_size:
        raise ValueError(
            f"expected {n * scalar_size} bytes of scalars for {n} bases, got {len(data)}"
        )

    if n == 0:
        return curve.zero()
    if n == 1:
        return curve.mul_by_scalar(bases[0], data)

    bits_per_chunk = min(
        max(log2(n // PACK_FACTOR), MIN_CHUNK_SIZE_BITS), MAX_CHUNK_SIZE_BITS
    )
    n_chunks = (scalar_size * 8 - 1) // bits_per_chunk + 1
    mask = (1 << bits_per_chunk) - 1

    pairs = [
        (base, k)
        for base, k in zip(bases, _split_scalars(data, scalar_size))
        if not curve.is_zero(base)
    ]

    chunk_results = []
    for chunk in range(n_chunks):
        shift = chunk * bits_per_chunk
        buckets = [curve.zero()] * (mask + 1)
        for base, k in pairs:
            value = (k >> shift) & mask
            if value:
                buckets[value] = curve.add(buckets[value], base)
        chunk_results.append(_sum_buckets(curve, buckets))

    result = chunk_results[-1]
    for partial in reversed(chunk_results[:-1]):
        for _ in range(bits_per_chunk):
            result = curve.dbl(result)
        result = curve.add(result, partial)
    return result