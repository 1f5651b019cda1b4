import struct

import pytest

from bnfield.alt_bn128 import FR_PRIME
from bnfield.binfile import BinFile
from bnfield.wtns import load_header


def _container(sections):
    out = b"wtns" + struct.pack("<II", 2, len(sections))
    for section_id, body in sections:
        out += struct.pack("<IQ", section_id, len(body)) + body
    return out


def _header_body(n8, prime, n_vars):
    return struct.pack("<I", n8) + prime.to_bytes(n8, "little") + struct.pack("<I", n_vars)


def test_header_values():
    data = _container([(1, _header_body(32, FR_PRIME, 5)), (2, bytes(5 * 32))])
    h = load_header(BinFile(data, "wtns", 2))
    assert h.n8 == 32
    assert h.prime == FR_PRIME
    assert h.n_vars == 5


def test_small_prime_width():
    data = _container([(1, _header_body(8, 18446744073709551557, 1))])
    h = load_header(BinFile(data, "wtns", 2))
    assert h.n8 == 8
    assert h.prime == 18446744073709551557
    assert h.n_vars == 1


def test_missing_header_section():
    data = _container([(2, b"")])
    with pytest.raises(KeyError):
        load_header(BinFile(data, "wtns", 2))


def test_trailing_bytes_in_header_rejected():
    data = _container([(1, _header_body(32, FR_PRIME, 5) + b"\x00")])
    with pytest.raises(ValueError):
        load_header(BinFile(data, "wtns", 2))


def test_short_header_rejected():
    data = _container([(1, _header_body(32, FR_PRIME, 5)[:-2])])
    with pytest.raises(ValueError):
        load_header(BinFile(data, "wtns", 2))