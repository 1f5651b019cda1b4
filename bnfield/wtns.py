"""Header of a witness file stored in the sectioned container format."""

from __future__ import annotations

from dataclasses import dataclass

from .binfile import BinFile


@dataclass(frozen=True)
class WtnsHeader:
    """Element byte size, field prime and number of witness values."""

    n8: int
    prime: int
    n_vars: int


def load_header(binfile: BinFile) -> WtnsHeader:
    """Read section 1 of a witness file."""
    binfile.start_read_section(1)
    n8 = binfile.read_u32le()
    prime = int.from_bytes(binfile.read(n8), "little")
    n_vars = binfile.read_u32le()
    binfile.end_read_section()
    return WtnsHeader(n8=n8, prime=prime, n_vars=n_vars)