"""Header of a Groth16 proving key stored in the sectioned container format."""

from __future__ import annotations

from dataclasses import dataclass

from .binfile import BinFile

GROTH16_PROTOCOL = 1


@dataclass(frozen=True)
class ZKeyHeader:
    """Sizes, primes and verification-key points read from sections 1, 2 and 4."""

    n8q: int
    q_prime: int
    n8r: int
    r_prime: int
    n_vars: int
    n_public: int
    domain_size: int
    n_coefs: int
    vk_alpha1: bytes
    vk_beta1: bytes
    vk_beta2: bytes
    vk_gamma2: bytes
    vk_delta1: bytes
    vk_delta2: bytes


def load_header(binfile: BinFile) -> ZKeyHeader:
    """Read the header of a zkey file; raises ValueError unless it is Groth16."""
    binfile.start_read_section(1)
    protocol = binfile.read_u32le()
    if protocol != GROTH16_PROTOCOL:
        raise ValueError("zkey file is not groth16")
    binfile.end_read_section()

    binfile.start_read_section(2)
    n8q = binfile.read_u32le()
    q_prime = int.from_bytes(binfile.read(n8q), "little")
    n8r = binfile.read_u32le()
    r_prime = int.from_bytes(binfile.read(n8r), "little")
    n_vars = binfile.read_u32le()
    n_public = binfile.read_u32le()
    domain_size = binfile.read_u32le()
    vk_alpha1 = binfile.read(n8q * 2)
    vk_beta1 = binfile.read(n8q * 2)
    vk_beta2 = binfile.read(n8q * 4)
    vk_gamma2 = binfile.read(n8q * 4)
    vk_delta1 = binfile.read(n8q * 2)
    vk_delta2 = binfile.read(n8q * 4)
    binfile.end_read_section()

    n_coefs = binfile.get_section_size(4) // (12 + n8r)

    return ZKeyHeader(
        n8q=n8q,
        q_prime=q_prime,
        n8r=n8r,
        r_prime=r_prime,
        n_vars=n_vars,
        n_public=n_public,
        domain_size=domain_size,
        n_coefs=n_coefs,
        vk_alpha1=vk_alpha1,
        vk_beta1=vk_beta1,
        vk_beta2=vk_beta2,
        vk_gamma2=vk_gamma2,
        vk_delta1=vk_delta1,
        vk_delta2=vk_delta2,
    )