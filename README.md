# bnfield

Pure-Python arithmetic for the alt_bn128 (BN254) curve and the pieces around
it that a zk-SNARK prover works with. It has no dependencies outside the
standard library.

## Modules

- `bnfield.field.PrimeField(prime)`: arithmetic modulo a prime. Elements are
  plain integers in `range(prime)`. Besides `add`, `sub`, `neg`, `mul`,
  `square`, `inv`, `div` and `pow`, it has the integer helpers `idiv`, `mod`,
  `shl` and `shr`, conversion to and from Montgomery form
  (`to_montgomery`, `from_montgomery`, with `R = 2**(64 * n64)`), little-endian
  bytes (`to_bytes`, `from_bytes`) and strings in any radix from 2 to 36
  (`from_string`, `to_string`). `inv` raises `ZeroDivisionError` for zero.
- `bnfield.f2field.F2Field(base, nr)`: the quadratic extension
  `F[u] / (u^2 - nr)`. Elements are tuples `(a, b)` meaning `a + b*u`.
  `from_string("(a, b)")` parses a pair and raises `ValueError` unless it has
  exactly two parts.
- `bnfield.splitparstr.split_par_str(s)`: splits a string on top-level commas,
  dropping whitespace and enclosing parentheses, so `"(((1,2),(3,4)))"` gives
  `["1,2", "3,4"]`.
- `bnfield.curve`: `Curve(field, a, b, gx, gy)` (or `Curve.from_strings`) for
  `y^2 = x^3 + a*x + b`, with frozen `Point` (XYZZ projective coordinates) and
  `PointAffine` (where `(0, 0)` is infinity). `add`, `sub`, `dbl`, `neg`, `eq`,
  `is_zero`, `to_affine`, `to_point`, `to_string` and `mul_by_scalar` accept
  either kind of point. Operation counts are read with `counters()` and
  cleared with `reset_counters()`.
- `bnfield.naf`: `build_naf(scalar)` gives the non-adjacent form digits
  (-1, 0, 1) of a little-endian byte scalar; `naf_mul_by_scalar(group, base,
  scalar)` is the double-and-add multiplication used by `Curve.mul_by_scalar`.
- `bnfield.multiexp.multi_mul_by_scalar(curve, bases, scalars, scalar_size)`:
  computes `sum(k_i * base_i)` with the bucket method; `scalars` is one flat
  byte string of little-endian scalars, `scalar_size` bytes each.
- `bnfield.fft`: `FFT(field, max_domain_size)` with `fft(values)` and
  `ifft(values)`, which take a power-of-two length sequence and return a new
  list; `bit_reverse(x, domain_pow)` is the index permutation it uses.
- `bnfield.alt_bn128`: `Engine()` holds `f1`, `f2`, `fr`, `g1` and `g2`; the
  module also exposes a shared `ENGINE` and the names `F1`, `F2`, `Fr`, `G1`,
  `G2`, plus the primes `FQ_PRIME` and `FR_PRIME`.
- `bnfield.binfile`: `BinFile(data, file_type, max_version)` parses the
  sectioned container (four-character type, u32 version, sections of u32 id
  and u64 length) held in memory; `open_existing(filename, file_type,
  max_version)` reads it from disk.
- `bnfield.zkey.load_header(binfile)` returns a `ZKeyHeader` for a Groth16
  proving key; `bnfield.wtns.load_header(binfile)` returns a `WtnsHeader`.

## Installation

    pip install .

For the test suite:

    pip install ".[test]"
    pytest

## Example

    from bnfield.alt_bn128 import Engine

    engine = Engine()
    g1 = engine.g1

    three_g = g1.mul_by_scalar(g1.one(), (3).to_bytes(32, "little"))
    same = g1.add(g1.add(g1.one(), g1.one()), g1.one())
    assert g1.eq(three_g, same)
    print(g1.to_string(three_g, 10))

Scalars are little-endian byte strings, as in `.zkey` and `.wtns` files;
`mul_by_scalar` also accepts a non-negative `int`.

Reading the header of a proving key:

    from bnfield.binfile import open_existing
    from bnfield.zkey import load_header

    binfile = open_existing("circuit.zkey", "zkey", 1)
    header = load_header(binfile)
    print(header.n_vars, header.domain_size)

## What it does not do

- There is no command-line tool; everything is used from Python.
- There are no pairings and no proof generation or verification.
- Of `.zkey` and `.wtns` files only the headers are decoded; other sections
  are available as raw bytes through `BinFile.get_section_data`.
- All work runs in a single thread, in pure Python, so it is far slower than
  native implementations on large inputs.