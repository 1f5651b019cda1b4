"""Prime fields, alt_bn128 curve arithmetic, multi-scalar multiplication, FFT and zkey/wtns header readers."""

__version__ = "0.1.0"