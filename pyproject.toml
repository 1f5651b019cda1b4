[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bnfield"
version = "0.1.0"
description = "Prime fields, the alt_bn128 curve groups, multi-scalar multiplication, FFT and zkey/wtns header readers in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["bn128", "alt_bn128", "bn254", "elliptic curve", "finite field", "groth16", "fft", "multiexp"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bnfield"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
