[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zkprims"
version = "0.1.0"
description = "Zero-knowledge proofs, commitments, secret sharing and two-party protocols over the Ristretto group"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "zero-knowledge",
    "sigma-protocol",
    "pedersen",
    "secret-sharing",
    "feldman",
    "ristretto",
    "merkle-tree",
    "diffie-hellman",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zkprims"]

[tool.pytest.ini_options]
addopts = "-ra"
