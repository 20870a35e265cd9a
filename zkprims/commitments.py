"""Hash-based and Pedersen commitments to big integers."""

from __future__ import annotations

import secrets

from .hashing import DEFAULT_HASH, HashAlgorithm, HashChain
from .ristretto import Point, Scalar

SECURITY_BITS = 256


def _sample_bits(bits: int) -> int:
    """Uniform integer in [0, 2**bits)."""
    return secrets.randbits(bits)


class HashCommitment:
    """Commitment c = H(m || r) with a 256-bit blinding factor r."""

    def __init__(self, algorithm: HashAlgorithm = DEFAULT_HASH) -> None:
        self.algorithm = algorithm

    def create_commitment_with_user_defined_randomness(
        self, message: int, blinding_factor: int
    ) -> int:
        return (
            HashChain(self.algorithm)
            .chain_bigint(message)
            .chain_bigint(blinding_factor)
            .result_bigint()
        )

    def create_commitment(self, message: int) -> tuple[int, int]:
        """Commit with a fresh random blinding factor; return (commitment, blinding)."""
        blinding_factor = _sample_bits(SECURITY_BITS)
        commitment = self.create_commitment_with_user_defined_randomness(
            message, blinding_factor
        )
        return commitment, blinding_factor


class PedersenCommitment:
    """Commitment c = m*G + r*H with G the generator and H the second base point."""

    @staticmethod
    def create_commitment_with_user_defined_randomness(
        message: int, blinding_factor: int
    ) -> Point:
        g = Point.generator()
        h = Point.base_point2()
        return g * Scalar.from_int(message) + h * Scalar.from_int(blinding_factor)

    @staticmethod
    def create_commitment(message: int) -> tuple[Point, int]:
        """Commit with a fresh random blinding factor; return (commitment, blinding)."""
        blinding_factor = _sample_bits(SECURITY_BITS)
        commitment = PedersenCommitment.create_commitment_with_user_defined_randomness(
            message, blinding_factor
        )
        return commitment, blinding_factor