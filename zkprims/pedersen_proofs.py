"""Proofs that a Pedersen commitment was formed correctly."""

from __future__ import annotations

from dataclasses import dataclass, field

from .commitments import PedersenCommitment
from .errors import ProofError
from .hashing import DEFAULT_HASH, HashAlgorithm, HashChain
from .ristretto import Point, Scalar


@dataclass(frozen=True)
class PedersenProof:
    """Proof of knowledge of (m, r) such that com = m*G + r*H."""

    e: Scalar
    a1: Point
    a2: Point
    com: Point
    z1: Scalar
    z2: Scalar
    algorithm: HashAlgorithm = field(default=DEFAULT_HASH, compare=False, repr=False)

    @staticmethod
    def _challenge(
        com: Point, a1: Point, a2: Point, algorithm: HashAlgorithm
    ) -> Scalar:
        return (
            HashChain(algorithm)
            .chain_points([Point.generator(), Point.base_point2(), com, a1, a2])
            .result_scalar()
        )

    @classmethod
    def prove(
        cls, m: Scalar, r: Scalar, algorithm: HashAlgorithm = DEFAULT_HASH
    ) -> PedersenProof:
        g = Point.generator()
        h = Point.base_point2()
        s1 = Scalar.random()
        s2 = Scalar.random()
        a1 = g * s1
        a2 = h * s2
        com = PedersenCommitment.create_commitment_with_user_defined_randomness(
            m.to_int(), r.to_int()
        )
        e = cls._challenge(com, a1, a2, algorithm)
        z1 = s1 + e * m
        z2 = s2 + e * r
        return cls(e, a1, a2, com, z1, z2, algorithm)

    def verify(self) -> None:
        """Raise ProofError unless z1*G + z2*H = A1 + A2 + e*com."""
        g = Point.generator()
        h = Point.base_point2()
        e = self._challenge(self.com, self.a1, self.a2, self.algorithm)
        lhs = g * self.z1 + h * self.z2
        rhs = self.a1 + self.a2 + self.com * e
        if lhs != rhs:
            raise ProofError()


@dataclass(frozen=True)
class PedersenBlindingProof:
    """Proof of knowledge of r such that com = m*G + r*H for a public m."""

    e: Scalar
    m: Scalar
    a: Point
    com: Point
    z: Scalar
    algorithm: HashAlgorithm = field(default=DEFAULT_HASH, compare=False, repr=False)

    @staticmethod
    def _challenge(
        com: Point, a: Point, m: Scalar, algorithm: HashAlgorithm
    ) -> Scalar:
        return (
            HashChain(algorithm)
            .chain_points([Point.generator(), Point.base_point2(), com, a])
            .chain_scalar(m)
            .result_scalar()
        )

    @classmethod
    def prove(
        cls, m: Scalar, r: Scalar, algorithm: HashAlgorithm = DEFAULT_HASH
    ) -> PedersenBlindingProof:
        h = Point.base_point2()
        s = Scalar.random()
        a = h * s
        com = PedersenCommitment.create_commitment_with_user_defined_randomness(
            m.to_int(), r.to_int()
        )
        e = cls._challenge(com, a, m, algorithm)
        z = s + e * r
        return cls(e, m, a, com, z, algorithm)

    def verify(self) -> None:
        """Raise ProofError unless z*H + e*m*G = A + e*com."""
        g = Point.generator()
        h = Point.base_point2()
        e = self._challenge(self.com, self.a, self.m, self.algorithm)
        lhs = h * self.z + (g * self.m) * e
        rhs = self.com * e + self.a
        if lhs != rhs:
            raise ProofError()