"""Chaum-Pedersen proof that two pairs of points share one discrete logarithm."""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import ProofError
from .hashing import DEFAULT_HASH, HashAlgorithm, HashChain
from .ristretto import Point, Scalar


@dataclass(frozen=True)
class ECDDHStatement:
    """Claim that h1 = x*g1 and h2 = x*g2 for one x."""

    g1: Point
    h1: Point
    g2: Point
    h2: Point


@dataclass(frozen=True)
class ECDDHWitness:
    x: Scalar


@dataclass(frozen=True)
class ECDDHProof:
    a1: Point
    a2: Point
    z: Scalar
    algorithm: HashAlgorithm = field(default=DEFAULT_HASH, compare=False, repr=False)

    @staticmethod
    def _challenge(
        statement: ECDDHStatement, a1: Point, a2: Point, algorithm: HashAlgorithm
    ) -> Scalar:
        return (
            HashChain(algorithm)
            .chain_points(
                [statement.g1, statement.h1, statement.g2, statement.h2, a1, a2]
            )
            .result_scalar()
        )

    @classmethod
    def prove(
        cls,
        witness: ECDDHWitness,
        statement: ECDDHStatement,
        algorithm: HashAlgorithm = DEFAULT_HASH,
    ) -> ECDDHProof:
        s = Scalar.random()
        a1 = statement.g1 * s
        a2 = statement.g2 * s
        e = cls._challenge(statement, a1, a2, algorithm)
        z = s + e * witness.x
        return cls(a1, a2, z, algorithm)

    def verify(self, statement: ECDDHStatement) -> None:
        """Raise ProofError unless the proof holds for statement."""
        e = self._challenge(statement, self.a1, self.a2, self.algorithm)
        z_g1 = statement.g1 * self.z
        z_g2 = statement.g2 * self.z
        if z_g1 != self.a1 + statement.h1 * e or z_g2 != self.a2 + statement.h2 * e:
            raise ProofError()