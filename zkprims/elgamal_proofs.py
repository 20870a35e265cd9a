"""Proofs that a pair of points is a valid homomorphic ElGamal encryption."""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import ProofError
from .hashing import DEFAULT_HASH, HashAlgorithm, HashChain
from .ristretto import Point, Scalar


@dataclass(frozen=True)
class HomoElGamalWitness:
    r: Scalar
    x: Scalar


@dataclass(frozen=True)
class HomoElGamalStatement:
    """Claim that D = x*H + r*Y and E = r*G."""

    G: Point
    H: Point
    Y: Point
    D: Point
    E: Point


@dataclass(frozen=True)
class HomoElGamalProof:
    T: Point
    A3: Point
    z1: Scalar
    z2: Scalar
    algorithm: HashAlgorithm = field(default=DEFAULT_HASH, compare=False, repr=False)

    @staticmethod
    def _challenge(
        t: Point, a3: Point, delta: HomoElGamalStatement, algorithm: HashAlgorithm
    ) -> Scalar:
        return (
            HashChain(algorithm)
            .chain_points([t, a3, delta.G, delta.H, delta.Y, delta.D, delta.E])
            .result_scalar()
        )

    @classmethod
    def prove(
        cls,
        witness: HomoElGamalWitness,
        statement: HomoElGamalStatement,
        algorithm: HashAlgorithm = DEFAULT_HASH,
    ) -> HomoElGamalProof:
        s1 = Scalar.random()
        s2 = Scalar.random()
        a1 = statement.H * s1
        a2 = statement.Y * s2
        a3 = statement.G * s2
        t = a1 + a2
        e = cls._challenge(t, a3, statement, algorithm)
        z1 = s1 + witness.x * e
        z2 = s2 + witness.r * e
        return cls(t, a3, z1, z2, algorithm)

    def verify(self, statement: HomoElGamalStatement) -> None:
        """Raise ProofError unless the proof holds for statement."""
        e = self._challenge(self.T, self.A3, statement, self.algorithm)
        z1h_plus_z2y = statement.H * self.z1 + statement.Y * self.z2
        t_plus_ed = self.T + statement.D * e
        z2g = statement.G * self.z2
        a3_plus_ee = self.A3 + statement.E * e
        if z1h_plus_z2y != t_plus_ed or z2g != a3_plus_ee:
            raise ProofError()


@dataclass(frozen=True)
class HomoElGamalDlogWitness:
    r: Scalar
    x: Scalar


@dataclass(frozen=True)
class HomoElGamalDlogStatement:
    """Claim that D = x*G + r*Y, E = r*G and Q = x*G."""

    G: Point
    Y: Point
    Q: Point
    D: Point
    E: Point


@dataclass(frozen=True)
class HomoElGamalDlogProof:
    A1: Point
    A2: Point
    A3: Point
    z1: Scalar
    z2: Scalar
    algorithm: HashAlgorithm = field(default=DEFAULT_HASH, compare=False, repr=False)

    @staticmethod
    def _challenge(
        a1: Point,
        a2: Point,
        a3: Point,
        delta: HomoElGamalDlogStatement,
        algorithm: HashAlgorithm,
    ) -> Scalar:
        return (
            HashChain(algorithm)
            .chain_points([a1, a2, a3, delta.G, delta.Y, delta.D, delta.E])
            .result_scalar()
        )

    @classmethod
    def prove(
        cls,
        witness: HomoElGamalDlogWitness,
        statement: HomoElGamalDlogStatement,
        algorithm: HashAlgorithm = DEFAULT_HASH,
    ) -> HomoElGamalDlogProof:
        s1 = Scalar.random()
        s2 = Scalar.random()
        a1 = statement.G * s1
        a2 = statement.Y * s2
        a3 = statement.G * s2
        e = cls._challenge(a1, a2, a3, statement, algorithm)
        z1 = s1 + e * witness.x
        z2 = s2 + e * witness.r
        return cls(a1, a2, a3, z1, z2, algorithm)

    def verify(self, statement: HomoElGamalDlogStatement) -> None:
        """Raise ProofError unless the proof holds for statement."""
        e = self._challenge(self.A1, self.A2, self.A3, statement, self.algorithm)
        z1g = statement.G * self.z1
        z2y = statement.Y * self.z2
        z2g = statement.G * self.z2
        a1_plus_eq = self.A1 + statement.Q * e
        a3_plus_ee = self.A3 + statement.E * e
        a2_plus_e_d_minus_q = self.A2 + (statement.D - statement.Q) * e
        if z1g != a1_plus_eq or z2g != a3_plus_ee or z2y != a2_plus_e_d_minus_q:
            raise ProofError()