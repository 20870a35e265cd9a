"""Low degree exponent interpolation: proof that points hide evaluations of a low-degree polynomial."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .errors import ProofError
from .hashing import DEFAULT_HASH, HashAlgorithm, HashChain
from .polynomial import Polynomial
from .ristretto import Point, Scalar


class InvalidLdeiStatement(ValueError):
    """The statement is malformed or does not match the witness."""

    ALPHA_NOT_PAIRWISE_DISTINCT = "`alpha`s are not pairwise distinct"
    ALPHA_LENGTH_DOESNT_MATCH_G = "alpha.len() != g.len()"
    POLYNOMIAL_DEGREE_MORE_THAN_D = "deg(w) > d"
    LIST_OF_X_DOESNT_MATCH_EXPECTED_VALUE = "`statement.x` doesn't match expected value"

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


@dataclass(frozen=True)
class LdeiWitness:
    """The prover's secret polynomial w(x)."""

    w: Polynomial


def _pairwise_distinct(values: Sequence[Scalar]) -> bool:
    return len(set(values)) == len(values)


def _check(witness: LdeiWitness, alpha: Sequence[Scalar], g: Sequence[Point], d: int) -> None:
    if len(g) != len(alpha):
        raise InvalidLdeiStatement(InvalidLdeiStatement.ALPHA_LENGTH_DOESNT_MATCH_G)
    if witness.w.degree() > d:
        raise InvalidLdeiStatement(InvalidLdeiStatement.POLYNOMIAL_DEGREE_MORE_THAN_D)
    if not _pairwise_distinct(alpha):
        raise InvalidLdeiStatement(InvalidLdeiStatement.ALPHA_NOT_PAIRWISE_DISTINCT)


def _exponents(poly: Polynomial, alpha: Sequence[Scalar], g: Sequence[Point]) -> list[Point]:
    return [g_i * poly.evaluate(a_i) for g_i, a_i in zip(g, alpha)]


@dataclass(frozen=True)
class LdeiStatement:
    """Claim that x[i] = g[i] * w(alpha[i]) for a polynomial w with deg(w) <= d."""

    alpha: list[Scalar]
    g: list[Point]
    x: list[Point]
    d: int

    @classmethod
    def create(
        cls,
        witness: LdeiWitness,
        alpha: Sequence[Scalar],
        g: Sequence[Point],
        d: int,
    ) -> LdeiStatement:
        """Build the statement, computing x[i] = g[i] * w(alpha[i])."""
        alpha = list(alpha)
        g = list(g)
        _check(witness, alpha, g, d)
        return cls(alpha, g, _exponents(witness.w, alpha, g), d)


def _challenge(
    statement: LdeiStatement, a: Sequence[Point], algorithm: HashAlgorithm
) -> Scalar:
    return (
        HashChain(algorithm)
        .chain_points(statement.g)
        .chain_points(statement.x)
        .chain_points(a)
        .result_scalar()
    )


@dataclass(frozen=True)
class LdeiProof:
    """Proof (a_1..a_m, e, z) for an LdeiStatement."""

    a: list[Point]
    e: Scalar
    z: Polynomial
    algorithm: HashAlgorithm = field(default=DEFAULT_HASH, compare=False, repr=False)

    @classmethod
    def prove(
        cls,
        witness: LdeiWitness,
        statement: LdeiStatement,
        algorithm: HashAlgorithm = DEFAULT_HASH,
    ) -> LdeiProof:
        """Prove the statement; raise InvalidLdeiStatement if it does not match the witness."""
        _check(witness, statement.alpha, statement.g, statement.d)
        if list(statement.x) != _exponents(witness.w, statement.alpha, statement.g):
            raise InvalidLdeiStatement(
                InvalidLdeiStatement.LIST_OF_X_DOESNT_MATCH_EXPECTED_VALUE
            )
        u = Polynomial.sample_exact(statement.d)
        a = _exponents(u, statement.alpha, statement.g)
        e = _challenge(statement, a, algorithm)
        z = u - witness.w * e
        return cls(a, e, z, algorithm)

    def verify(self, statement: LdeiStatement) -> None:
        """Raise ProofError unless the proof holds for statement."""
        e = _challenge(statement, self.a, self.algorithm)
        if e != self.e:
            raise ProofError()
        if self.z.degree() > statement.d:
            raise ProofError()
        expected_a = [
            g_i * self.z.evaluate(a_i) + x_i * e
            for g_i, a_i, x_i in zip(statement.g, statement.alpha, statement.x)
        ]
        if list(self.a) != expected_a:
            raise ProofError()