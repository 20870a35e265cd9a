"""Feldman verifiable secret sharing with a discrete-log proof of the secret."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from functools import reduce
from typing import Iterable, Iterator, overload

from .dlog import DLogProof
from .errors import ProofError, VerifyShareError
from .hashing import DEFAULT_HASH, HashAlgorithm
from .polynomial import Polynomial
from .ristretto import Point, Scalar

MAX_INDEX = 2**16 - 1


@dataclass(frozen=True)
class ShamirSecretSharing:
    """Parameters of a (t, n) sharing: any t + 1 of n shares recover the secret."""

    threshold: int
    share_count: int


class SecretShares(Sequence):
    """Shares produced by VerifiableSS.share, with the polynomial behind them.

    The shares are secret, so the representation does not show them.
    """

    __slots__ = ("_shares", "_polynomial")

    def __init__(self, shares: Iterable[Scalar], polynomial: Polynomial) -> None:
        self._shares = list(shares)
        self._polynomial = polynomial

    @property
    def polynomial(self) -> Polynomial:
        """Polynomial that was used to derive the shares."""
        return self._polynomial

    @overload
    def __getitem__(self, index: int) -> Scalar: ...

    @overload
    def __getitem__(self, index: slice) -> list[Scalar]: ...

    def __getitem__(self, index):
        return self._shares[index]

    def __len__(self) -> int:
        return len(self._shares)

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._shares)

    def __repr__(self) -> str:
        return "SecretShares{ ... }"


def _check_index(index: int) -> int:
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError("share index must be an integer")
    if not 1 <= index <= MAX_INDEX:
        raise ValueError(f"share index must be between 1 and {MAX_INDEX}")
    return index


def _commit(polynomial: Polynomial) -> list[Point]:
    g = Point.generator()
    return [g * coef for coef in polynomial.coefficients]


@dataclass(frozen=True)
class VerifiableSS:
    """Public part of a Feldman sharing: parameters, coefficient commitments, proof."""

    parameters: ShamirSecretSharing
    commitments: list[Point]
    proof: DLogProof

    def reconstruct_limit(self) -> int:
        """Number of shares needed to reconstruct the secret."""
        return self.parameters.threshold + 1

    @classmethod
    def share(
        cls,
        t: int,
        n: int,
        secret: Scalar,
        algorithm: HashAlgorithm = DEFAULT_HASH,
    ) -> tuple[VerifiableSS, SecretShares]:
        """Share secret among parties 1..n with threshold t."""
        if not t < n:
            raise ValueError("threshold must be smaller than the share count")
        polynomial = Polynomial.sample_exact_with_fixed_const_term(t, secret)
        shares = list(polynomial.evaluate_many_bigint(range(1, n + 1)))
        vss = cls(
            ShamirSecretSharing(t, n),
            _commit(polynomial),
            DLogProof.prove(secret, algorithm),
        )
        return vss, SecretShares(shares, polynomial)

    def reshare(self) -> tuple[VerifiableSS, list[Scalar]]:
        """New commitments for the same secret plus shares of zero to add to the old ones."""
        t = self.parameters.threshold
        n = self.parameters.share_count
        one = Scalar.from_int(1)
        poly = Polynomial.sample_exact_with_fixed_const_term(t, one)
        secret_shares = [share - one for share in poly.evaluate_many_bigint(range(1, n + 1))]
        g = Point.generator()
        new_commitments = [self.commitments[0]]
        new_commitments.extend(
            g * coef + commitment
            for coef, commitment in list(zip(poly.coefficients, self.commitments))[1:]
        )
        return (
            VerifiableSS(self.parameters, new_commitments, self.proof),
            secret_shares,
        )

    @classmethod
    def share_at_indices(
        cls,
        t: int,
        n: int,
        secret: Scalar,
        indices: Iterable[int],
        algorithm: HashAlgorithm = DEFAULT_HASH,
    ) -> tuple[VerifiableSS, SecretShares]:
        """Share secret, evaluating the polynomial at the given non-zero indices."""
        points = [_check_index(i) for i in indices]
        if len(points) != n:
            raise ValueError("number of indices must equal the share count")
        polynomial = Polynomial.sample_exact_with_fixed_const_term(t, secret)
        shares = list(polynomial.evaluate_many_bigint(points))
        vss = cls(
            ShamirSecretSharing(t, n),
            _commit(polynomial),
            DLogProof.prove(secret, algorithm),
        )
        return vss, SecretShares(shares, polynomial)

    def reconstruct(self, indices: Sequence[int], shares: Sequence[Scalar]) -> Scalar:
        """Recover the secret from shares held by parties at zero-based indices."""
        if len(shares) != len(indices):
            raise ValueError("indices and shares must have the same length")
        if len(shares) < self.reconstruct_limit():
            raise ValueError("not enough shares to reconstruct the secret")
        points = [Scalar.from_int(i + 1) for i in indices]
        return self.lagrange_interpolation_at_zero(points, shares)

    @staticmethod
    def lagrange_interpolation_at_zero(
        points: Sequence[Scalar], values: Sequence[Scalar]
    ) -> Scalar:
        """Value at zero of the polynomial through (points[i], values[i])."""
        if len(points) != len(values):
            raise ValueError("points and values must have the same length")
        if not values:
            raise ValueError("at least one point is required")
        one = Scalar.from_int(1)
        terms = []
        for i, (xi, yi) in enumerate(zip(points, values)):
            others = [x for j, x in enumerate(points) if j != i]
            num = reduce(lambda acc, x: acc * x, others, one)
            denum = reduce(lambda acc, x: acc * (x - xi), others, one)
            try:
                inverse = denum.invert()
            except ZeroDivisionError:
                raise ValueError("points are not pairwise distinct") from None
            terms.append(num * inverse * yi)
        return reduce(lambda acc, term: acc + term, terms[1:], terms[0])

    def validate_share(self, secret_share: Scalar, index: int) -> None:
        """Raise VerifyShareError unless secret_share is party index's share."""
        if self.commitments[0] != self.proof.pk:
            raise VerifyShareError()
        try:
            self.proof.verify()
        except ProofError:
            raise VerifyShareError() from None
        self.validate_share_public(Point.generator() * secret_share, index)

    def validate_share_public(self, ss_point: Point, index: int) -> None:
        """Raise VerifyShareError unless ss_point is share * G for party index."""
        if ss_point != self.get_point_commitment(index):
            raise VerifyShareError()

    def get_point_commitment(self, index: int) -> Point:
        """Commitment to the share of party index: sum of C_i * index^i."""
        if not self.commitments:
            raise ValueError("no commitments")
        index_fe = Scalar.from_int(index)
        head, *tail = reversed(self.commitments)
        return reduce(lambda acc, c: c + acc * index_fe, tail, head)

    @staticmethod
    def map_share_to_new_params(
        params: ShamirSecretSharing, index: int, s: Sequence[int]
    ) -> Scalar:
        """Lagrange coefficient turning a (t, n) share into a (|s|, |s|) one."""
        j = next((pos for pos, s_j in enumerate(s) if s_j == index), None)
        if j is None:
            raise ValueError("`s` doesn't include `index`")
        xs = [Scalar.from_int(x + 1) for x in s]
        return Polynomial.lagrange_basis(Scalar.zero(), j, xs)