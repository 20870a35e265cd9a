"""Polynomials over the scalar field, as used for secret sharing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import reduce
from itertools import zip_longest
from typing import Iterable, Iterator, Sequence, Union

from .ristretto import Scalar

INFINITY = math.inf
"""Degree of the zero polynomial."""

MAX_DEGREE = 2**16 - 1

Degree = Union[int, float]


def _product(values: Iterable[Scalar]) -> Scalar:
    return reduce(lambda acc, value: acc * value, values, Scalar.from_int(1))


@dataclass(frozen=True)
class Polynomial:
    """f(x) = a_0 + a_1 x + ... + a_n x^n with coefficients a_i in Z_q.

    Trailing zero coefficients are allowed; the degree is the index of the
    last non-zero coefficient, or INFINITY if all coefficients are zero.
    """

    coefficients: tuple[Scalar, ...]

    def __init__(self, coefficients: Iterable[Scalar]) -> None:
        object.__setattr__(self, "coefficients", tuple(coefficients))

    @classmethod
    def sample_exact(cls, degree: Degree) -> Polynomial:
        """Random polynomial of the given degree; INFINITY gives the zero polynomial."""
        if degree == INFINITY:
            return cls([])
        degree = _check_degree(degree)
        return cls(Scalar.random() for _ in range(degree + 1))

    @classmethod
    def sample_exact_with_fixed_const_term(
        cls, n: int, const_term: Scalar
    ) -> Polynomial:
        """Random polynomial of degree n whose constant term is const_term."""
        n = _check_degree(n)
        return cls([const_term, *(Scalar.random() for _ in range(n))])

    def degree(self) -> Degree:
        """Index of the last non-zero coefficient, or INFINITY."""
        for i in reversed(range(len(self.coefficients))):
            if not self.coefficients[i].is_zero():
                return i
        return INFINITY

    def evaluate(self, x: Scalar) -> Scalar:
        """Compute f(x) by Horner's rule."""
        if not self.coefficients:
            raise ValueError("polynomial has no coefficients to evaluate")
        head, *tail = reversed(self.coefficients)
        return reduce(lambda partial, coef: partial * x + coef, tail, head)

    def evaluate_bigint(self, x: int) -> Scalar:
        """Compute f(x) for an integer x."""
        return self.evaluate(Scalar.from_int(x))

    def evaluate_many(self, xs: Iterable[Scalar]) -> Iterator[Scalar]:
        """Yield f(x) for each x."""
        return (self.evaluate(x) for x in xs)

    def evaluate_many_bigint(self, xs: Iterable[int]) -> Iterator[Scalar]:
        """Yield f(x) for each integer x."""
        return (self.evaluate_bigint(x) for x in xs)

    @staticmethod
    def lagrange_basis(x: Scalar, j: int, xs: Sequence[Scalar]) -> Scalar:
        """Evaluate the j-th Lagrange basis polynomial for nodes xs at x."""
        x_j = xs[j]
        others = [x_m for m, x_m in enumerate(xs) if m != j]
        num = _product(x - x_m for x_m in others)
        denum = _product(x_j - x_m for x_m in others)
        try:
            inverse = denum.invert()
        except ZeroDivisionError:
            raise ValueError("elements in xs are not pairwise distinct") from None
        return num * inverse

    def __mul__(self, scalar: object) -> Polynomial:
        if not isinstance(scalar, Scalar):
            return NotImplemented
        return Polynomial(c * scalar for c in self.coefficients)

    __rmul__ = __mul__

    def __add__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(
            _sum_pair(f, g)
            for f, g in zip_longest(self.coefficients, other.coefficients)
        )

    def __sub__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(
            _diff_pair(f, g)
            for f, g in zip_longest(self.coefficients, other.coefficients)
        )


def _sum_pair(f: Scalar | None, g: Scalar | None) -> Scalar:
    if f is None:
        return g  # type: ignore[return-value]
    if g is None:
        return f
    return f + g


def _diff_pair(f: Scalar | None, g: Scalar | None) -> Scalar:
    if f is None:
        return -g  # type: ignore[operator]
    if g is None:
        return f
    return f - g


def _check_degree(degree: Degree) -> int:
    if isinstance(degree, bool) or not isinstance(degree, int):
        raise TypeError("degree must be an integer or INFINITY")
    if not 0 <= degree <= MAX_DEGREE:
        raise ValueError(f"degree must be between 0 and {MAX_DEGREE}")
    return degree