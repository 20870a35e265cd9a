"""Elliptic-curve Diffie-Hellman key exchange between two parties.

Party 1 picks a secret a and sends A = a*G; party 2 picks b and sends B = b*G.
Both can then compute the joint point a*B = b*A = a*b*G.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .ristretto import Point, Scalar


@dataclass(frozen=True)
class EcKeyPair:
    """A party's key pair; the secret share is kept out of the representation."""

    public_share: Point
    secret_share: Scalar = field(repr=False)

    @classmethod
    def from_secret(cls, secret_share: Scalar) -> EcKeyPair:
        """Key pair whose public share is secret_share * G."""
        return cls(Point.generator() * secret_share, secret_share)


@dataclass(frozen=True)
class Party1FirstMessage:
    """Party 1 announces its public share."""

    public_share: Point

    @classmethod
    def first(cls) -> tuple[Party1FirstMessage, EcKeyPair]:
        """Sample a random secret share; return (message, key pair)."""
        return cls.first_with_fixed_secret_share(Scalar.random())

    @classmethod
    def first_with_fixed_secret_share(
        cls, secret_share: Scalar
    ) -> tuple[Party1FirstMessage, EcKeyPair]:
        """Use the given secret share; return (message, key pair)."""
        key_pair = EcKeyPair.from_secret(secret_share)
        return cls(key_pair.public_share), key_pair


@dataclass(frozen=True)
class Party2FirstMessage:
    """Party 2 announces its public share."""

    public_share: Point

    @classmethod
    def first(cls) -> tuple[Party2FirstMessage, EcKeyPair]:
        """Sample a random secret share; return (message, key pair)."""
        return cls.first_with_fixed_secret_share(Scalar.random())

    @classmethod
    def first_with_fixed_secret_share(
        cls, secret_share: Scalar
    ) -> tuple[Party2FirstMessage, EcKeyPair]:
        """Use the given secret share; return (message, key pair)."""
        key_pair = EcKeyPair.from_secret(secret_share)
        return cls(key_pair.public_share), key_pair


def compute_pubkey(local_share: EcKeyPair, other_public_share: Point) -> Point:
    """Joint point: the other party's public share times the local secret."""
    return other_public_share * local_share.secret_share