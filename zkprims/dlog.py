"""Schnorr proof of knowledge of a discrete logarithm, made non-interactive."""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import ProofError
from .hashing import DEFAULT_HASH, HashAlgorithm, HashChain
from .ristretto import Point, Scalar


@dataclass(frozen=True)
class DLogProof:
    """Proof that the prover knows sk with pk = sk * G."""

    pk: Point
    pk_t_rand_commitment: Point
    challenge_response: Scalar
    algorithm: HashAlgorithm = field(default=DEFAULT_HASH, compare=False, repr=False)

    @staticmethod
    def _challenge(commitment: Point, pk: Point, algorithm: HashAlgorithm) -> Scalar:
        return (
            HashChain(algorithm)
            .chain_point(commitment)
            .chain_point(Point.generator())
            .chain_point(pk)
            .result_scalar()
        )

    @classmethod
    def prove(cls, sk: Scalar, algorithm: HashAlgorithm = DEFAULT_HASH) -> DLogProof:
        generator = Point.generator()
        sk_t_rand_commitment = Scalar.random()
        pk_t_rand_commitment = generator * sk_t_rand_commitment
        pk = generator * sk
        challenge = cls._challenge(pk_t_rand_commitment, pk, algorithm)
        challenge_response = sk_t_rand_commitment - challenge * sk
        return cls(pk, pk_t_rand_commitment, challenge_response, algorithm)

    def verify(self) -> None:
        """Raise ProofError unless the proof is valid."""
        challenge = self._challenge(self.pk_t_rand_commitment, self.pk, self.algorithm)
        pk_verifier = Point.generator() * self.challenge_response + self.pk * challenge
        if pk_verifier != self.pk_t_rand_commitment:
            raise ProofError()