"""Constant-round two-party coin tossing built on Pedersen commitment proofs."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ProofError
from .hashing import DEFAULT_HASH, HashAlgorithm
from .pedersen_proofs import PedersenBlindingProof, PedersenProof
from .ristretto import Point, Scalar


def _xor(a: Scalar, b: Scalar) -> Scalar:
    return Scalar.from_int(a.to_int() ^ b.to_int())


@dataclass(frozen=True)
class Party1FirstMessage:
    """Party 1 commits to its seed."""

    proof: PedersenProof

    @classmethod
    def commit(
        cls, algorithm: HashAlgorithm = DEFAULT_HASH
    ) -> tuple[Party1FirstMessage, Scalar, Scalar]:
        """Return (message, seed, blinding)."""
        seed = Scalar.random()
        blinding = Scalar.random()
        proof = PedersenProof.prove(seed, blinding, algorithm)
        return cls(proof), seed, blinding


@dataclass(frozen=True)
class Party2FirstMessage:
    """Party 2 answers with its own seed."""

    seed: Scalar

    @classmethod
    def share(cls, proof: PedersenProof) -> Party2FirstMessage:
        """Check party 1's commitment proof and sample a seed; raise ProofError if invalid."""
        proof.verify()
        return cls(Scalar.random())


@dataclass(frozen=True)
class Party1SecondMessage:
    """Party 1 opens its seed."""

    proof: PedersenBlindingProof
    seed: Scalar

    @classmethod
    def reveal(
        cls,
        party2seed: Scalar,
        party1seed: Scalar,
        party1blinding: Scalar,
        algorithm: HashAlgorithm = DEFAULT_HASH,
    ) -> tuple[Party1SecondMessage, Scalar]:
        """Return (message, coin flip result)."""
        proof = PedersenBlindingProof.prove(party1seed, party1blinding, algorithm)
        return cls(proof, party1seed), _xor(party1seed, party2seed)


def finalize(
    proof: PedersenBlindingProof, party2seed: Scalar, party1comm: Point
) -> Scalar:
    """Party 2 checks the opening against the commitment and computes the result."""
    proof.verify()
    if proof.com != party1comm:
        raise ProofError("opening does not match party 1's commitment")
    return _xor(proof.m, party2seed)