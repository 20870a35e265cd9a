"""Diffie-Hellman key exchange in which party 1 commits to its share and a proof of knowledge.

Party 1 sends hash commitments to P1 = x*G and to the commitment of a proof of
knowledge of x. Party 2 sends P2 = y*G with a proof of knowledge of y. Party 1
checks that proof and opens its commitments; party 2 checks the openings and
party 1's proof. The joint point is x*y*G. This prevents either party from
biasing the result.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass

from .commitments import HashCommitment
from .dh_key_exchange import EcKeyPair, compute_pubkey as _compute_pubkey
from .dlog import DLogProof
from .errors import ProofError
from .hashing import DEFAULT_HASH, HashAlgorithm, bigint_from_bytes
from .ristretto import Point, Scalar

SECURITY_BITS = 256


def _point_commitment(
    point: Point, blind_factor: int, algorithm: HashAlgorithm
) -> int:
    message = bigint_from_bytes(point.to_bytes(True))
    return HashCommitment(algorithm).create_commitment_with_user_defined_randomness(
        message, blind_factor
    )


@dataclass(frozen=True)
class CommWitness:
    """Opening of party 1's commitments."""

    pk_commitment_blind_factor: int
    zk_pok_blind_factor: int
    public_share: Point
    d_log_proof: DLogProof


@dataclass(frozen=True)
class Party1FirstMessage:
    """Party 1's hash commitments to its public share and to its proof."""

    pk_commitment: int
    zk_pok_commitment: int

    @classmethod
    def create_commitments(
        cls, algorithm: HashAlgorithm = DEFAULT_HASH
    ) -> tuple[Party1FirstMessage, CommWitness, EcKeyPair]:
        """Sample a secret share; return (message, opening, key pair)."""
        return cls.create_commitments_with_fixed_secret_share(Scalar.random(), algorithm)

    @classmethod
    def create_commitments_with_fixed_secret_share(
        cls, secret_share: Scalar, algorithm: HashAlgorithm = DEFAULT_HASH
    ) -> tuple[Party1FirstMessage, CommWitness, EcKeyPair]:
        """Use the given secret share; return (message, opening, key pair)."""
        key_pair = EcKeyPair.from_secret(secret_share)
        d_log_proof = DLogProof.prove(secret_share, algorithm)

        pk_commitment_blind_factor = secrets.randbits(SECURITY_BITS)
        pk_commitment = _point_commitment(
            key_pair.public_share, pk_commitment_blind_factor, algorithm
        )
        zk_pok_blind_factor = secrets.randbits(SECURITY_BITS)
        zk_pok_commitment = _point_commitment(
            d_log_proof.pk_t_rand_commitment, zk_pok_blind_factor, algorithm
        )
        witness = CommWitness(
            pk_commitment_blind_factor,
            zk_pok_blind_factor,
            key_pair.public_share,
            d_log_proof,
        )
        return cls(pk_commitment, zk_pok_commitment), witness, key_pair


@dataclass(frozen=True)
class Party2FirstMessage:
    """Party 2's public share with a proof of knowledge of its secret."""

    d_log_proof: DLogProof
    public_share: Point

    @classmethod
    def create(
        cls, algorithm: HashAlgorithm = DEFAULT_HASH
    ) -> tuple[Party2FirstMessage, EcKeyPair]:
        """Sample a secret share; return (message, key pair)."""
        return cls.create_with_fixed_secret_share(Scalar.random(), algorithm)

    @classmethod
    def create_with_fixed_secret_share(
        cls, secret_share: Scalar, algorithm: HashAlgorithm = DEFAULT_HASH
    ) -> tuple[Party2FirstMessage, EcKeyPair]:
        """Use the given secret share; return (message, key pair)."""
        key_pair = EcKeyPair.from_secret(secret_share)
        d_log_proof = DLogProof.prove(secret_share, algorithm)
        return cls(d_log_proof, key_pair.public_share), key_pair


@dataclass(frozen=True)
class Party1SecondMessage:
    """Party 1 opens its commitments."""

    comm_witness: CommWitness

    @classmethod
    def verify_and_decommit(
        cls, comm_witness: CommWitness, proof: DLogProof
    ) -> Party1SecondMessage:
        """Check party 2's proof, then open; raise ProofError if the proof is invalid."""
        proof.verify()
        return cls(comm_witness)


@dataclass(frozen=True)
class Party2SecondMessage:
    """Party 2's acknowledgement that party 1's openings and proof are valid."""

    @classmethod
    def verify_commitments_and_dlog_proof(
        cls,
        party_one_first_message: Party1FirstMessage,
        party_one_second_message: Party1SecondMessage,
    ) -> Party2SecondMessage:
        """Raise ProofError unless the openings match and party 1's proof is valid."""
        witness = party_one_second_message.comm_witness
        if witness.public_share.is_zero():
            raise ProofError("party 1 public share is the identity")
        algorithm = witness.d_log_proof.algorithm
        pk_ok = party_one_first_message.pk_commitment == _point_commitment(
            witness.public_share, witness.pk_commitment_blind_factor, algorithm
        )
        pok_ok = party_one_first_message.zk_pok_commitment == _point_commitment(
            witness.d_log_proof.pk_t_rand_commitment,
            witness.zk_pok_blind_factor,
            algorithm,
        )
        if not (pk_ok and pok_ok):
            raise ProofError("commitment opening does not match")
        witness.d_log_proof.verify()
        return cls()


def compute_pubkey(local_share: EcKeyPair, other_public_share: Point) -> Point:
    """Joint point: the other party's public share times the local secret."""
    return _compute_pubkey(local_share, other_public_share)