import dataclasses

import pytest

from zkprims.commitments import HashCommitment
from zkprims.dh_pok import (
    CommWitness,
    Party1FirstMessage,
    Party1SecondMessage,
    Party2FirstMessage,
    Party2SecondMessage,
    compute_pubkey,
)
from zkprims.errors import ProofError
from zkprims.hashing import bigint_from_bytes
from zkprims.ristretto import Point, Scalar


def _run(algorithm="sha256"):
    msg1, witness, kp1 = Party1FirstMessage.create_commitments(algorithm)
    msg2, kp2 = Party2FirstMessage.create(algorithm)
    second1 = Party1SecondMessage.verify_and_decommit(witness, msg2.d_log_proof)
    return msg1, witness, kp1, msg2, kp2, second1


@pytest.mark.parametrize("algorithm", ["sha256", "sha512"])
def test_dh_key_exchange(algorithm):
    msg1, _, kp1, msg2, kp2, second1 = _run(algorithm)
    ack = Party2SecondMessage.verify_commitments_and_dlog_proof(msg1, second1)
    assert ack == Party2SecondMessage()
    assert compute_pubkey(kp2, second1.comm_witness.public_share) == compute_pubkey(
        kp1, msg2.public_share
    )


def test_fixed_secret_shares_give_expected_joint_key():
    a = Scalar.from_int(3)
    b = Scalar.from_int(5)
    msg1, witness, kp1 = Party1FirstMessage.create_commitments_with_fixed_secret_share(a)
    msg2, kp2 = Party2FirstMessage.create_with_fixed_secret_share(b)
    assert witness.public_share == Point.generator() * 3
    assert msg2.public_share == Point.generator() * 5
    assert compute_pubkey(kp1, msg2.public_share) == Point.generator() * 15


def test_pk_commitment_is_hash_of_public_share():
    msg1, witness, _ = Party1FirstMessage.create_commitments()
    expected = HashCommitment().create_commitment_with_user_defined_randomness(
        bigint_from_bytes(witness.public_share.to_bytes(True)),
        witness.pk_commitment_blind_factor,
    )
    assert msg1.pk_commitment == expected


def test_verify_and_decommit_rejects_bad_proof():
    _, witness, _ = Party1FirstMessage.create_commitments()
    msg2, _ = Party2FirstMessage.create()
    bad = dataclasses.replace(
        msg2.d_log_proof,
        challenge_response=msg2.d_log_proof.challenge_response + 1,
    )
    with pytest.raises(ProofError):
        Party1SecondMessage.verify_and_decommit(witness, bad)


def test_wrong_pk_blind_factor_rejected():
    msg1, witness, _, _, _, _ = _run()
    tampered = dataclasses.replace(
        witness, pk_commitment_blind_factor=witness.pk_commitment_blind_factor + 1
    )
    with pytest.raises(ProofError):
        Party2SecondMessage.verify_commitments_and_dlog_proof(
            msg1, Party1SecondMessage(tampered)
        )


def test_wrong_zk_pok_blind_factor_rejected():
    msg1, witness, _, _, _, _ = _run()
    tampered = dataclasses.replace(
        witness, zk_pok_blind_factor=witness.zk_pok_blind_factor + 1
    )
    with pytest.raises(ProofError):
        Party2SecondMessage.verify_commitments_and_dlog_proof(
            msg1, Party1SecondMessage(tampered)
        )


def test_zero_public_share_rejected():
    msg1, witness, _, _, _, _ = _run()
    tampered = dataclasses.replace(witness, public_share=Point.zero())
    with pytest.raises(ProofError):
        Party2SecondMessage.verify_commitments_and_dlog_proof(
            msg1, Party1SecondMessage(tampered)
        )


def test_swapped_public_share_rejected():
    msg1, witness, _, msg2, _, _ = _run()
    tampered = dataclasses.replace(witness, public_share=msg2.public_share)
    with pytest.raises(ProofError):
        Party2SecondMessage.verify_commitments_and_dlog_proof(
            msg1, Party1SecondMessage(tampered)
        )


def test_comm_witness_holds_dlog_proof_of_public_share():
    _, witness, kp1 = Party1FirstMessage.create_commitments()
    assert isinstance(witness, CommWitness)
    assert witness.d_log_proof.pk == kp1.public_share
    assert witness.public_share == kp1.public_share