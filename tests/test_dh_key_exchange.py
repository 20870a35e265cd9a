import pytest

from zkprims.dh_key_exchange import (
    EcKeyPair,
    Party1FirstMessage,
    Party2FirstMessage,
    compute_pubkey,
)
from zkprims.ristretto import Point, Scalar


def test_dh_key_exchange_random_shares():
    msg1, kp1 = Party1FirstMessage.first()
    msg2, kp2 = Party2FirstMessage.first()
    assert compute_pubkey(kp2, msg1.public_share) == compute_pubkey(
        kp1, msg2.public_share
    )


def test_dh_key_exchange_fixed_shares():
    secret_party_1 = Scalar.from_int(1)
    msg1, kp1 = Party1FirstMessage.first_with_fixed_secret_share(secret_party_1)
    secret_party_2 = Scalar.from_int(2)
    msg2, kp2 = Party2FirstMessage.first_with_fixed_secret_share(secret_party_2)

    assert compute_pubkey(kp2, msg1.public_share) == compute_pubkey(
        kp1, msg2.public_share
    )
    assert compute_pubkey(kp2, msg1.public_share) == Point.generator() * secret_party_2


def test_message_carries_key_pair_public_share():
    msg, kp = Party1FirstMessage.first()
    assert msg.public_share == kp.public_share
    assert kp.public_share == Point.generator() * kp.secret_share


def test_fixed_secret_share_kept_in_key_pair():
    secret = Scalar.from_int(7)
    _, kp = Party2FirstMessage.first_with_fixed_secret_share(secret)
    assert kp.secret_share == secret
    assert kp.public_share == Point.generator() * 7


def test_joint_key_is_product_of_secrets():
    a = Scalar.random()
    b = Scalar.random()
    msg1, kp1 = Party1FirstMessage.first_with_fixed_secret_share(a)
    msg2, kp2 = Party2FirstMessage.first_with_fixed_secret_share(b)
    assert compute_pubkey(kp1, msg2.public_share) == Point.generator() * (a * b)


def test_different_secrets_give_different_joint_keys():
    msg1, kp1 = Party1FirstMessage.first()
    msg2, _ = Party2FirstMessage.first()
    _, other = Party2FirstMessage.first()
    assert compute_pubkey(kp1, msg2.public_share) != compute_pubkey(
        other, msg1.public_share
    ) or msg2.public_share == other.public_share


def test_key_pair_repr_hides_secret():
    kp = EcKeyPair.from_secret(Scalar.from_int(5))
    assert "secret_share" not in repr(kp)


@pytest.mark.parametrize("value", [1, 2, 3, 100])
def test_compute_pubkey_with_small_secrets(value):
    _, kp = Party1FirstMessage.first_with_fixed_secret_share(Scalar.from_int(value))
    other = Point.base_point2()
    assert compute_pubkey(kp, other) == other * value