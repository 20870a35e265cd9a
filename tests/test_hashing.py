import secrets

import pytest

from zkprims.errors import MacError
from zkprims.hashing import (
    HashChain,
    HmacChain,
    bigint_from_bytes,
    bigint_to_bytes,
    digest_bigint,
)
from zkprims.ristretto import Point, Scalar

HASHES = ["sha256", "sha512", "sha3_256", "sha3_512"]


def _hex(n):
    return format(n, "x")


def test_vector_sha256():
    assert _hex(HashChain("sha256").result_bigint()) == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )

    result = (
        HashChain("sha256")
        .chain_bigint(int("09fc1accc230a205e4a208e64a8f204291f581a12756392da4b8c0cf5ef02b95", 16))
        .result_bigint()
    )
    assert _hex(result) == "4f44c1c7fbebb6f9601829f3897bfd650c56fa07844be76489076356ac1886a4"

    result = (
        HashChain("sha256")
        .chain_bigint(int("09fc1accc230a205e4a208e64a8f2042", 16))
        .chain_bigint(int("91f581a12756392da4b8c0cf5ef02b95", 16))
        .result_bigint()
    )
    assert _hex(result) == "4f44c1c7fbebb6f9601829f3897bfd650c56fa07844be76489076356ac1886a4"

    message = int(
        "5a86b737eaea8ee976a0a24da63e7ed7eefad18a101c1211e2b3650c5187c2a8"
        "a650547208251f6d4237e661c7bf4c77f335390394c37fa1a9f9be836ac28509",
        16,
    )
    result = HashChain("sha256").chain_bigint(message).result_bigint()
    assert _hex(result) == "42e61e174fbb3897d6dd6cef3dd2802fe67b331953b06114a65c772859dfc1aa"


def test_vector_sha512():
    assert _hex(HashChain("sha512").result_bigint()) == (
        "cf83e1357eefb8bdf1542850d66d8007d620e4050b5715dc83f4a921d36ce9ce"
        "47d0d13c5d85f2b0ff8318d2877eec2f63b931bd47417a81a538327af927da3e"
    )

    expected = (
        "46e46623912b3932b8d662ab42583423843206301b58bf20ab6d76fd47f1cbbc"
        "f421df536ecd7e56db5354e7e0f98822d2129c197f6f0f222b8ec5231f3967d"
    )
    result = (
        HashChain("sha512")
        .chain_bigint(int("c1ca70ae1279ba0b918157558b4920d6b7fba8a06be515170f202fafd36fb7f7", 16))
        .chain_bigint(int("9d69fad745dba6150568db1e2b728504113eeac34f527fc82f2200b462ecbf5d", 16))
        .result_bigint()
    )
    assert _hex(result) == expected

    result = (
        HashChain("sha512")
        .chain_bigint(
            int(
                "c1ca70ae1279ba0b918157558b4920d6b7fba8a06be515170f202fafd36fb7f7"
                "9d69fad745dba6150568db1e2b728504113eeac34f527fc82f2200b462ecbf5d",
                16,
            )
        )
        .result_bigint()
    )
    assert _hex(result) == expected

    message = int(
        "fd2203e467574e834ab07c9097ae164532f24be1eb5d88f1af7748ceff0d2c67"
        "a21f4e4097f9d3bb4e9fbf97186e0db6db0100230a52b453d421f8ab9c9a6043"
        "aa3295ea20d2f06a2f37470d8a99075f1b8a8336f6228cf08b5942fc1fb4299c"
        "7d2480e8e82bce175540bdfad7752bc95b577f229515394f3ae5cec870a4b2f8",
        16,
    )
    result = HashChain("sha512").chain_bigint(message).result_bigint()
    assert _hex(result) == (
        "a21b1077d52b27ac545af63b32746c6e3c51cb0cb9f281eb9f3580a6d4996d5c"
        "9917d2a6e484627a9d5a06fa1b25327a9d710e027387fc3e07d7c4d14c6086cc"
    )


def test_digest_bigint_matches_chain():
    data = bytes.fromhex("09fc1accc230a205e4a208e64a8f2042")
    assert digest_bigint(data, "sha256") == HashChain("sha256").chain_bytes(data).result_bigint()
    assert _hex(digest_bigint(b"", "sha256")) == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_bigint_bytes_round_trip():
    n = int("09fc1accc230a205e4a208e64a8f2042", 16)
    raw = bigint_to_bytes(n)
    assert len(raw) == 16
    assert bigint_from_bytes(raw) == n
    assert bigint_to_bytes(0) == b""


@pytest.mark.parametrize("algorithm", HASHES)
def test_create_hash_from_ge(algorithm):
    generator = Point.generator()
    base_point2 = Point.base_point2()
    result1 = HashChain(algorithm).chain_point(generator).chain_point(base_point2).result_scalar()
    assert result1.to_int().bit_length() > 240
    result2 = HashChain(algorithm).chain_point(base_point2).chain_point(generator).result_scalar()
    assert result1 != result2
    result3 = HashChain(algorithm).chain_points([base_point2, generator]).result_scalar()
    assert result2 == result3


def test_result_is_repeatable():
    chain = HashChain("sha256").chain_scalar(Scalar.from_int(10))
    assert chain.result_bigint() == chain.result_bigint()
    other = HashChain("sha256").chain_scalars([Scalar.from_int(10)])
    assert other.result_bigint() == chain.result_bigint()
    assert HashChain("sha256").chain_bigint(10).result_bigint() == chain.result_bigint()


def test_result_scalar_rejects_short_hash():
    with pytest.raises(ValueError):
        HashChain("md5").result_scalar()


@pytest.mark.parametrize("algorithm", HASHES)
def test_create_hmac(algorithm):
    key = secrets.randbits(512)
    result1 = HmacChain(key, algorithm).chain_bigint(10).result_bigint()
    HmacChain(key, algorithm).chain_bigint(10).verify_bigint(result1)

    key2 = secrets.randbits(512)
    result2 = HmacChain(key2, algorithm).chain_bigint(10).result_bigint()
    assert result1 != result2

    result3 = HmacChain(key, algorithm).chain_bigint(10).chain_bigint(11).result_bigint()
    assert result1 != result3

    result4 = HmacChain(key, algorithm).chain_bigint(10).result_bigint()
    assert result1 == result4

    with pytest.raises(MacError):
        HmacChain(key, algorithm).chain_bigint(11).verify_bigint(result1)


def test_hmac_verify_rejects_oversized_code():
    mac = HmacChain(12345, "sha256").chain_bigint(10)
    with pytest.raises(MacError):
        mac.verify_bigint(1 << 300)