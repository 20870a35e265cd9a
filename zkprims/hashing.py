"""Hashing helpers that absorb big integers, points and scalars."""

from __future__ import annotations

import hashlib
import hmac
from typing import Any, Callable, Iterable, Union

from .errors import MacError
from .ristretto import SECRET_KEY_SIZE, Point, Scalar
from .errors import DeserializationError

HashAlgorithm = Union[str, Callable[[], Any]]

DEFAULT_HASH = "sha256"


def bigint_to_bytes(n: int) -> bytes:
    """Minimal big-endian bytes of |n|; zero gives no bytes."""
    n = abs(n)
    return n.to_bytes((n.bit_length() + 7) // 8, "big")


def bigint_from_bytes(data: bytes) -> int:
    """Interpret bytes as an unsigned big-endian integer."""
    return int.from_bytes(data, "big")


def _new_hash(algorithm: HashAlgorithm) -> Any:
    if callable(algorithm):
        return algorithm()
    return hashlib.new(algorithm)


def digest_bigint(data: bytes, algorithm: HashAlgorithm = DEFAULT_HASH) -> int:
    """Hash bytes and return the digest as an integer."""
    return HashChain(algorithm).chain_bytes(data).result_bigint()


class HashChain:
    """A running hash that accepts integers, points and scalars."""

    def __init__(self, algorithm: HashAlgorithm = DEFAULT_HASH) -> None:
        self.algorithm = algorithm
        self._state = _new_hash(algorithm)
        if self._state.digest_size == 0:
            raise ValueError("hash algorithm must have a fixed output size")

    @property
    def digest_size(self) -> int:
        return self._state.digest_size

    def copy(self) -> HashChain:
        clone = HashChain.__new__(HashChain)
        clone.algorithm = self.algorithm
        clone._state = self._state.copy()
        return clone

    def input_bigint(self, n: int) -> None:
        self._state.update(bigint_to_bytes(n))

    def input_point(self, point: Point) -> None:
        self._state.update(point.to_bytes(False))

    def input_scalar(self, scalar: Scalar) -> None:
        self._state.update(bigint_to_bytes(scalar.to_int()))

    def chain_bytes(self, data: bytes) -> HashChain:
        self._state.update(data)
        return self

    def chain_bigint(self, n: int) -> HashChain:
        self.input_bigint(n)
        return self

    def chain_point(self, point: Point) -> HashChain:
        self.input_point(point)
        return self

    def chain_points(self, points: Iterable[Point]) -> HashChain:
        for point in points:
            self.input_point(point)
        return self

    def chain_scalar(self, scalar: Scalar) -> HashChain:
        self.input_scalar(scalar)
        return self

    def chain_scalars(self, scalars: Iterable[Scalar]) -> HashChain:
        for scalar in scalars:
            self.input_scalar(scalar)
        return self

    def result_bytes(self) -> bytes:
        return self._state.copy().digest()

    def result_bigint(self) -> int:
        return bigint_from_bytes(self.result_bytes())

    def result_scalar(self) -> Scalar:
        """Derive a scalar by hashing with an incrementing 32-bit counter until one is canonical."""
        if self.digest_size < SECRET_KEY_SIZE:
            raise ValueError(
                f"Output size of the hash({self.digest_size}) is smaller than "
                f"the scalar length({SECRET_KEY_SIZE})"
            )
        for counter in range(2**32):
            state = self._state.copy()
            state.update(counter.to_bytes(4, "big"))
            try:
                return Scalar.from_bytes(state.digest()[:SECRET_KEY_SIZE])
            except DeserializationError:
                continue
        raise RuntimeError("no valid scalar found for any counter value")


class HmacChain:
    """An HMAC keyed and fed with big integers."""

    def __init__(self, key: int, algorithm: HashAlgorithm = DEFAULT_HASH) -> None:
        self._mac = hmac.new(bigint_to_bytes(key), digestmod=algorithm)

    def input_bigint(self, n: int) -> None:
        self._mac.update(bigint_to_bytes(n))

    def chain_bigint(self, n: int) -> HmacChain:
        self.input_bigint(n)
        return self

    def result_bigint(self) -> int:
        return bigint_from_bytes(self._mac.copy().digest())

    def verify_bigint(self, code: int) -> None:
        """Raise MacError unless code is the current tag."""
        size = self._mac.digest_size
        raw = bigint_to_bytes(code)
        if len(raw) > size:
            raise MacError()
        expected = bytes(size - len(raw)) + raw
        if not hmac.compare_digest(expected, self._mac.copy().digest()):
            raise MacError()