"""The ristretto255 prime-order group built over Curve25519."""

from __future__ import annotations

import hashlib
import secrets
from typing import Optional, Union

from .errors import DeserializationError, NotOnCurve

CURVE_NAME = "ristretto"
SECRET_KEY_SIZE = 32
COOR_BYTE_SIZE = 32

_P = 2**255 - 19
_L = 2**252 + 27742317777372353535851937790883648493
_D = -121665 * pow(121666, -1, _P) % _P
_SQRT_M1 = pow(2, (_P - 1) // 4, _P)

# The ristretto encoding deliberately hides the affine x coordinate of the
# underlying Edwards point; only the canonical encoding is public.
_EXPOSES_X_COORDINATE = False


def _is_negative(x: int) -> bool:
    return (x % _P) & 1 == 1


def _abs(x: int) -> int:
    x %= _P
    return (-x) % _P if x & 1 else x


def _sqrt_ratio_m1(u: int, v: int) -> tuple[bool, int]:
    """Return (was_square, r) with r the non-negative root of u/v or of i*u/v."""
    u %= _P
    v %= _P
    v3 = v * v % _P * v % _P
    v7 = v3 * v3 % _P * v % _P
    r = u * v3 % _P * pow(u * v7 % _P, (_P - 5) // 8, _P) % _P
    check = v * r * r % _P
    correct = check == u
    flipped = check == (-u) % _P
    flipped_i = check == (-u * _SQRT_M1) % _P
    if flipped or flipped_i:
        r = r * _SQRT_M1 % _P
    return correct or flipped, _abs(r)


_, _INVSQRT_A_MINUS_D = _sqrt_ratio_m1(1, (-1 - _D) % _P)


def group_order() -> int:
    """Order of the ristretto255 group."""
    return _L


class Scalar:
    """An element of the scalar field Z_l."""

    __slots__ = ("_value",)

    def __init__(self, value: int = 0) -> None:
        self._value = int(value) % _L

    @classmethod
    def random(cls) -> Scalar:
        return cls(secrets.randbelow(_L))

    @classmethod
    def zero(cls) -> Scalar:
        return cls(0)

    @classmethod
    def from_int(cls, n: int) -> Scalar:
        """Reduce an integer modulo the group order."""
        return cls(n)

    @classmethod
    def from_bytes(cls, data: bytes) -> Scalar:
        """Decode a canonical 32-byte little-endian scalar."""
        if len(data) != SECRET_KEY_SIZE:
            raise DeserializationError("scalar must be exactly 32 bytes")
        value = int.from_bytes(data, "little")
        if value >= _L:
            raise DeserializationError("scalar is not canonical")
        return cls(value)

    def to_bytes(self) -> bytes:
        return self._value.to_bytes(SECRET_KEY_SIZE, "little")

    def to_int(self) -> int:
        return self._value

    def is_zero(self) -> bool:
        return self._value == 0

    def invert(self) -> Scalar:
        if self._value == 0:
            raise ZeroDivisionError("zero scalar has no inverse")
        return Scalar(pow(self._value, -1, _L))

    @staticmethod
    def _coerce(other: object) -> Optional[int]:
        if isinstance(other, Scalar):
            return other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def __add__(self, other: object) -> Scalar:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return Scalar(self._value + value)

    __radd__ = __add__

    def __sub__(self, other: object) -> Scalar:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return Scalar(self._value - value)

    def __rsub__(self, other: object) -> Scalar:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return Scalar(value - self._value)

    def __mul__(self, other: object) -> Scalar:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return Scalar(self._value * value)

    __rmul__ = __mul__

    def __neg__(self) -> Scalar:
        return Scalar(-self._value)

    def __int__(self) -> int:
        return self._value

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scalar):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(("ristretto-scalar", self._value))

    def __repr__(self) -> str:
        return f"Scalar(0x{self._value:064x})"


class Point:
    """A ristretto255 group element, kept in extended Edwards coordinates."""

    __slots__ = ("_x", "_y", "_z", "_t")

    def __init__(self, x: int, y: int, z: int, t: int) -> None:
        self._x = x % _P
        self._y = y % _P
        self._z = z % _P
        self._t = t % _P

    @classmethod
    def generator(cls) -> Point:
        return _GENERATOR

    @classmethod
    def base_point2(cls) -> Point:
        return _BASE_POINT2

    @classmethod
    def zero(cls) -> Point:
        return cls(0, 1, 1, 0)

    @classmethod
    def from_bytes(cls, data: bytes) -> Point:
        """Decode a point; shorter inputs are placed at the end of a 32-byte buffer."""
        n = len(data)
        if n == 0 or n > COOR_BYTE_SIZE:
            raise DeserializationError("point encoding must be 1 to 32 bytes")
        buffer = bytes(COOR_BYTE_SIZE - n) + bytes(data)
        s = int.from_bytes(buffer, "little")
        if s >= _P or _is_negative(s):
            raise DeserializationError("point encoding is not canonical")
        ss = s * s % _P
        u1 = (1 - ss) % _P
        u2 = (1 + ss) % _P
        u2_sqr = u2 * u2 % _P
        v = (-(_D * u1 * u1) - u2_sqr) % _P
        was_square, invsqrt = _sqrt_ratio_m1(1, v * u2_sqr)
        den_x = invsqrt * u2 % _P
        den_y = invsqrt * den_x % _P * v % _P
        x = _abs(2 * s * den_x)
        y = u1 * den_y % _P
        t = x * y % _P
        if not was_square or _is_negative(t) or y == 0:
            raise DeserializationError("bytes do not encode a ristretto point")
        return cls(x, y, 1, t)

    @classmethod
    def from_coords(cls, x: int, y: int) -> Point:
        """Always raises NotOnCurve: x cannot be matched against the encoding."""
        try:
            candidate = cls.from_bytes(int(y).to_bytes(COOR_BYTE_SIZE, "little"))
        except (DeserializationError, OverflowError):
            raise NotOnCurve(f"y coordinate {y:#x} does not encode a point") from None
        if candidate.x_coord() is None or candidate.x_coord() != x:
            raise NotOnCurve("x coordinate cannot be matched with the given y")
        return candidate

    def to_bytes(self, compressed: bool = True) -> bytes:
        """Canonical 32-byte encoding; compressed and uncompressed forms agree."""
        x0, y0, z0, t0 = self._x, self._y, self._z, self._t
        u1 = (z0 + y0) * (z0 - y0) % _P
        u2 = x0 * y0 % _P
        _, invsqrt = _sqrt_ratio_m1(1, u1 * u2 % _P * u2)
        den1 = invsqrt * u1 % _P
        den2 = invsqrt * u2 % _P
        z_inv = den1 * den2 % _P * t0 % _P
        if _is_negative(t0 * z_inv):
            x = y0 * _SQRT_M1 % _P
            y = x0 * _SQRT_M1 % _P
            den_inv = den1 * _INVSQRT_A_MINUS_D % _P
        else:
            x, y = x0, y0
            den_inv = den2
        if _is_negative(x * z_inv):
            y = (-y) % _P
        s = _abs(den_inv * (z0 - y))
        return s.to_bytes(COOR_BYTE_SIZE, "little")

    def is_zero(self) -> bool:
        return self._x == 0 or self._y == 0

    def x_coord(self) -> Optional[int]:
        """The x coordinate; the encoding hides it, so this is always None."""
        if not _EXPOSES_X_COORDINATE:
            return None
        return self._x * pow(self._z, -1, _P) % _P

    def y_coord(self) -> int:
        return int.from_bytes(self.to_bytes(), "little")

    def coords(self) -> Optional[tuple[int, int]]:
        """Both coordinates; None because x is never exposed."""
        x = self.x_coord()
        if x is None:
            return None
        return x, self.y_coord()

    def check_point_order_equals_group_order(self) -> bool:
        return not self.is_zero()

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        x1, y1, z1, t1 = self._x, self._y, self._z, self._t
        x2, y2, z2, t2 = other._x, other._y, other._z, other._t
        a = (y1 - x1) * (y2 - x2) % _P
        b = (y1 + x1) * (y2 + x2) % _P
        c = 2 * _D * t1 % _P * t2 % _P
        d = 2 * z1 * z2 % _P
        e, f, g, h = b - a, d - c, d + c, b + a
        return Point(e * f, g * h, f * g, e * h)

    def __neg__(self) -> Point:
        return Point(-self._x, self._y, self._z, -self._t)

    def __sub__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return self + (-other)

    def __mul__(self, scalar: Union[Scalar, int]) -> Point:
        if isinstance(scalar, Scalar):
            k = scalar.to_int()
        elif isinstance(scalar, int) and not isinstance(scalar, bool):
            k = scalar % _L
        else:
            return NotImplemented
        result = Point.zero()
        addend = self
        while k:
            if k & 1:
                result = result + addend
            addend = addend + addend
            k >>= 1
        return result

    def __rmul__(self, scalar: Union[Scalar, int]) -> Point:
        return self.__mul__(scalar)

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (self._x * other._y - self._y * other._x) % _P == 0 or (
            self._y * other._y - self._x * other._x
        ) % _P == 0

    def __hash__(self) -> int:
        return hash(("ristretto-point", self.to_bytes()))

    def __repr__(self) -> str:
        return f"Point({self.to_bytes().hex()})"


def _make_generator() -> Point:
    y = 4 * pow(5, -1, _P) % _P
    yy = y * y % _P
    _, x = _sqrt_ratio_m1(yy - 1, _D * yy + 1)
    return Point(x, y, 1, x * y)


_GENERATOR = _make_generator()
_BASE_POINT2 = Point.from_bytes(hashlib.sha256(_GENERATOR.to_bytes()).digest())