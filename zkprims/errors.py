"""Exceptions raised by the zero-knowledge primitives."""


class ZkError(Exception):
    """Base class of every error raised by this package."""


class ProofError(ZkError):
    """A proof or a protocol message failed verification."""

    def __init__(self, message: str = "ProofError") -> None:
        super().__init__(message)


class DeserializationError(ZkError, ValueError):
    """Bytes do not encode a valid scalar or point."""

    def __init__(self, message: str = "failed to deserialize") -> None:
        super().__init__(message)


class NotOnCurve(ZkError, ValueError):
    """Coordinates do not describe a point on the curve."""

    def __init__(self, message: str = "point is not on the curve") -> None:
        super().__init__(message)


class MacError(ZkError):
    """A message authentication code did not match."""

    def __init__(self, message: str = "MAC verification failed") -> None:
        super().__init__(message)


class VerifyShareError(ZkError):
    """A secret share does not match the published commitments."""

    def __init__(self, message: str = "share verification failed") -> None:
        super().__init__(message)