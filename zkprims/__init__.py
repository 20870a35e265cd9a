"""Zero-knowledge proofs, commitments, secret sharing and two-party protocols over the ristretto255 group."""

__version__ = "0.1.0"