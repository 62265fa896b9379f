"""Errors raised while reading a token.

Every kind derives from :class:`JwtError`, itself a ``ValueError`` so callers
that already guard token handling with ``except ValueError`` keep working.
"""
from __future__ import annotations


class JwtError(ValueError):
    """Base type for any failure while reading a JWT."""


class JwtFormatError(JwtError):
    """The token is malformed and cannot be read."""


class JwtVerificationError(JwtError):
    """The token signature does not match its content."""

    def __init__(self) -> None:
        super().__init__("JWT could not be verified.")


class JwtExpiredError(JwtError):
    """The ``exp`` claim is present and not in the future."""

    def __init__(self) -> None:
        super().__init__("JWT has expired.")


class JwtNotBeforeError(JwtError):
    """The ``nbf`` claim is present and still in the future."""

    def __init__(self) -> None:
        super().__init__("JWT is not valid yet (not before time).")


__all__ = [
    "JwtError",
    "JwtExpiredError",
    "JwtFormatError",
    "JwtNotBeforeError",
    "JwtVerificationError",
]
