"""Compact HS256 JSON Web Tokens.

Usage:
    from hs256jwt import ClaimSet, read_jwt, write_jwt

    claims = ClaimSet()
    claims.set_issuer("example.com")
    token = write_jwt(claims, "secret")
    read_jwt(token, "secret").issuer  # "example.com"
"""
from __future__ import annotations

from .exceptions import (
    JwtError,
    JwtExpiredError,
    JwtFormatError,
    JwtNotBeforeError,
    JwtVerificationError,
)
from .model import ClaimSet, RegisteredClaim
from .reader import read_jwt
from .writer import write_jwt

__all__ = [
    "ClaimSet",
    "JwtError",
    "JwtExpiredError",
    "JwtFormatError",
    "JwtNotBeforeError",
    "JwtVerificationError",
    "RegisteredClaim",
    "read_jwt",
    "write_jwt",
]
