"""Base64url, JSON and HMAC-SHA256 primitives for the HS256 codec.

Tokens carry base64url segments without ``=`` padding. Decoding is strict:
anything outside the URL-safe alphabet is rejected instead of being silently
skipped the way :func:`base64.urlsafe_b64decode` would.
"""
from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import json
import re
from typing import Any

_B64URL_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")


def to_bytes(secret: bytes | str) -> bytes:
    if isinstance(secret, str):
        return secret.encode("utf-8")
    return bytes(secret)


def b64encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64decode(data: str) -> bytes:
    """Decode an unpadded base64url segment.

    Raises ``binascii.Error`` for characters outside the alphabet, for a
    length no encoder could have produced, or for non-zero trailing bits.
    """

    if not _B64URL_ALPHABET.fullmatch(data):
        raise binascii.Error("Invalid base64url character")
    if len(data) % 4 == 1:
        raise binascii.Error("Invalid base64url length")
    padding = "=" * (-len(data) % 4)
    decoded = base64.urlsafe_b64decode(data + padding)
    # Unused trailing bits must be zero so each byte string has one encoding.
    if b64encode(decoded) != data:
        raise binascii.Error("Non-canonical base64url encoding")
    return decoded


def dump_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"))


def load_json(data: bytes) -> Any:
    """Parse UTF-8 encoded JSON text.

    Propagates ``UnicodeDecodeError`` and ``json.JSONDecodeError``.
    """

    return json.loads(data.decode("utf-8"))


def sign(secret: bytes | str, message: str) -> bytes:
    return hmac.new(to_bytes(secret), message.encode("ascii"), hashlib.sha256).digest()


def verify(signature: bytes, secret: bytes | str, message: str) -> bool:
    expected = sign(secret, message)
    return hmac.compare_digest(expected, signature)
