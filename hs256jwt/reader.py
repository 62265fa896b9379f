"""Token reader: structural, signature and time-claim validation.

Stages run in a fixed order and each one gates the next, so a caller always
sees format problems before signature problems, and signature problems before
expiry problems.
"""
from __future__ import annotations

import binascii
import logging
import math
from dataclasses import dataclass
from typing import Any, Dict

from . import clock
from .exceptions import (
    JwtError,
    JwtExpiredError,
    JwtFormatError,
    JwtNotBeforeError,
    JwtVerificationError,
)
from .model import ClaimSet, RegisteredClaim
from .utils.encoding import b64decode, load_json, verify

logger = logging.getLogger(__name__)

SUPPORTED_ALGORITHM = "HS256"


@dataclass
class _TokenParts:
    header: Dict[str, Any]
    claims: Dict[str, Any]
    signing_input: str
    signature: bytes


def read_jwt(token: str, secret: bytes | str) -> ClaimSet:
    """Read and validate ``token``, returning its claims.

    Raises:
        JwtFormatError: the token is malformed or uses another algorithm.
        JwtVerificationError: the signature does not match ``secret``.
        JwtExpiredError: ``exp`` is at or before the current time.
        JwtNotBeforeError: ``nbf`` is after the current time.
    """

    try:
        parts = _extract_parts(token)
        if not verify(parts.signature, secret, parts.signing_input):
            raise JwtVerificationError()
        claims = ClaimSet.from_json(parts.claims)
        _verify_time_claims(claims)
    except JwtError as exc:
        logger.debug(
            "Rejected JWT",
            extra={"error": type(exc).__name__, "reason": str(exc)},
        )
        raise
    return claims


def _extract_parts(token: str) -> _TokenParts:
    segments = token.split(".")
    if len(segments) != 3 or not all(segments):
        raise JwtFormatError(
            "Invalid token format. Couldn't parse header, payload, and signature parts."
        )
    header_segment, claims_segment, signature_segment = segments

    try:
        header = load_json(b64decode(header_segment))
        claims = load_json(b64decode(claims_segment))
        signature = b64decode(signature_segment)
    except binascii.Error as exc:
        raise JwtFormatError("Invalid Base64 encoding.") from exc
    except (ValueError, RecursionError) as exc:
        raise JwtFormatError("Invalid JSON format.") from exc

    _verify_header(header)
    algorithm = header["alg"]
    if algorithm != SUPPORTED_ALGORITHM:
        raise JwtFormatError(f"Unsupported algorithm: {algorithm}")
    if not isinstance(claims, dict):
        raise JwtFormatError("Claims must be a JSON object.")

    return _TokenParts(
        header=header,
        claims=claims,
        signing_input=f"{header_segment}.{claims_segment}",
        signature=signature,
    )


def _verify_header(header: Any) -> None:
    if not isinstance(header, dict):
        raise JwtFormatError("Header must be a JSON object.")
    if not isinstance(header.get("typ"), str):
        raise JwtFormatError("Header is missing the required 'typ' string property.")
    if header["typ"] != "JWT":
        raise JwtFormatError("Header 'typ' property must be 'JWT'.")
    if not isinstance(header.get("alg"), str):
        raise JwtFormatError("Header is missing the required 'alg' string property.")


def _require_numeric(claims: ClaimSet, claim: RegisteredClaim) -> None:
    if claim.value not in claims:
        return
    value = claims.get_custom(claim.value)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise JwtFormatError(f"Claim '{claim.value}' must be a numeric date.")
    if isinstance(value, float) and not math.isfinite(value):
        raise JwtFormatError(f"Claim '{claim.value}' must be a finite numeric date.")


def _verify_time_claims(claims: ClaimSet) -> None:
    _require_numeric(claims, RegisteredClaim.EXPIRATION)
    _require_numeric(claims, RegisteredClaim.NOT_BEFORE)

    now = clock.now_timestamp()
    # A stored 0 or negative timestamp counts as absent.
    if 0 < claims.expiration <= now:
        raise JwtExpiredError()
    if claims.not_before > 0 and claims.not_before > now:
        raise JwtNotBeforeError()
