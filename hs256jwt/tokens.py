"""Issue and verify tokens using the configured secret and lifetime."""
from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any, Optional

from .config import get_settings
from .exceptions import JwtError
from .model import ClaimSet
from .reader import read_jwt
from .writer import write_jwt

logger = logging.getLogger(__name__)


def _resolve_secret(secret: bytes | str | None) -> bytes | str:
    if secret is not None:
        return secret
    return get_settings().jwt_secret


def issue_token(
    subject: Optional[str] = None,
    *,
    expires_delta: Optional[timedelta] = None,
    secret: bytes | str | None = None,
    issuer: Optional[str] = None,
    **custom: Any,
) -> str:
    """Create a signed token for ``subject``.

    Args:
        subject: Value of the ``sub`` claim, omitted when ``None``.
        expires_delta: Token lifetime. Defaults to the configured
            ``token_lifetime_minutes``.
        secret: Signing secret. Defaults to the configured secret.
        issuer: Value of the ``iss`` claim. Defaults to the configured
            ``jwt_issuer``.
        **custom: Extra claims copied verbatim into the payload.

    Settings are only loaded when one of the defaults is needed.

    Returns:
        Encoded JWT string.
    """

    if secret is None or expires_delta is None or issuer is None:
        settings = get_settings()
        secret = secret if secret is not None else settings.jwt_secret
        if expires_delta is None:
            expires_delta = timedelta(minutes=settings.token_lifetime_minutes)
        if issuer is None:
            issuer = settings.jwt_issuer

    claims = ClaimSet()
    claims.set_issuer(issuer)
    claims.set_subject(subject)
    claims.issued_at_now()
    claims.expires_in(expires_delta)
    for key, value in custom.items():
        claims.set_custom(key, value)
    return write_jwt(claims, secret)


def decode_token(token: str, *, secret: bytes | str | None = None) -> ClaimSet:
    """Read ``token`` with the configured secret; errors propagate."""

    return read_jwt(token, _resolve_secret(secret))


def verify_token(token: str, *, secret: bytes | str | None = None) -> Optional[ClaimSet]:
    """Return the token claims, or ``None`` if the token is rejected."""

    try:
        return decode_token(token, secret=secret)
    except JwtError as exc:
        logger.info("Token rejected", extra={"error": type(exc).__name__})
        return None
