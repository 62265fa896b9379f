from __future__ import annotations

import json

from hs256jwt.model import ClaimSet
from hs256jwt.utils.encoding import b64decode
from hs256jwt.writer import write_jwt


def test_write_produces_known_token():
    claims = ClaimSet()
    claims.set_issuer("example.com")

    token = write_jwt(claims, "test")

    assert token == (
        "eyJ0eXAiOiJKV1QiLCJhbGciOiJIUzI1NiJ9"
        ".eyJpc3MiOiJleGFtcGxlLmNvbSJ9"
        ".ZUkdElq_VS_HHEyyvn9T_zpctPXADg7ppfsO_Q6vL8Q"
    )


def test_write_emits_fixed_header_without_padding():
    claims = ClaimSet()
    claims.set_subject("user123")

    token = write_jwt(claims, b"")

    header_segment, claims_segment, signature_segment = token.split(".")
    assert "=" not in token
    assert json.loads(b64decode(header_segment)) == {"typ": "JWT", "alg": "HS256"}
    assert json.loads(b64decode(claims_segment)) == {"sub": "user123"}
    assert len(b64decode(signature_segment)) == 32
