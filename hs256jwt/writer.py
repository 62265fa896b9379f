"""Token writer producing HS256-signed JWTs."""
from __future__ import annotations

from .model import ClaimSet
from .utils.encoding import b64encode, dump_json, sign

HEADER = {"typ": "JWT", "alg": "HS256"}


def write_jwt(claims: ClaimSet, secret: bytes | str) -> str:
    """Serialize ``claims`` into a compact token signed with ``secret``.

    Any secret is accepted, including an empty one.
    """

    header_segment = b64encode(dump_json(HEADER).encode("utf-8"))
    claims_segment = b64encode(claims.to_json().encode("utf-8"))
    signing_input = f"{header_segment}.{claims_segment}"
    signature_segment = b64encode(sign(secret, signing_input))
    return f"{signing_input}.{signature_segment}"
