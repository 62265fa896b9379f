"""Claim set carried in a token payload."""
from __future__ import annotations

import copy
import enum
import math
from datetime import timedelta
from typing import Any, Dict, List, Mapping, Optional, Sequence

from . import clock
from .utils.encoding import dump_json


class RegisteredClaim(str, enum.Enum):
    """Registered claim names from RFC 7519."""

    ISSUER = "iss"
    SUBJECT = "sub"
    AUDIENCE = "aud"
    EXPIRATION = "exp"
    NOT_BEFORE = "nbf"
    ISSUED_AT = "iat"
    JWT_ID = "jti"


class ClaimSet:
    """Ordered mapping of claim names to JSON values.

    Registered claims only appear in the mapping while they are present:
    clearing one (``None`` for strings, a negative timestamp, an empty
    audience list) removes the key. Timestamp getters report ``-1`` for an
    absent claim.
    """

    def __init__(self, claims: Optional[Mapping[str, Any]] = None) -> None:
        self._claims: Dict[str, Any] = dict(claims or {})

    @classmethod
    def from_json(cls, value: Dict[str, Any]) -> "ClaimSet":
        """Wrap an already parsed JSON object without validating it."""

        instance = cls()
        instance._claims = value
        return instance

    def _set_string(self, claim: RegisteredClaim, value: Optional[str]) -> None:
        if value is None:
            self._claims.pop(claim.value, None)
        else:
            self._claims[claim.value] = value

    def _get_string(self, claim: RegisteredClaim) -> Optional[str]:
        value = self._claims.get(claim.value)
        return value if isinstance(value, str) else None

    def _set_timestamp(self, claim: RegisteredClaim, value: int) -> None:
        if value < 0:
            self._claims.pop(claim.value, None)
        else:
            self._claims[claim.value] = int(value)

    def _get_timestamp(self, claim: RegisteredClaim) -> int:
        value = self._claims.get(claim.value)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return -1
        if isinstance(value, float) and not math.isfinite(value):
            return -1
        return int(value)

    @property
    def issuer(self) -> Optional[str]:
        return self._get_string(RegisteredClaim.ISSUER)

    def set_issuer(self, value: Optional[str]) -> None:
        self._set_string(RegisteredClaim.ISSUER, value)

    @property
    def subject(self) -> Optional[str]:
        return self._get_string(RegisteredClaim.SUBJECT)

    def set_subject(self, value: Optional[str]) -> None:
        self._set_string(RegisteredClaim.SUBJECT, value)

    @property
    def jwt_id(self) -> Optional[str]:
        return self._get_string(RegisteredClaim.JWT_ID)

    def set_jwt_id(self, value: Optional[str]) -> None:
        self._set_string(RegisteredClaim.JWT_ID, value)

    def set_audience_single(self, value: Optional[str]) -> None:
        self._set_string(RegisteredClaim.AUDIENCE, value)

    def set_audience_list(self, values: Optional[Sequence[str]]) -> None:
        if not values:
            self._claims.pop(RegisteredClaim.AUDIENCE.value, None)
        else:
            self._claims[RegisteredClaim.AUDIENCE.value] = list(values)

    def get_audience_single(self) -> Optional[str]:
        """Return ``aud`` only when it is stored as a single string."""

        return self._get_string(RegisteredClaim.AUDIENCE)

    def get_audience_list(self) -> List[str]:
        """Return ``aud`` only when it is stored as an array, else ``[]``."""

        value = self._claims.get(RegisteredClaim.AUDIENCE.value)
        if not isinstance(value, list):
            return []
        return list(value)

    @property
    def expiration(self) -> int:
        return self._get_timestamp(RegisteredClaim.EXPIRATION)

    def set_expiration(self, timestamp: int) -> None:
        self._set_timestamp(RegisteredClaim.EXPIRATION, timestamp)

    @property
    def not_before(self) -> int:
        return self._get_timestamp(RegisteredClaim.NOT_BEFORE)

    def set_not_before(self, timestamp: int) -> None:
        self._set_timestamp(RegisteredClaim.NOT_BEFORE, timestamp)

    @property
    def issued_at(self) -> int:
        return self._get_timestamp(RegisteredClaim.ISSUED_AT)

    def set_issued_at(self, timestamp: int) -> None:
        self._set_timestamp(RegisteredClaim.ISSUED_AT, timestamp)

    def issued_at_now(self) -> None:
        self.set_issued_at(clock.now_timestamp())

    def expires_in(self, delta: timedelta) -> None:
        """Set ``exp`` to the current time plus ``delta`` (whole seconds)."""

        self.set_expiration(clock.now_timestamp() + int(delta.total_seconds()))

    def not_before_in(self, delta: timedelta) -> None:
        self.set_not_before(clock.now_timestamp() + int(delta.total_seconds()))

    def set_custom(self, key: str, value: Any) -> None:
        # Registered names are not protected; this overwrites the raw value.
        self._claims[key] = value

    def get_custom(self, key: str, default: Any = None) -> Any:
        return self._claims.get(key, default)

    def to_json(self) -> str:
        return dump_json(self._claims)

    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self._claims)

    def __contains__(self, key: object) -> bool:
        return key in self._claims

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClaimSet):
            return NotImplemented
        return self._claims == other._claims

    def __repr__(self) -> str:
        return f"ClaimSet({self._claims!r})"
