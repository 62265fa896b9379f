"""Token service configuration handled with Pydantic models."""
from __future__ import annotations

import os
from functools import lru_cache
from typing import Any

from dotenv import dotenv_values
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, SecretStr

ENV_PREFIX = "HS256JWT_"

_PLACEHOLDER_SECRETS = {
    "",
    "change-me",
    "changeme",
    "secret",
    "please-change-this-secret",
}


def _collect_env(prefix: str = ENV_PREFIX) -> dict[str, Any]:
    """Load .env + OS variables and normalise keys."""

    raw: dict[str, Any] = {}
    sources = [dotenv_values(".env"), os.environ]
    for source in sources:
        for key, value in source.items():
            if value in (None, ""):
                continue
            key_upper = key.upper()
            if key_upper.startswith(prefix):
                stripped = key_upper[len(prefix) :]
            else:
                stripped = key_upper
            raw[stripped] = value
            raw[stripped.lower()] = value
    return raw


class Settings(BaseModel):
    """Defaults applied by the token service helpers."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    jwt_secret_key: SecretStr = Field(
        default=SecretStr("local-dev-secret"),
        validation_alias=AliasChoices("JWT_SECRET", "JWT_SECRET_KEY"),
    )
    jwt_issuer: str | None = Field(
        default=None,
        validation_alias=AliasChoices("JWT_ISSUER"),
    )
    token_lifetime_minutes: int = Field(
        default=30,
        ge=1,
        validation_alias=AliasChoices("TOKEN_LIFETIME_MINUTES", "JWT_EXPIRATION_MINUTES"),
    )

    @property
    def jwt_secret(self) -> str:
        """Return the decrypted JWT secret string."""

        return self.jwt_secret_key.get_secret_value()

    @classmethod
    def load(cls) -> "Settings":
        data = _collect_env()
        instance = cls.model_validate(data)
        _validate_required_settings(instance)
        return instance


@lru_cache()
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance."""

    return Settings.load()


def _validate_required_settings(settings: Settings) -> None:
    """Fail fast when the signing secret is missing or a placeholder."""

    if settings.jwt_secret.strip().lower() in _PLACEHOLDER_SECRETS:
        raise ValueError(
            f"Incomplete configuration: {ENV_PREFIX}JWT_SECRET_KEY must define a strong signing secret."
        )
