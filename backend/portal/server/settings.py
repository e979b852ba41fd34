"""Portal server configuration via environment variables."""

from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode

from shared.validators import parse_language_code, parse_string_list


class PortalSettings(BaseSettings):
    model_config = {"env_prefix": "PORTAL_"}

    log_dir: str = Field(default="backend/logs/portal", min_length=1)
    database_path: str = Field(default="backend/storage.db", min_length=1)
    cors_origins: Annotated[list[str], NoDecode] = []
    session_ttl_seconds: int = Field(default=86400, ge=60)
    cookie_secure: bool = False  # True in production, False for local HTTP
    # HMAC secret shared with the identity provider; sign-in is disabled when unset
    sign_in_secret: str | None = Field(default=None, min_length=1)
    default_language: str = "en"
    translation_cache_size: int | None = Field(default=1000, ge=1)

    @field_validator("cors_origins", mode="before")
    @classmethod
    def validate_cors_origins(cls, v: str | list[str]) -> list[str]:
        return parse_string_list(v, allow_empty=True)

    @field_validator("default_language")
    @classmethod
    def validate_default_language(cls, v: str) -> str:
        return parse_language_code(v)
