from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from werr.ids import DEFAULT_ID_BITS


class Settings(BaseSettings):
    fallback_message: str = Field(default="internal error")
    content_type: str = Field(default="text/plain")
    log_level: str = Field(default="INFO")
    id_seed: int | None = Field(default=None)
    id_bits: int = Field(default=DEFAULT_ID_BITS, ge=1)

    @field_validator("id_seed", mode="before")
    @classmethod
    def _parse_id_seed(cls, v: int | str | None) -> int | str | None:
        if v == "":
            return None
        return v

    @field_validator("fallback_message")
    @classmethod
    def _require_fallback(cls, v: str) -> str:
        if not v:
            raise ValueError("fallback_message must not be empty")
        return v

    model_config = SettingsConfigDict(
        env_prefix="WERR_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )
