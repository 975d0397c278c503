"""Configuration for the Encar API client."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_BASE_URL = "https://api.carapis.com"
DEFAULT_API_BASE_PATH = "/apix/encar/v2"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

    encar_api_url: str = Field(default=DEFAULT_BASE_URL)
    carapis_api_key: str = Field(default="")
    encar_api_base_path: str = Field(default=DEFAULT_API_BASE_PATH)
    encar_api_timeout_seconds: float = Field(default=30)
    encar_api_verify_ssl: bool = Field(default=True)

    encar_schema_path: Optional[str] = Field(default=None)

    encar_log_level: str = Field(default="INFO")

    @field_validator("encar_api_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("encar_api_base_path")
    @classmethod
    def _normalize_base_path(cls, value: str) -> str:
        value = value.rstrip("/")
        if value and not value.startswith("/"):
            value = "/" + value
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
