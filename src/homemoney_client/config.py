from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    service_uri: str = Field(..., alias="HOMEMONEY_SERVICE_URI")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_http_bodies: bool = Field(default=False, alias="HOMEMONEY_LOG_HTTP_BODIES")

    timeout_s: float = Field(default=30.0, alias="HOMEMONEY_TIMEOUT")

    def validate_required(self) -> None:
        if not self.service_uri or not self.service_uri.strip():
            raise ValueError("HOMEMONEY_SERVICE_URI is required")


@lru_cache
def load_settings() -> Settings:
    settings = Settings()
    settings.validate_required()
    return settings


def load_settings_from(env_file: str | Path) -> Settings:
    path = Path(env_file)
    if not path.is_file():
        raise FileNotFoundError(f"Configuration file {path} not found")

    settings = Settings(_env_file=path)
    settings.validate_required()
    return settings
