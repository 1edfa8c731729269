from __future__ import annotations

from typing import Literal
from urllib.parse import urlsplit

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


HomeMode = Literal["redirect", "greeting"]


class Settings(BaseSettings):
    app_name: str = "homepage"
    debug: bool = False
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"

    # which definition of GET / is active
    home_mode: HomeMode = "redirect"
    redirect_url: str = "https://google.com"
    greeting: str = "Hello there"

    model_config = SettingsConfigDict(
        env_prefix="HOMEPAGE_", env_file=".env", env_file_encoding="utf-8"
    )

    @field_validator("redirect_url")
    @classmethod
    def _absolute_url(cls, value: str) -> str:
        parts = urlsplit(value)
        if not parts.scheme or not parts.netloc:
            raise ValueError(f"redirect_url must be an absolute URL, got {value!r}")
        return value


settings = Settings()


def get_settings() -> Settings:
    return settings
