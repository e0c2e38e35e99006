"""Configurazione del client.

Tutte le impostazioni sono lette da variabili d'ambiente (supporto .env).
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # App
    app_name: str = Field(default="Conversations client", alias="APP_NAME")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Conversations API
    api_url: str = Field(default="http://127.0.0.1:8080", alias="CONVERSATIONS_API_URL")
    api_token: str | None = Field(default=None, alias="CONVERSATIONS_API_TOKEN")
    http_timeout: float = Field(default=30.0, alias="CONVERSATIONS_HTTP_TIMEOUT")


settings = Settings()  # singleton
