"""
Client configuration via pydantic-settings.

All settings are loaded from environment variables (and .env file).

The grace period is kept in milliseconds to match how the page script
schedules its availability check; ``grace_period_seconds`` converts it for
asyncio.
"""

from __future__ import annotations

from typing import Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    api_base_url: str = "http://localhost:8080"
    register_path: str = "/api/auth/register"
    login_path: str = "/api/auth/login"

    # Request id sent with every auth call; the backend expects a fixed value
    rqid: int = 123456789

    # Time the external widget gets to render before the fallback preempts it
    grace_period_ms: int = 3000

    # None disables the client-side timeout; failures surface via httpx errors
    http_timeout: Optional[float] = None

    @property
    def grace_period_seconds(self) -> float:
        return self.grace_period_ms / 1000

    @property
    def register_url(self) -> str:
        return self.api_base_url.rstrip("/") + self.register_path

    @property
    def login_url(self) -> str:
        return self.api_base_url.rstrip("/") + self.login_path


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"
    # Unset: "json" in production, "console" otherwise
    log_format: Optional[str] = None


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: str = "development"

    # Sub-configs (composed via model_validator below)
    client: Optional[ClientSettings] = None
    logging: Optional[LoggingSettings] = None

    @model_validator(mode="after")
    def _populate_sub_configs(self) -> "AppSettings":
        # Populate sub-configs from the same env/dotenv source
        if self.client is None:
            self.client = ClientSettings()
        if self.logging is None:
            self.logging = LoggingSettings()
        return self

    @property
    def is_production(self) -> bool:
        return self.env == "production"
