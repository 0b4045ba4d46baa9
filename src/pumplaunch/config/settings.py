"""Application settings using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """pumplaunch configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # Logging
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Minimum log level"
    )

    # Pump.fun API
    pump_fun_api_key: SecretStr = Field(description="Pump.fun API key")
    pump_fun_base_url: str = Field(
        default="https://api.pump.fun", description="Pump.fun API base URL"
    )
    pump_fun_token_launch_endpoint: str = Field(
        default="/token/launch", description="Token launch endpoint path"
    )

    @field_validator("pump_fun_api_key")
    @classmethod
    def validate_api_key(cls, v: SecretStr) -> SecretStr:
        """Reject a blank API key."""
        if not v.get_secret_value().strip():
            raise ValueError("Pump.fun API key must not be empty")
        return v

    @field_validator("pump_fun_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL format."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Pump.fun base URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("pump_fun_token_launch_endpoint")
    @classmethod
    def validate_launch_endpoint(cls, v: str) -> str:
        """Validate endpoint path format."""
        if not v.startswith("/"):
            raise ValueError("Token launch endpoint must start with /")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()  # type: ignore[call-arg]  # Values from env
