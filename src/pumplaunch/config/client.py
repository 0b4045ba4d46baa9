"""Immutable client configuration for the Pump.fun launch API."""

import pydantic
from pydantic import BaseModel, ConfigDict, SecretStr

from pumplaunch.config.settings import Settings, get_settings
from pumplaunch.core.exceptions import ConfigurationError


class ClientConfig(BaseModel):
    """Connection details for the launch client.

    Built once at startup and passed into the client explicitly; the
    client never reads the environment and never mutates this value.

    Attributes:
        api_key: Bearer token for the Authorization header.
        base_url: API base URL, e.g. https://api.pump.fun.
        launch_path: Path of the token launch endpoint, e.g. /token/launch.
    """

    model_config = ConfigDict(frozen=True)

    api_key: SecretStr
    base_url: str
    launch_path: str = "/token/launch"

    @property
    def launch_url(self) -> str:
        """Full launch URL (base URL and path concatenated)."""
        return f"{self.base_url}{self.launch_path}"

    @classmethod
    def from_settings(cls, settings: Settings) -> "ClientConfig":
        """Build a ClientConfig from application settings."""
        return cls(
            api_key=settings.pump_fun_api_key,
            base_url=settings.pump_fun_base_url,
            launch_path=settings.pump_fun_token_launch_endpoint,
        )


def load_client_config() -> ClientConfig:
    """Load settings from the environment and build the client config.

    Raises:
        ConfigurationError: If PUMP_FUN_API_KEY is unset or any value is invalid.
    """
    try:
        settings = get_settings()
    except pydantic.ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]).upper() for err in e.errors())
        raise ConfigurationError(f"Invalid or missing configuration: {fields}") from e
    return ClientConfig.from_settings(settings)
