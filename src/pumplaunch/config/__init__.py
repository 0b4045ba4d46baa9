"""Configuration module for pumplaunch.

Usage:
    from pumplaunch.config import load_client_config

    config = load_client_config()  # Fails fast if PUMP_FUN_API_KEY is unset
    print(config.launch_url)

Note:
    There is no module-level `settings` instance because that would fail
    on import when PUMP_FUN_API_KEY isn't set. Use `get_settings()` or
    `load_client_config()` at runtime.
"""

from pumplaunch.config.client import ClientConfig, load_client_config
from pumplaunch.config.settings import Settings, get_settings

__all__ = ["ClientConfig", "Settings", "get_settings", "load_client_config"]
