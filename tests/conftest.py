"""Shared pytest fixtures for pumplaunch tests.

This module provides fixtures for:
- Environment isolation (no real .env or PUMP_FUN_* values leak in)
- Client configuration pointing at a mocked API
- Sample token launch requests

Usage:
    @pytest.mark.asyncio
    async def test_something(client_config, valid_request):
        result = await launch_token(client_config, valid_request)
"""

from collections.abc import Generator

import pytest
import structlog
from pydantic import SecretStr

from pumplaunch.config.client import ClientConfig
from pumplaunch.config.settings import get_settings
from pumplaunch.models.token import TokenLaunchRequest

TEST_API_KEY = "test-api-key-12345"
TEST_BASE_URL = "https://api.pump.fun"
TEST_LAUNCH_URL = "https://api.pump.fun/token/launch"

# =============================================================================
# Environment Configuration
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> Generator[None, None, None]:
    """Clear PUMP_FUN_* variables and run from a directory without a .env file."""
    for var in (
        "PUMP_FUN_API_KEY",
        "PUMP_FUN_BASE_URL",
        "PUMP_FUN_TOKEN_LAUNCH_ENDPOINT",
        "LOG_LEVEL",
        "DEBUG",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()
    structlog.reset_defaults()


# =============================================================================
# Client Fixtures
# =============================================================================


@pytest.fixture
def client_config() -> ClientConfig:
    """Client config pointing at the default Pump.fun URL (mocked with respx)."""
    return ClientConfig(
        api_key=SecretStr(TEST_API_KEY),
        base_url=TEST_BASE_URL,
        launch_path="/token/launch",
    )


@pytest.fixture
def valid_request() -> TokenLaunchRequest:
    """The example token from the launch script."""
    return TokenLaunchRequest(
        name="PumpFun Token",
        symbol="PFT",
        total_supply=1_000_000,
        decimals=18,
    )


@pytest.fixture
def launch_url() -> str:
    """Full launch URL for the client_config fixture."""
    return TEST_LAUNCH_URL
