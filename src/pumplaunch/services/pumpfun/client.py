"""Pump.fun API client for token launches.

This module provides an async client that submits a single token launch
request to the Pump.fun API and returns the parsed response.

The client performs no validation; run validate_launch_request() first.
"""

import pydantic
import structlog

from pumplaunch.config.client import ClientConfig
from pumplaunch.core.exceptions import ApiRejectedError
from pumplaunch.models.token import TokenLaunchRequest, TokenLaunchResult
from pumplaunch.services.base import BaseAPIClient, response_body

log = structlog.get_logger(__name__)


class PumpFunClient(BaseAPIClient):
    """Async client for the Pump.fun token launch API.

    Every launch() is one POST with no retries. The ClientConfig is held
    read-only; the client keeps no state between launches apart from the
    reusable httpx connection.

    Endpoints used:
        - POST {base_url}{launch_path} - Launch a token

    Example:
        async with PumpFunClient(config) as client:
            result = await client.launch(
                TokenLaunchRequest("PumpFun Token", "PFT", 1_000_000, 18)
            )
            print(result.token_id)
    """

    def __init__(self, config: ClientConfig) -> None:
        """Initialize PumpFunClient from an immutable ClientConfig."""
        self.config = config
        super().__init__(
            base_url=config.base_url,
            headers={
                "Authorization": f"Bearer {config.api_key.get_secret_value()}",
                "Content-Type": "application/json",
            },
        )
        log.debug("pumpfun_client_initialized", base_url=config.base_url)

    async def launch(self, request: TokenLaunchRequest) -> TokenLaunchResult:
        """Launch a token via the Pump.fun API.

        Args:
            request: Validated token launch parameters.

        Returns:
            TokenLaunchResult parsed from the response body.

        Raises:
            ApiRejectedError: Non-success status, or a body that isn't a JSON object.
            NoResponseError: The request was sent but no response arrived.
            RequestSetupError: The request could not be dispatched.
        """
        url = self.config.launch_url
        payload = request.to_payload()

        log.info("token_launch_requested", url=url, payload=payload)

        response = await self.post(url, json=payload)
        body = response_body(response)

        if not isinstance(body, dict):
            log.error(
                "token_launch_unexpected_format",
                status_code=response.status_code,
                data_type=type(body).__name__,
            )
            raise ApiRejectedError(
                status_code=response.status_code,
                body=body,
                message="Launch API returned a response that is not a JSON object",
            )

        try:
            result = TokenLaunchResult.model_validate(body)
        except pydantic.ValidationError as e:
            log.error("token_launch_parse_error", error=str(e), body=body)
            raise ApiRejectedError(
                status_code=response.status_code,
                body=body,
                message=f"Launch API returned an unreadable response: {e}",
            ) from e

        log.info("token_launch_succeeded", status_code=response.status_code, data=body)
        return result


async def launch_token(config: ClientConfig, request: TokenLaunchRequest) -> TokenLaunchResult:
    """Launch a token with a client scoped to this single call.

    Args:
        config: Immutable API connection details.
        request: Validated token launch parameters.

    Returns:
        TokenLaunchResult parsed from the response body.
    """
    async with PumpFunClient(config) as client:
        return await client.launch(request)
