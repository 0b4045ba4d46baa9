"""Base API client with single-attempt request and error classification.

Every request is sent exactly once. Failures are classified into the
LaunchError family:
- ApiRejectedError: the server answered with a non-success status
- NoResponseError: the request went out but nothing came back
- RequestSetupError: the request could not be dispatched at all
"""

from typing import Any

import httpx
import structlog

from pumplaunch.core.exceptions import ApiRejectedError, NoResponseError, RequestSetupError

log = structlog.get_logger(__name__)

# Raised while building or encoding a request, before anything hits the wire
_SETUP_ERRORS: tuple[type[Exception], ...] = (
    httpx.UnsupportedProtocol,
    httpx.LocalProtocolError,
    httpx.InvalidURL,
    TypeError,
    ValueError,
)


def response_body(response: httpx.Response) -> Any:
    """Decode a response body for diagnostics.

    Returns:
        The decoded JSON value, the raw text if the body isn't JSON,
        or None if the body is empty.
    """
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class BaseAPIClient:
    """Base API client for single-shot HTTP requests.

    Provides:
    - Lazy client initialization (created on first request)
    - Classification of failures into LaunchError subclasses
    - Proper resource cleanup (close() or async with)

    No retries and no timeout override: when `timeout` is None the httpx
    default applies. Redirects are followed; 307/308 keep the POST body.

    Attributes:
        base_url: Base URL for all requests.
        timeout: Request timeout in seconds, or None for the httpx default.
        headers: Default headers for all requests.

    Example:
        async with BaseAPIClient(
            base_url="https://api.example.com",
            headers={"Authorization": "Bearer token"},
        ) as client:
            response = await client.post("/endpoint", json={"a": 1})
    """

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Initialize BaseAPIClient.

        Args:
            base_url: Base URL for all requests.
            timeout: Request timeout in seconds (default: httpx default).
            headers: Default headers for all requests.
        """
        self.base_url = base_url
        self.timeout = timeout
        self.headers = headers or {}
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "BaseAPIClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the httpx client (lazy initialization).

        Returns:
            The httpx AsyncClient instance.
        """
        if self._client is None:
            client_kwargs: dict[str, Any] = {
                "base_url": self.base_url,
                "headers": self.headers,
                "follow_redirects": True,
            }
            if self.timeout is not None:
                client_kwargs["timeout"] = self.timeout
            self._client = httpx.AsyncClient(**client_kwargs)
            log.debug("httpx_client_created", base_url=self.base_url)
        return self._client

    async def close(self) -> None:
        """Close the httpx client and release resources."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            log.debug("httpx_client_closed", base_url=self.base_url)

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Make a single HTTP request and classify any failure.

        Args:
            method: HTTP method (e.g. POST).
            path: Request path (appended to base_url).
            **kwargs: Additional arguments passed to httpx.request.

        Returns:
            httpx.Response with a 2xx status.

        Raises:
            ApiRejectedError: If the server answered with a non-success status.
            NoResponseError: If no response was received.
            RequestSetupError: If the request could not be built or dispatched.
        """
        log.debug("request_dispatch", method=method, path=path)

        try:
            client = await self._get_client()
            response = await client.request(method, path, **kwargs)
        except _SETUP_ERRORS as e:
            log.error(
                "request_setup_failed",
                method=method,
                path=path,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise RequestSetupError(e) from e
        except httpx.RequestError as e:
            log.error(
                "request_no_response",
                method=method,
                path=path,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise NoResponseError(e) from e

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            body = response_body(response)
            log.error(
                "request_api_error",
                method=method,
                path=path,
                status_code=response.status_code,
                body=body,
            )
            raise ApiRejectedError(status_code=response.status_code, body=body) from e

        return response

    async def post(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a POST request.

        Args:
            path: Request path.
            **kwargs: Additional arguments passed to httpx.

        Returns:
            httpx.Response on success.
        """
        return await self._request("POST", path, **kwargs)
