"""pumplaunch exception hierarchy.

This module defines the base exception class and the closed sets of
validation and launch errors raised by the validator and the launch client.
"""

from typing import Any


class PumpLaunchError(Exception):
    """Base exception for all pumplaunch errors.

    All custom exceptions in pumplaunch should inherit from this class
    to enable consistent error handling and logging.
    """

    pass


class ConfigurationError(PumpLaunchError):
    """Raised when configuration is invalid or missing.

    Use this for issues with environment variables or the .env file.

    Example:
        raise ConfigurationError("Missing required env var: PUMP_FUN_API_KEY")
    """

    pass


# =============================================================================
# Validation errors
# =============================================================================


class ValidationError(PumpLaunchError):
    """Raised when a token launch request fails validation.

    Raised before any network access. The caller recovers by correcting
    the input; it is never retried automatically.

    Attributes:
        field: Wire name of the field that failed.
        value: The rejected value.
    """

    field: str = ""
    default_message: str = "Invalid token launch request."

    def __init__(self, value: Any = None, message: str | None = None) -> None:
        self.value = value
        super().__init__(message or self.default_message)


class InvalidNameError(ValidationError):
    """Token name is empty or not a string."""

    field = "name"
    default_message = "Invalid token name provided."


class InvalidSymbolError(ValidationError):
    """Token symbol is empty or not a string."""

    field = "symbol"
    default_message = "Invalid token symbol provided."


class InvalidSupplyError(ValidationError):
    """Total supply is not a positive integer."""

    field = "total_supply"
    default_message = "Total supply must be a positive integer."


class InvalidDecimalsError(ValidationError):
    """Decimals is not a non-negative integer."""

    field = "decimals"
    default_message = "Decimals must be a non-negative integer."


# =============================================================================
# Launch errors
# =============================================================================


class LaunchError(PumpLaunchError):
    """Raised when the token launch call fails.

    Never raised directly; one of the three subclasses below classifies
    the failure.
    """

    pass


class ApiRejectedError(LaunchError):
    """The launch API answered with a non-success status.

    Also raised when a success status carries a body that is not a
    JSON object.

    Attributes:
        status_code: HTTP status code of the response.
        body: Decoded JSON body, raw text, or None when the body was empty.

    Example:
        raise ApiRejectedError(status_code=500, body=None)
    """

    def __init__(self, status_code: int, body: Any = None, message: str | None = None) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message or f"API rejected token launch with status {status_code}")


class NoResponseError(LaunchError):
    """The request was sent but no response was received.

    Covers connection failures, timeouts and dropped connections.

    Attributes:
        cause: The underlying transport error.
    """

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"No response received from the API: {cause}")


class RequestSetupError(LaunchError):
    """The request could not be dispatched at all.

    Raised for a malformed URL or scheme, an unserializable payload or a
    header the transport refuses to send.

    Attributes:
        cause: The error raised while building the request.
    """

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"Error setting up request: {cause}")
