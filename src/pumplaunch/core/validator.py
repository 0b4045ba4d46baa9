"""Token launch parameter validation.

Checks run in a fixed order (name, symbol, total_supply, decimals) and
stop at the first violation. No network or other I/O happens here.
"""

from typing import Any

import structlog

from pumplaunch.core.exceptions import (
    InvalidDecimalsError,
    InvalidNameError,
    InvalidSupplyError,
    InvalidSymbolError,
)
from pumplaunch.models.token import TokenLaunchRequest

log = structlog.get_logger(__name__)


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _is_integer(value: Any) -> bool:
    # bool is an int subclass but never a valid amount
    return isinstance(value, int) and not isinstance(value, bool)


def validate_launch_request(request: TokenLaunchRequest) -> None:
    """Validate token launch parameters before any network call.

    Only true ints count as integers: bool and whole-number floats such as
    1000.0 are rejected so the payload always carries JSON integers.

    Args:
        request: The launch request to check.

    Raises:
        InvalidNameError: name is not a non-empty string.
        InvalidSymbolError: symbol is not a non-empty string.
        InvalidSupplyError: total_supply is not an integer greater than zero.
        InvalidDecimalsError: decimals is not an integer greater than or equal to zero.

    Example:
        >>> validate_launch_request(TokenLaunchRequest("PumpFun Token", "PFT", 1_000_000, 18))
    """
    if not _is_non_empty_string(request.name):
        raise InvalidNameError(request.name)
    if not _is_non_empty_string(request.symbol):
        raise InvalidSymbolError(request.symbol)
    if not _is_integer(request.total_supply) or request.total_supply <= 0:
        raise InvalidSupplyError(request.total_supply)
    if not _is_integer(request.decimals) or request.decimals < 0:
        raise InvalidDecimalsError(request.decimals)

    log.debug("token_parameters_validated", name=request.name, symbol=request.symbol)
