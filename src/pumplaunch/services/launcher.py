"""Token launch orchestration.

Runs validation then the launch call, logs the outcome, and hands it back
to the caller without re-raising. Callers that want a failure to be fatal
use LaunchOutcome.raise_for_error().
"""

from dataclasses import dataclass

import structlog

from pumplaunch.config.client import ClientConfig
from pumplaunch.core.exceptions import PumpLaunchError
from pumplaunch.core.validator import validate_launch_request
from pumplaunch.models.token import TokenLaunchRequest, TokenLaunchResult
from pumplaunch.services.pumpfun.client import launch_token

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class LaunchOutcome:
    """Result of a launch attempt: either a result or the error that stopped it."""

    result: TokenLaunchResult | None = None
    error: PumpLaunchError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> TokenLaunchResult:
        """Return the result, or raise the captured error."""
        if self.error is not None:
            raise self.error
        assert self.result is not None
        return self.result


async def launch_and_report(config: ClientConfig, request: TokenLaunchRequest) -> LaunchOutcome:
    """Validate and launch a token, logging the outcome.

    The network is never touched when validation fails.

    Args:
        config: Immutable API connection details.
        request: Token launch parameters supplied by the caller.

    Returns:
        LaunchOutcome holding the TokenLaunchResult or the error.
    """
    try:
        validate_launch_request(request)
        result = await launch_token(config, request)
    except PumpLaunchError as e:
        log.error(
            "token_launch_failed",
            error=str(e),
            error_type=type(e).__name__,
            hint="Please review the errors above and try again.",
        )
        return LaunchOutcome(error=e)

    if result.token_id:
        log.info("token_launch_completed", token_id=result.token_id)
    else:
        log.warning("token_launch_missing_token_id")
    return LaunchOutcome(result=result)
