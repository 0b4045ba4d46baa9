"""Token launch request and result models.

TokenLaunchRequest is a plain dataclass so that any caller-supplied values
can be represented and then judged by the validator. TokenLaunchResult is a
pydantic model over the opaque JSON body returned by the launch API.
"""

from dataclasses import dataclass
from typing import Any, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    ModelWrapValidatorHandler,
    PrivateAttr,
    model_validator,
)

# Wire field names of the launch payload, in payload order
PAYLOAD_FIELDS = ("name", "symbol", "total_supply", "decimals")


@dataclass(frozen=True)
class TokenLaunchRequest:
    """Parameters of a single token launch.

    No field has a default and nothing is checked here; run
    validate_launch_request() before launching.

    Attributes:
        name: Token name, e.g. "PumpFun Token".
        symbol: Token ticker symbol, e.g. "PFT".
        total_supply: Total number of tokens to mint.
        decimals: Number of decimal places.
    """

    name: Any
    symbol: Any
    total_supply: Any
    decimals: Any

    def to_payload(self) -> dict[str, Any]:
        """Build the JSON request body sent to the launch API."""
        return {
            "name": self.name,
            "symbol": self.symbol,
            "total_supply": self.total_supply,
            "decimals": self.decimals,
        }

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "TokenLaunchRequest":
        """Rebuild a request from a launch API request body.

        Raises:
            KeyError: If one of the four payload fields is missing.
        """
        return cls(**{key: payload[key] for key in PAYLOAD_FIELDS})


class TokenLaunchResult(BaseModel):
    """Response body of a successful token launch.

    Only `token_id` is interpreted; every other key the API returns is
    kept as-is. A numeric `token_id` is a string on the attribute, while
    to_dict() still returns the number the API sent.
    """

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    token_id: str | None = None

    _raw: dict[str, Any] = PrivateAttr(default_factory=dict)

    @model_validator(mode="wrap")
    @classmethod
    def _keep_raw_body(cls, data: Any, handler: ModelWrapValidatorHandler[Self]) -> Self:
        result = handler(data)
        if isinstance(data, dict):
            result._raw = dict(data)
        return result

    def to_dict(self) -> dict[str, Any]:
        """Return the response body as received."""
        return dict(self._raw)
