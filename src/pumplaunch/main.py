"""pumplaunch - command line entry point.

Usage:
    pumplaunch --name "PumpFun Token" --symbol PFT --total-supply 1000000 --decimals 18
    pumplaunch --name "PumpFun Token" --symbol PFT --total-supply 1000000 --decimals 18 --json

Exit codes:
    0 - Token launched
    1 - Configuration, validation or launch failure
    2 - Invalid command line arguments
"""

import argparse
import asyncio
import json
import sys

from pumplaunch.config import ClientConfig, get_settings, load_client_config
from pumplaunch.config.logging import configure_logging
from pumplaunch.core.exceptions import ConfigurationError
from pumplaunch.models.token import TokenLaunchRequest
from pumplaunch.services.launcher import launch_and_report

EXIT_OK = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="pumplaunch",
        description="Launch a token via the Pump.fun API",
    )
    parser.add_argument("--name", required=True, help="Token name")
    parser.add_argument("--symbol", required=True, help="Token ticker symbol")
    parser.add_argument(
        "--total-supply", type=int, required=True, help="Total supply (positive integer)"
    )
    parser.add_argument(
        "--decimals", type=int, required=True, help="Decimal places (non-negative integer)"
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the full API response as JSON"
    )
    return parser


async def run(config: ClientConfig, args: argparse.Namespace) -> int:
    """Launch the token described by the parsed arguments.

    Returns:
        Process exit code.
    """
    request = TokenLaunchRequest(
        name=args.name,
        symbol=args.symbol,
        total_supply=args.total_supply,
        decimals=args.decimals,
    )

    outcome = await launch_and_report(config, request)

    if outcome.error is not None:
        print(f"Token launch failed: {outcome.error}", file=sys.stderr)
        return EXIT_FAILURE

    result = outcome.raise_for_error()
    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    elif result.token_id:
        print(f"Token ID: {result.token_id}")
    else:
        print("No token ID was returned from the API.")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, load configuration, configure logging and run the launch."""
    args = build_parser().parse_args(argv)

    try:
        config = load_client_config()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    settings = get_settings()
    configure_logging(log_level=settings.log_level, debug=settings.debug)

    return asyncio.run(run(config, args))


if __name__ == "__main__":
    sys.exit(main())
