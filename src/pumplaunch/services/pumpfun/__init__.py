"""Pump.fun API client."""

from pumplaunch.services.pumpfun.client import PumpFunClient, launch_token

__all__ = ["PumpFunClient", "launch_token"]
