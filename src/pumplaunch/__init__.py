"""pumplaunch - validate token parameters and launch tokens via the Pump.fun API."""
