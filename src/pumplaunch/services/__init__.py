"""External API clients and launch orchestration."""
