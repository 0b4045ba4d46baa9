"""Core validation and exception hierarchy."""
