"""Rule-based tweet variant generator with an HTTP API and CLI."""

__version__ = "0.1.0"
