"""devstrap — idempotent development environment bootstrapper."""

__version__ = "0.1.0"
