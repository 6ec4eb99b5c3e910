"""CLI sub-commands registered by ``devstrap.main``."""
