"""Static install catalog."""
