"""Shell adapters — command runner, installer scripts."""
