"""Download adapters — HTTP fetch, archive extraction."""
