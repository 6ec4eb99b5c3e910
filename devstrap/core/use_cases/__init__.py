"""Entry-point use cases: LSP setup and font setup."""
