"""
Shared helpers for CLI commands — config loading and prompts.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import click

from devstrap.core.config.loader import BootstrapConfig, ConfigError, load_config


def load_config_or_exit(ctx: click.Context) -> BootstrapConfig:
    """Load the config named on the command line (or the default one)."""
    config_path: Path | None = ctx.obj.get("config_path")
    try:
        return load_config(config_path)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)


def make_confirm(assume_yes: bool) -> Callable[[str], bool]:
    """Yes/no prompt defaulting to no, or always-yes for ``--yes``."""
    if assume_yes:
        return lambda question: True

    def _confirm(question: str) -> bool:
        return click.confirm(question, default=False)

    return _confirm


def prompt_text(question: str) -> str:
    return click.prompt(question, default="", show_default=False)
