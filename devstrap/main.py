"""
devstrap — CLI entrypoint.

Usage:
    devstrap --help
    devstrap lsp
    devstrap fonts
    devstrap list
    devstrap config check

``devstrap-lsp`` and ``devstrap-fonts`` are shortcuts for the two
installers.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import click

from devstrap import __version__
from devstrap.core.observability.logging_config import (
    FILE_ENV_VAR,
    FILE_LEVEL_ENV_VAR,
    resolve_level,
    setup_logging,
)


@click.group()
@click.version_option(version=__version__, prog_name="devstrap")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to config.yml (default: $DEVSTRAP_CONFIG or ~/.config/devstrap/config.yml).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """devstrap — bootstrap an editor toolchain, idempotently."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path).expanduser() if config_path else None

    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(FILE_ENV_VAR),
        log_file_level=os.environ.get(FILE_LEVEL_ENV_VAR),
    )


def _register_commands() -> None:
    from devstrap.ui.cli.catalog import list_targets
    from devstrap.ui.cli.config import config
    from devstrap.ui.cli.fonts import fonts
    from devstrap.ui.cli.lsp import lsp

    cli.add_command(lsp)
    cli.add_command(fonts)
    cli.add_command(list_targets)
    cli.add_command(config)


_register_commands()


def lsp_main() -> None:
    """Entry point for ``devstrap-lsp``."""
    cli.main(args=["lsp", *sys.argv[1:]], prog_name="devstrap-lsp")


def fonts_main() -> None:
    """Entry point for ``devstrap-fonts``."""
    cli.main(args=["fonts", *sys.argv[1:]], prog_name="devstrap-fonts")


if __name__ == "__main__":
    cli()
