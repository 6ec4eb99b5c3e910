"""
CLI command for the LSP bootstrap.

Thin wrapper over ``devstrap.core.use_cases.lsp_setup``.
"""

from __future__ import annotations

import json
import sys

import click

from devstrap.ui.cli.common import load_config_or_exit, make_confirm
from devstrap.ui.cli.reporter import ConsoleReporter


@click.command()
@click.option("--yes", "-y", "assume_yes", is_flag=True, help="Answer yes to every prompt.")
@click.option("--json-output", "--json", "as_json", is_flag=True,
              help="Print the outcome summary as JSON at the end.")
@click.pass_context
def lsp(ctx: click.Context, assume_yes: bool, as_json: bool) -> None:
    """Install nvim-lspconfig, package managers and language servers.

    Examples:

        devstrap lsp

        devstrap --config ~/dotfiles/devstrap.yml lsp --yes
    """
    from devstrap.core.use_cases.lsp_setup import run_lsp_setup

    config = load_config_or_exit(ctx)
    reporter = ConsoleReporter(quiet=ctx.obj.get("quiet", False))

    result = run_lsp_setup(config, reporter, make_confirm(assume_yes))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))

    if result.error:
        sys.exit(1)
