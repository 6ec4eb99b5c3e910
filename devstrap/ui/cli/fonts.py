"""
CLI command for the Nerd Fonts installer.

Thin wrapper over ``devstrap.core.use_cases.font_setup``.
"""

from __future__ import annotations

import json
import sys

import click

from devstrap.ui.cli.common import load_config_or_exit, make_confirm, prompt_text
from devstrap.ui.cli.reporter import ConsoleReporter


@click.command()
@click.option("--yes", "-y", "assume_yes", is_flag=True, help="Install all fonts without asking.")
@click.option("--json-output", "--json", "as_json", is_flag=True,
              help="Print the outcome summary as JSON at the end.")
@click.pass_context
def fonts(ctx: click.Context, assume_yes: bool, as_json: bool) -> None:
    """Download and install Nerd Fonts for the terminal.

    Without --yes, asks whether to install every font, and otherwise
    which ones (e.g. "1 3", or "q" to quit).
    """
    from devstrap.core.use_cases.font_setup import run_font_setup

    config = load_config_or_exit(ctx)
    reporter = ConsoleReporter(quiet=ctx.obj.get("quiet", False))

    result = run_font_setup(config, reporter, make_confirm(assume_yes), prompt_text)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))

    if result.error:
        sys.exit(1)
