"""
CLI commands for the devstrap configuration file.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click


@click.group()
def config() -> None:
    """Configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate the config file and show the resolved settings."""
    from devstrap.core.config.loader import ConfigError, find_config_file, load_config

    config_path: Path | None = ctx.obj.get("config_path")
    source = find_config_file(config_path)

    try:
        resolved = load_config(config_path)
    except ConfigError as e:
        if as_json:
            click.echo(json.dumps({"valid": False, "source": str(source), "error": str(e)}, indent=2))
        else:
            click.secho("❌ Configuration error:", fg="red", bold=True)
            click.echo(f"   • {e}")
            click.echo()
        sys.exit(1)

    settings = resolved.model_dump(mode="json")

    if as_json:
        click.echo(json.dumps(
            {"valid": True, "source": str(source) if source else None, "settings": settings},
            indent=2,
        ))
        return

    click.secho("✅ Configuration is valid", fg="green", bold=True)
    click.echo(f"   Source: {source if source else '(defaults)'}")
    click.echo()
    for key, value in settings.items():
        click.echo(f"   {key:<22} {value}")
    click.echo()
