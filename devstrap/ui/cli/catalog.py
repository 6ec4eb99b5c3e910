"""
CLI command listing everything devstrap can install.
"""

from __future__ import annotations

import json

import click

from devstrap.ui.cli.common import load_config_or_exit


@click.command("list")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_targets(ctx: click.Context, as_json: bool) -> None:
    """List install targets and whether each is already present."""
    from devstrap.adapters.registry import InstallerRegistry
    from devstrap.core.context import ProcessContext
    from devstrap.core.data.catalog import all_targets
    from devstrap.core.services.bootstrap.probe import probe

    config = load_config_or_exit(ctx)
    process_ctx = ProcessContext.from_environ()
    rows = [
        {
            "phase": phase,
            "id": target.id,
            "method": target.method.value,
            "family": target.family.value,
            "reference": target.reference,
            "description": target.description,
            "installed": probe(target, process_ctx),
        }
        for phase, target in all_targets(config)
    ]

    if as_json:
        click.echo(json.dumps(rows, indent=2))
        return

    current = None
    for row in rows:
        if row["phase"] != current:
            current = row["phase"]
            click.echo()
            click.secho(f"📦 {current}", fg="cyan", bold=True)
        icon = "✅" if row["installed"] else "⬜"
        click.echo(f"   {icon} {row['id']:<22} {row['method']:<10} {row['description']}")

    click.echo()
    click.secho("🔧 installers", fg="cyan", bold=True)
    status = InstallerRegistry.default(config).installer_status(process_ctx)
    for method, info in status.items():
        if info["requires"] is None:
            continue
        color = "green" if info["available"] else "yellow"
        state = "available" if info["available"] else "not found"
        click.echo(f"   {method:<10} {info['requires']:<8} ", nl=False)
        click.secho(state, fg=color)
    click.echo()
