"""
LSP setup use case — editor plugin, package managers, language servers.

The full vertical slice: confirmation gate, three phases in order,
next steps, completion banner.  The banner is printed even when some
targets failed; the per-target lines above it tell the real story.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from devstrap.adapters.base import CommandRunner
from devstrap.adapters.registry import InstallerRegistry
from devstrap.adapters.shell.command import run_command
from devstrap.core.config.loader import BootstrapConfig
from devstrap.core.context import ProcessContext
from devstrap.core.data.catalog import lsp_phases, verification_commands
from devstrap.core.models.target import InstallPhase
from devstrap.core.observability.reporter import Reporter
from devstrap.core.services.bootstrap.runner import StepRunner
from devstrap.core.use_cases.result import BootstrapResult, report_summary

logger = logging.getLogger(__name__)


def run_lsp_setup(
    config: BootstrapConfig,
    reporter: Reporter,
    confirm: Callable[[str], bool],
    *,
    registry: InstallerRegistry | None = None,
    ctx: ProcessContext | None = None,
    run: CommandRunner = run_command,
) -> BootstrapResult:
    """Bootstrap the Neovim LSP toolchain.

    Args:
        config: Resolved configuration.
        reporter: Progress output.
        confirm: Yes/no prompt.  Asked once before anything happens,
            and again for optional updates of present targets.
        registry: Method dispatcher (default: built-in installers).
        ctx: Process context (default: snapshot of ``os.environ``).
        run: Command runner for auxiliary commands.

    Returns:
        BootstrapResult; ``cancelled`` if the operator declined.
    """
    phases = lsp_phases(config)

    reporter.section("Neovim LSP Setup")
    _announce(reporter, phases)

    if not confirm("Do you want to proceed?"):
        reporter.info("Installation cancelled by user")
        return BootstrapResult(cancelled=True)

    ctx = ctx or ProcessContext.from_environ()
    registry = registry or InstallerRegistry.default(config, run)
    runner = StepRunner(registry, reporter, ctx, confirm=confirm, run=run)

    result = BootstrapResult(phases=runner.run_phases(phases))

    _next_steps(reporter, config, phases)
    report_summary(reporter, result)
    logger.info("LSP setup finished: %s", result.to_dict()["totals"])
    reporter.success("Installation complete!")
    return result


def _announce(reporter: Reporter, phases: list[InstallPhase]) -> None:
    reporter.info("This script will install:")
    for phase in phases:
        for target in phase.targets:
            reporter.detail(f"- {target.label}")


def _next_steps(reporter: Reporter, config: BootstrapConfig, phases: list[InstallPhase]) -> None:
    reporter.section("Next steps")
    reporter.detail("1. Restart your terminal or source your shell profile:")
    reporter.detail("   source ~/.bashrc    # or ~/.zshrc for zsh")
    reporter.detail("2. Verify installations:")
    for command in verification_commands(config):
        reporter.detail(f"   {command}")
    reporter.detail("3. Enable the servers in ~/.config/nvim/init.lua, e.g.:")
    reporter.detail("   vim.lsp.enable('basedpyright')")

    path_entries: list[str] = []
    for phase in phases:
        for target in phase.targets:
            path_entries.extend(p for p in target.post_path if p not in path_entries)
    if path_entries:
        reporter.detail("4. Add these paths to your shell profile if not already present:")
        for entry in path_entries:
            if entry.startswith("~"):
                entry = "$HOME" + entry[1:]
            reporter.detail(f'   export PATH="{entry}:$PATH"')
