"""
Font setup use case — download Nerd Fonts and register them.

Flow:
    1. Hard prerequisites (``fc-cache``), before anything else
    2. List fonts, ask "install all?"; if not, ask for numbers or ``q``
    3. Download and extract the selected fonts (one phase)
    4. Refresh the font cache, check ``fc-list`` for Nerd Fonts
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from devstrap.adapters.base import CommandRunner
from devstrap.adapters.registry import InstallerRegistry
from devstrap.adapters.shell.command import run_command
from devstrap.core.config.loader import BootstrapConfig
from devstrap.core.context import ProcessContext
from devstrap.core.data.catalog import FONT_PREREQUISITES, NERD_FONTS, font_phase
from devstrap.core.errors import PrerequisiteMissing
from devstrap.core.models.target import FontSpec
from devstrap.core.observability.reporter import Reporter
from devstrap.core.services.bootstrap.fonts import installed_nerd_fonts, refresh_font_cache
from devstrap.core.services.bootstrap.probe import require
from devstrap.core.services.bootstrap.runner import StepRunner
from devstrap.core.services.bootstrap.selection import is_quit, parse_selection
from devstrap.core.use_cases.result import BootstrapResult, report_summary

logger = logging.getLogger(__name__)

SELECTION_PROMPT = "Enter font numbers to install (e.g., '1 3 4' or 'q' to quit)"
_DEFAULT_FAMILY = "JetBrainsMono Nerd Font"


def run_font_setup(
    config: BootstrapConfig,
    reporter: Reporter,
    confirm: Callable[[str], bool],
    prompt: Callable[[str], str],
    *,
    registry: InstallerRegistry | None = None,
    ctx: ProcessContext | None = None,
    run: CommandRunner = run_command,
    fonts: tuple[FontSpec, ...] = NERD_FONTS,
) -> BootstrapResult:
    """Install Nerd Fonts into ``config.fonts_dir``.

    Args:
        config: Resolved configuration.
        reporter: Progress output.
        confirm: Yes/no prompt ("install all fonts?").
        prompt: Free-text prompt for the font selection.
        registry: Method dispatcher (default: built-in installers).
        ctx: Process context (default: snapshot of ``os.environ``).
        run: Command runner for ``fc-cache`` / ``fc-list``.
        fonts: Font catalog to offer.

    Returns:
        BootstrapResult; ``error`` set when a hard prerequisite is
        missing, ``cancelled`` when the operator quits.
    """
    ctx = ctx or ProcessContext.from_environ()
    reporter.section("Nerd Fonts Installation")

    try:
        require(FONT_PREREQUISITES, ctx)
    except PrerequisiteMissing as e:
        reporter.error(f"{e}. Please install it first:")
        if e.hint:
            reporter.detail(e.hint)
        return BootstrapResult(error=str(e), hint=e.hint)

    reporter.section("Available Fonts")
    _list_fonts(reporter, fonts)

    if confirm("Do you want to install all fonts?"):
        selected = list(fonts)
    else:
        answer = prompt(SELECTION_PROMPT)
        if is_quit(answer):
            reporter.info("Installation cancelled")
            return BootstrapResult(cancelled=True)
        selected = [fonts[i] for i in parse_selection(answer, len(fonts))]

    if not selected:
        reporter.warning("No valid font numbers selected; nothing to install")
        return BootstrapResult()

    logger.info("Installing fonts: %s", ", ".join(f.stem for f in selected))
    registry = registry or InstallerRegistry.default(config, run)
    runner = StepRunner(registry, reporter, ctx, run=run)
    result = BootstrapResult(phases=[runner.run_phase(font_phase(config, selected))])

    reporter.section("Refreshing Font Cache")
    reporter.info("Updating font cache...")
    if refresh_font_cache(ctx, run):
        reporter.success("Font cache updated")
    else:
        reporter.warning("Font cache refresh failed; run 'fc-cache -f' manually")

    reporter.section("Verification")
    reporter.info("Testing installed fonts...")
    families = installed_nerd_fonts(ctx, run)
    if families:
        reporter.success("Nerd Fonts detected in system")
        reporter.info("Installed Nerd Fonts:")
        for family in families:
            reporter.detail(family)
    else:
        reporter.warning("No Nerd Fonts detected. You may need to log out and back in.")

    _next_steps(reporter, families)
    report_summary(reporter, result)
    reporter.success("Installation complete!")
    return result


def _list_fonts(reporter: Reporter, fonts: tuple[FontSpec, ...]) -> None:
    reporter.info("The following Nerd Fonts are available:")
    for number, font in enumerate(fonts, start=1):
        reporter.detail(f"{number}. {font.display_name}")


def _next_steps(reporter: Reporter, families: list[str]) -> None:
    # Patched family names differ from archive names (Meslo is MesloLGS).
    family = families[0].split(",")[0].strip() if families else _DEFAULT_FAMILY
    reporter.section("Next Steps")
    reporter.detail("1. Configure your terminal to use a Nerd Font, e.g.:")
    reporter.detail(f'   Windows Terminal: Appearance → Font face → "{family}"')
    reporter.detail(f"   Alacritty: font.normal.family = \"{family}\"")
    reporter.detail(f"   Kitty: font_family {family}")
    reporter.detail("2. Restart your terminal")
    reporter.detail('3. Test the icons: echo -e "\\ue0b0 \\uf113 \\uf114 \\uf09b"')
