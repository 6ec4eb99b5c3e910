"""
Font cache helpers — refresh fontconfig and look for Nerd Fonts.
"""

from __future__ import annotations

import logging

from devstrap.adapters.base import CommandRunner
from devstrap.adapters.shell.command import run_command
from devstrap.core.context import ProcessContext

logger = logging.getLogger(__name__)

_NERD_MARKER = "nerd"
_MAX_LISTED = 10


def refresh_font_cache(ctx: ProcessContext, run: CommandRunner = run_command) -> bool:
    """``fc-cache -f``.  Returns whether the refresh succeeded."""
    result = run(["fc-cache", "-f"], ctx, capture=True)
    if not result["ok"]:
        logger.warning("fc-cache failed: %s", result.get("error"))
    return result["ok"]


def installed_nerd_fonts(ctx: ProcessContext, run: CommandRunner = run_command) -> list[str]:
    """Family names of registered Nerd Fonts, sorted, at most ten.

    Parses ``fc-list`` lines of the form ``path: Family,Alias:style=...``.
    Returns an empty list when ``fc-list`` is missing or fails.
    """
    result = run(["fc-list"], ctx, capture=True, max_output=None)
    if not result["ok"]:
        logger.debug("fc-list failed: %s", result.get("error"))
        return []

    families: set[str] = set()
    for line in result["stdout"].splitlines():
        if _NERD_MARKER not in line.lower():
            continue
        parts = line.split(":")
        if len(parts) >= 2 and parts[1].strip():
            families.add(parts[1].strip())
    return sorted(families)[:_MAX_LISTED]
