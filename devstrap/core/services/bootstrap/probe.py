"""
Existence probe — is a target already satisfied?

Read-only.  ``probe`` and ``command_exists`` never raise: anything that
prevents the check from completing counts as "not present".  ``require``
turns a missing hard prerequisite into ``PrerequisiteMissing``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from devstrap.core.context import ProcessContext
from devstrap.core.errors import PrerequisiteMissing
from devstrap.core.models.target import InstallMethod, InstallTarget, Prerequisite

logger = logging.getLogger(__name__)


def command_exists(name: str, ctx: ProcessContext) -> bool:
    """``command -v name`` against the context's PATH."""
    try:
        return ctx.which(name) is not None
    except OSError as e:
        logger.debug("Probe for %s failed: %s", name, e)
        return False


def missing_commands(target: InstallTarget, ctx: ProcessContext) -> list[str]:
    """Verify names of ``target`` that do not resolve."""
    return [name for name in target.verify if not command_exists(name, ctx)]


def probe(target: InstallTarget, ctx: ProcessContext) -> bool:
    """Whether ``target`` is already present.

    Path targets check their location; archive downloads additionally
    need at least one extracted file in it.  Command targets need every
    name in ``target.verify`` to resolve.
    """
    if target.path is not None:
        return _path_present(target, ctx)
    return not missing_commands(target, ctx)


def _path_present(target: InstallTarget, ctx: ProcessContext) -> bool:
    location = Path(ctx.expand(target.path or ""))
    try:
        if target.method == InstallMethod.DOWNLOAD:
            return location.is_dir() and any(p.is_file() for p in location.rglob("*"))
        return location.is_dir()
    except OSError as e:
        logger.debug("Probe for %s failed: %s", location, e)
        return False


def require(prerequisites: tuple[Prerequisite, ...] | list[Prerequisite], ctx: ProcessContext) -> None:
    """Fail fast on the first hard prerequisite that does not resolve.

    Raises:
        PrerequisiteMissing: Naming the tool and its remediation hint.
    """
    for prereq in prerequisites:
        if not command_exists(prereq.tool, ctx):
            raise PrerequisiteMissing(prereq.tool, hint=prereq.hint)
