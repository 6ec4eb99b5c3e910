"""
Git adapter — clone a repository into place, pull to update.
"""

from __future__ import annotations

import logging
from pathlib import Path

from devstrap.adapters.base import Installer
from devstrap.core.context import ProcessContext
from devstrap.core.errors import InstallError, UpdateFailed
from devstrap.core.models.target import InstallMethod, InstallTarget

logger = logging.getLogger(__name__)


class GitCloneInstaller(Installer):
    """``git clone <reference> <path>``; update is ``git pull`` in ``path``."""

    requires = "git"

    @property
    def method(self) -> InstallMethod:
        return InstallMethod.GIT_CLONE

    def install(self, target: InstallTarget, ctx: ProcessContext) -> None:
        dest = self._dest(target, ctx)
        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise InstallError(
                f"Cannot create {dest.parent}: {e}", target_id=target.id,
            ) from e

        logger.info("Cloning %s into %s", target.reference, dest)
        self.run(["git", "clone", target.reference, str(dest)], ctx, target)

    def update(self, target: InstallTarget, ctx: ProcessContext) -> None:
        dest = self._dest(target, ctx)
        logger.info("Pulling %s", dest)
        self.run(["git", "pull"], ctx, target, cwd=str(dest), error_cls=UpdateFailed)

    @staticmethod
    def _dest(target: InstallTarget, ctx: ProcessContext) -> Path:
        if not target.path:
            raise InstallError(
                f"Clone target '{target.id}' has no destination path",
                target_id=target.id,
            )
        return Path(ctx.expand(target.path))
