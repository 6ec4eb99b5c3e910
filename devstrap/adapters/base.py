"""
Installer base — the contract between the step runner and install methods.

Each ``InstallMethod`` has exactly one ``Installer``.  The runner only
talks to installers through the ``InstallerRegistry``, never directly.

Unlike a probe, an installer signals failure by raising an
``InstallError`` subclass.  The runner catches it and records the
target as failed; nothing an installer raises aborts a phase.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from devstrap.adapters.shell.command import run_command
from devstrap.core.config.loader import BootstrapConfig
from devstrap.core.context import ProcessContext
from devstrap.core.errors import InstallCommandFailed, InstallError, UpdateFailed
from devstrap.core.models.target import InstallMethod, InstallTarget

logger = logging.getLogger(__name__)

CommandRunner = Callable[..., dict[str, Any]]


class Installer(ABC):
    """Abstract base class for all install methods.

    To add a method:
        1. Add the member to ``InstallMethod``
        2. Subclass Installer and implement ``method`` and ``install``
        3. Register it in ``InstallerRegistry.default``
    """

    #: Binary this method delegates to; None when nothing beyond the
    #: interpreter is needed.
    requires: str | None = None

    def __init__(
        self,
        config: BootstrapConfig | None = None,
        runner: CommandRunner = run_command,
    ):
        self.config = config or BootstrapConfig()
        self._run_command = runner

    @property
    @abstractmethod
    def method(self) -> InstallMethod:
        """The install method this installer handles."""

    def is_available(self, ctx: ProcessContext) -> bool:
        """Whether the tool this method delegates to resolves.  Never raises."""
        if self.requires is None:
            return True
        return ctx.which(self.requires) is not None

    @abstractmethod
    def install(self, target: InstallTarget, ctx: ProcessContext) -> None:
        """Acquire ``target``.

        Raises:
            InstallError: On any failure.
        """

    def update(self, target: InstallTarget, ctx: ProcessContext) -> None:
        """Bring an already-present ``target`` up to date."""
        raise UpdateFailed(
            f"{self.method.value} installs cannot be updated",
            target_id=target.id,
        )

    # ── Helpers ─────────────────────────────────────────────────

    def run(
        self,
        cmd: list[str],
        ctx: ProcessContext,
        target: InstallTarget,
        *,
        cwd: str | None = None,
        error_cls: type[InstallError] = InstallCommandFailed,
    ) -> dict[str, Any]:
        """Run ``cmd`` with the configured timeout and output mode.

        Raises:
            InstallCommandFailed: (or ``error_cls``) if the command fails.
        """
        result = self._run_command(
            cmd,
            ctx,
            timeout=self.config.command_timeout,
            cwd=cwd,
            capture=not self.config.stream_output,
        )
        if not result["ok"]:
            detail = result.get("stderr", "").strip().splitlines()
            message = f"{' '.join(cmd)}: {result['error']}"
            if detail:
                message = f"{message}: {detail[-1]}"
            hint = target.hint
            if result.get("returncode") == 127:
                hint = f"Make sure {cmd[0]} is installed and on PATH."
            raise error_cls(message, target_id=target.id, hint=hint)
        return result

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} method={self.method.value!r}>"


class CommandInstaller(Installer):
    """Installer that runs one package-manager command per target.

    Subclasses provide ``default_command``; a target's own ``command``
    replaces it when set.
    """

    @abstractmethod
    def default_command(self, target: InstallTarget) -> list[str]:
        """Method-level install command for ``target``."""

    def command_for(self, target: InstallTarget) -> list[str]:
        if target.command:
            return list(target.command)
        return self.default_command(target)

    def install(self, target: InstallTarget, ctx: ProcessContext) -> None:
        cmd = self.command_for(target)
        logger.info("Installing %s via %s", target.id, self.method.value)
        self.run(cmd, ctx, target)
