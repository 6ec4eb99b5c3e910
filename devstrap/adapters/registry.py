"""
Installer registry — dispatch from install method to installer.

The registry is the method dispatcher: the step runner hands it a
target and it routes the call to the one installer registered for the
target's method.  ``check_complete`` enforces that every member of the
closed ``InstallMethod`` enum is covered, so a new method cannot be
added to the catalog without an installer behind it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from devstrap.adapters.base import CommandRunner, Installer
from devstrap.adapters.download.archive import ArchiveInstaller
from devstrap.adapters.languages import CargoInstaller, NpmInstaller, UvToolInstaller
from devstrap.adapters.shell.command import run_command
from devstrap.adapters.shell.script import ScriptInstaller
from devstrap.adapters.system import BrewInstaller, NixInstaller
from devstrap.adapters.vcs.git import GitCloneInstaller
from devstrap.core.config.loader import BootstrapConfig
from devstrap.core.context import ProcessContext
from devstrap.core.errors import InstallError
from devstrap.core.models.target import InstallMethod, InstallTarget

logger = logging.getLogger(__name__)

_DEFAULT_INSTALLERS: tuple[type[Installer], ...] = (
    GitCloneInstaller,
    ArchiveInstaller,
    ScriptInstaller,
    BrewInstaller,
    NpmInstaller,
    CargoInstaller,
    UvToolInstaller,
    NixInstaller,
)


class InstallerRegistry:
    """Central registry and dispatcher for installers."""

    def __init__(self, installers: Iterable[Installer] = ()):
        self._installers: dict[InstallMethod, Installer] = {}
        for installer in installers:
            self.register(installer)

    @classmethod
    def default(
        cls,
        config: BootstrapConfig | None = None,
        runner: CommandRunner = run_command,
    ) -> InstallerRegistry:
        """Registry with the built-in installer for every method."""
        registry = cls(klass(config, runner) for klass in _DEFAULT_INSTALLERS)
        registry.check_complete()
        return registry

    def register(self, installer: Installer) -> None:
        method = installer.method
        if method in self._installers:
            logger.warning("Overwriting existing installer for: %s", method.value)
        self._installers[method] = installer
        logger.debug("Registered installer: %r", installer)

    def get(self, method: InstallMethod) -> Installer | None:
        return self._installers.get(method)

    def methods(self) -> list[InstallMethod]:
        return list(self._installers)

    def check_complete(self) -> None:
        """Raise ``ValueError`` unless every ``InstallMethod`` has an installer."""
        missing = [m.value for m in InstallMethod if m not in self._installers]
        if missing:
            raise ValueError(f"No installer registered for: {', '.join(missing)}")

    def installer_status(self, ctx: ProcessContext) -> dict[str, dict[str, Any]]:
        """Availability of every registered installer's backing tool."""
        return {
            method.value: {
                "method": method.value,
                "family": method.family.value,
                "requires": installer.requires,
                "available": installer.is_available(ctx),
                "type": installer.__class__.__name__,
            }
            for method, installer in self._installers.items()
        }

    # ── Dispatch ────────────────────────────────────────────────

    def _resolve(self, target: InstallTarget) -> Installer:
        installer = self._installers.get(target.method)
        if installer is None:
            raise InstallError(
                f"No installer registered for '{target.method.value}'",
                target_id=target.id,
            )
        return installer

    def requirement(self, target: InstallTarget) -> str | None:
        """Tool the target's installer delegates to, if any."""
        return self._resolve(target).requires

    def is_available(self, target: InstallTarget, ctx: ProcessContext) -> bool:
        return self._resolve(target).is_available(ctx)

    def install(self, target: InstallTarget, ctx: ProcessContext) -> None:
        """Acquire ``target`` with its method's installer.

        Raises:
            InstallError: If no installer is registered or acquisition fails.
        """
        self._resolve(target).install(target, ctx)

    def update(self, target: InstallTarget, ctx: ProcessContext) -> None:
        self._resolve(target).update(target, ctx)
