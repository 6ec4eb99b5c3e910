"""
Homebrew adapter — the system package manager.
"""

from __future__ import annotations

from devstrap.adapters.base import CommandInstaller
from devstrap.core.models.target import InstallMethod, InstallTarget


class BrewInstaller(CommandInstaller):
    """``brew install <reference>``.

    Homebrew itself is installed by an earlier phase and is not
    re-checked here; a missing ``brew`` fails the target.
    """

    requires = "brew"

    @property
    def method(self) -> InstallMethod:
        return InstallMethod.BREW

    def default_command(self, target: InstallTarget) -> list[str]:
        return ["brew", "install", target.reference]
