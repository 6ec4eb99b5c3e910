"""
Node adapter — npm packages.
"""

from __future__ import annotations

from devstrap.adapters.base import CommandInstaller
from devstrap.core.models.target import InstallMethod, InstallTarget


class NpmInstaller(CommandInstaller):
    """``npm install [--global] <reference>``.

    The scope comes from ``npm_install_scope``.  ``local`` installs into
    ``node_modules`` of the working directory, where nothing lands on
    PATH, so local installs end up unverified.
    """

    requires = "npm"

    @property
    def method(self) -> InstallMethod:
        return InstallMethod.NPM

    def default_command(self, target: InstallTarget) -> list[str]:
        if self.config.npm_install_scope == "global":
            return ["npm", "install", "--global", target.reference]
        return ["npm", "install", target.reference]
