"""
Nix adapter — flakes from the nix-community organisation.
"""

from __future__ import annotations

from devstrap.adapters.base import CommandInstaller
from devstrap.core.models.target import InstallMethod, InstallTarget

NIX_FLAKE_PREFIX = "github:nix-community/"


class NixInstaller(CommandInstaller):
    """``nix profile install github:nix-community/<reference>``.

    Nix is optional: the runner checks ``is_available`` first and skips
    the target with a warning when ``nix`` is absent.
    """

    requires = "nix"

    @property
    def method(self) -> InstallMethod:
        return InstallMethod.NIX

    def default_command(self, target: InstallTarget) -> list[str]:
        return ["nix", "profile", "install", f"{NIX_FLAKE_PREFIX}{target.reference}"]
