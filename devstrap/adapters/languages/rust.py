"""
Rust adapter — crates via cargo.
"""

from __future__ import annotations

from devstrap.adapters.base import CommandInstaller
from devstrap.core.models.target import InstallMethod, InstallTarget


class CargoInstaller(CommandInstaller):
    """``cargo install <reference>``; git builds use a per-target command."""

    requires = "cargo"

    @property
    def method(self) -> InstallMethod:
        return InstallMethod.CARGO

    def default_command(self, target: InstallTarget) -> list[str]:
        return ["cargo", "install", target.reference]
