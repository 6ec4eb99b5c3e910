"""
Python adapter — command-line tools via uv.
"""

from __future__ import annotations

from devstrap.adapters.base import CommandInstaller
from devstrap.core.models.target import InstallMethod, InstallTarget


class UvToolInstaller(CommandInstaller):
    """``uv tool install <reference>`` into uv's tool bin directory."""

    requires = "uv"

    @property
    def method(self) -> InstallMethod:
        return InstallMethod.UV_TOOL

    def default_command(self, target: InstallTarget) -> list[str]:
        return ["uv", "tool", "install", target.reference]
