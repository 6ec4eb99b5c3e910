"""Adapters — installers for every install method.

Public re-exports for convenient access.
"""

from devstrap.adapters.base import CommandInstaller, Installer
from devstrap.adapters.registry import InstallerRegistry

__all__ = [
    "CommandInstaller",
    "Installer",
    "InstallerRegistry",
]
