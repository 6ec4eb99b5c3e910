"""System and ecosystem package managers — Homebrew, Nix."""

from devstrap.adapters.system.brew import BrewInstaller
from devstrap.adapters.system.nix import NixInstaller

__all__ = ["BrewInstaller", "NixInstaller"]
