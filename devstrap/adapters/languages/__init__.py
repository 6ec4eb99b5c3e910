"""Language toolchain installers — npm, uv, cargo."""

from devstrap.adapters.languages.node import NpmInstaller
from devstrap.adapters.languages.python import UvToolInstaller
from devstrap.adapters.languages.rust import CargoInstaller

__all__ = ["CargoInstaller", "NpmInstaller", "UvToolInstaller"]
