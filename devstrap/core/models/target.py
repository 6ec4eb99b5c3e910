"""
Install target models — what gets installed, and how.

Targets are constructed once, at import time, from typed records in
``devstrap.core.data.catalog``.  Nothing is decoded from delimited
strings at iteration time.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class MethodFamily(str, Enum):
    """Broad way a tool is acquired."""

    DIRECT_DOWNLOAD = "direct-download"
    SYSTEM_PACKAGE_MANAGER = "system-package-manager"
    TOOLCHAIN_INSTALLER = "language-toolchain-installer"
    ECOSYSTEM_INSTALLER = "ecosystem-installer"


class InstallMethod(str, Enum):
    """Concrete acquisition method.  Closed: every member needs an installer."""

    GIT_CLONE = "git-clone"
    DOWNLOAD = "download"
    SCRIPT = "script"
    BREW = "brew"
    NPM = "npm"
    CARGO = "cargo"
    UV_TOOL = "uv-tool"
    NIX = "nix"

    @property
    def family(self) -> MethodFamily:
        return _FAMILIES[self]


_FAMILIES: dict[InstallMethod, MethodFamily] = {
    InstallMethod.GIT_CLONE: MethodFamily.DIRECT_DOWNLOAD,
    InstallMethod.DOWNLOAD: MethodFamily.DIRECT_DOWNLOAD,
    InstallMethod.SCRIPT: MethodFamily.DIRECT_DOWNLOAD,
    InstallMethod.BREW: MethodFamily.SYSTEM_PACKAGE_MANAGER,
    InstallMethod.NPM: MethodFamily.TOOLCHAIN_INSTALLER,
    InstallMethod.CARGO: MethodFamily.TOOLCHAIN_INSTALLER,
    InstallMethod.UV_TOOL: MethodFamily.TOOLCHAIN_INSTALLER,
    InstallMethod.NIX: MethodFamily.ECOSYSTEM_INSTALLER,
}


class InstallTarget(BaseModel):
    """One installable tool.

    ``id`` is the name the probe resolves before AND after installing.
    When the binaries that prove the install differ from ``id`` (rustup
    provides ``rustc`` and ``cargo``; the ``tinymist-cli`` crate provides
    ``tinymist``), list them in ``verify``.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    method: InstallMethod
    reference: str
    description: str = ""

    verify: tuple[str, ...] = ()              # binaries proving the install
    command: tuple[str, ...] | None = None    # per-target command override
    path: str | None = None                   # probe a location, not a command
    post_path: tuple[str, ...] = ()           # PATH entries to add afterwards
    script_args: tuple[str, ...] = ()         # arguments for installer scripts
    interpreter: str = "sh"                   # runs installer scripts
    version_args: tuple[str, ...] | None = None
    updatable: bool = False
    hint: str = ""

    @model_validator(mode="before")
    @classmethod
    def _default_verify(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("verify") and data.get("path") is None:
            data = {**data, "verify": (data.get("id", ""),)}
        return data

    @property
    def family(self) -> MethodFamily:
        return self.method.family

    @property
    def label(self) -> str:
        """``description (id)`` as shown in progress lines."""
        if self.description:
            return f"{self.description} ({self.id})"
        return self.id


class Prerequisite(BaseModel):
    """An ambient tool some targets of a phase cannot be installed without."""

    model_config = ConfigDict(frozen=True)

    tool: str
    methods: tuple[InstallMethod, ...] = ()   # empty = every target of the phase
    hint: str = ""

    def applies_to(self, target: InstallTarget) -> bool:
        return not self.methods or target.method in self.methods


class InstallPhase(BaseModel):
    """Ordered group of targets processed together."""

    model_config = ConfigDict(frozen=True)

    name: str
    title: str
    targets: tuple[InstallTarget, ...] = Field(default_factory=tuple)
    prerequisites: tuple[Prerequisite, ...] = ()

    @model_validator(mode="after")
    def _unique_ids(self) -> InstallPhase:
        seen: set[str] = set()
        for target in self.targets:
            if target.id in seen:
                raise ValueError(f"Duplicate target id in phase '{self.name}': {target.id}")
            seen.add(target.id)
        return self

    def without(self, ids: set[str] | frozenset[str]) -> InstallPhase:
        """Copy of this phase with the given target ids left out."""
        if not ids:
            return self
        kept = tuple(t for t in self.targets if t.id not in ids)
        return self.model_copy(update={"targets": kept})


class FontSpec(BaseModel):
    """Nerd Font release asset, keyed by its archive stem."""

    model_config = ConfigDict(frozen=True)

    stem: str
    display_name: str
