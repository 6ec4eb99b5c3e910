"""
Mock installer — test double for any install method.

Records every call, succeeds by default, and can be told to fail for
specific targets or to make a target "appear" on PATH after install.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from devstrap.adapters.base import Installer
from devstrap.adapters.registry import InstallerRegistry
from devstrap.core.context import ProcessContext
from devstrap.core.errors import InstallCommandFailed, InstallError
from devstrap.core.models.target import InstallMethod, InstallTarget


class MockInstaller(Installer):
    """Universal mock installer.

    Args:
        method: Method to register under.
        available: What ``is_available`` reports.
        on_install: Called with ``(target, ctx)`` after a successful
            install, e.g. to create the binary the probe looks for.
    """

    def __init__(
        self,
        method: InstallMethod,
        available: bool = True,
        on_install: Callable[[InstallTarget, ProcessContext], None] | None = None,
    ):
        super().__init__()
        self._method = method
        self._available = available
        self._on_install = on_install
        self._failures: dict[str, InstallError] = {}
        self._call_log: list[tuple[str, str]] = []
        self.requires = f"mock-{method.value}"

    @property
    def method(self) -> InstallMethod:
        return self._method

    @property
    def call_log(self) -> list[tuple[str, str]]:
        """``(operation, target_id)`` for every call received."""
        return self._call_log

    @property
    def installed(self) -> list[str]:
        return [tid for op, tid in self._call_log if op == "install"]

    @property
    def call_count(self) -> int:
        return len(self._call_log)

    def is_available(self, ctx: ProcessContext) -> bool:
        return self._available

    def set_failure(self, target_id: str, error: InstallError | None = None) -> None:
        """Configure a specific target to fail."""
        self._failures[target_id] = error or InstallCommandFailed(
            "Mock failure", target_id=target_id,
        )

    def install(self, target: InstallTarget, ctx: ProcessContext) -> None:
        self._call_log.append(("install", target.id))
        if target.id in self._failures:
            raise self._failures[target.id]
        if self._on_install:
            self._on_install(target, ctx)

    def update(self, target: InstallTarget, ctx: ProcessContext) -> None:
        self._call_log.append(("update", target.id))
        if target.id in self._failures:
            raise self._failures[target.id]

    def reset(self) -> None:
        self._call_log.clear()
        self._failures.clear()


def mock_registry(
    on_install: Callable[[InstallTarget, ProcessContext], None] | None = None,
    unavailable: Iterable[InstallMethod] = (),
) -> InstallerRegistry:
    """Registry with a ``MockInstaller`` for every method."""
    unavailable = set(unavailable)
    registry = InstallerRegistry(
        MockInstaller(m, available=m not in unavailable, on_install=on_install)
        for m in InstallMethod
    )
    registry.check_complete()
    return registry
