"""
Reporter contract — operator-facing progress output.

Core services report progress through this protocol and never decide
anything based on it.  The terminal implementation lives in
``devstrap.ui.cli.reporter``.
"""

from __future__ import annotations

from typing import Protocol


class Reporter(Protocol):
    """Four severities plus section banners and indented detail lines."""

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def section(self, title: str) -> None: ...

    def detail(self, message: str) -> None: ...
