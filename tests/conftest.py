"""
Shared test fixtures and configuration.
"""

from __future__ import annotations

import os
import stat
import zipfile
from pathlib import Path

import pytest

from devstrap.core.config.loader import BootstrapConfig
from devstrap.core.context import ProcessContext


class RecordingReporter:
    """Reporter that keeps every line instead of printing it."""

    def __init__(self):
        self.lines: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.lines.append(("info", message))

    def success(self, message: str) -> None:
        self.lines.append(("success", message))

    def warning(self, message: str) -> None:
        self.lines.append(("warning", message))

    def error(self, message: str) -> None:
        self.lines.append(("error", message))

    def section(self, title: str) -> None:
        self.lines.append(("section", title))

    def detail(self, message: str) -> None:
        self.lines.append(("detail", message))

    def messages(self, severity: str) -> list[str]:
        return [m for s, m in self.lines if s == severity]

    def text(self) -> str:
        return "\n".join(m for _, m in self.lines)


def make_tool(bin_dir: Path, name: str) -> Path:
    """Create an executable stub named ``name`` in ``bin_dir``."""
    bin_dir.mkdir(parents=True, exist_ok=True)
    tool = bin_dir / name
    tool.write_text("#!/bin/sh\nexit 0\n")
    tool.chmod(tool.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return tool


def make_zip(path: Path, files: dict[str, bytes], *, corrupt: bool = False) -> Path:
    """Write a deflated zip; with ``corrupt`` the compressed data is garbage.

    The archive directory stays intact, so only extraction notices.
    """
    with zipfile.ZipFile(path, "w", zipfile.ZIP_DEFLATED) as zf:
        for name, data in files.items():
            zf.writestr(name, data)
    if not corrupt:
        return path

    raw = bytearray(path.read_bytes())
    with zipfile.ZipFile(path) as zf:
        infos = zf.infolist()
    for info in infos:
        offset = info.header_offset
        name_len = int.from_bytes(raw[offset + 26:offset + 28], "little")
        extra_len = int.from_bytes(raw[offset + 28:offset + 30], "little")
        start = offset + 30 + name_len + extra_len
        raw[start:start + info.compress_size] = b"\xff" * info.compress_size
    path.write_bytes(bytes(raw))
    return path


class FakeRunner:
    """Stand-in for ``run_command`` that records commands.

    Responses are looked up by the first word of the command; anything
    unknown succeeds with empty output.
    """

    def __init__(self, responses: dict[str, dict] | None = None):
        self.responses = responses or {}
        self.calls: list[dict] = []

    def __call__(self, cmd, ctx, **kwargs):
        self.calls.append({"cmd": list(cmd), **kwargs})
        return self.responses.get(cmd[0], {"ok": True, "stdout": "", "elapsed_ms": 0})

    @property
    def commands(self) -> list[list[str]]:
        return [c["cmd"] for c in self.calls]


@pytest.fixture
def home(tmp_path: Path) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def bin_dir(tmp_path: Path) -> Path:
    path = tmp_path / "bin"
    path.mkdir()
    return path


@pytest.fixture
def ctx(home: Path, bin_dir: Path) -> ProcessContext:
    """Isolated process context whose PATH is only ``bin_dir``."""
    return ProcessContext(env={"HOME": str(home), "PATH": str(bin_dir)}, home=home)


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def config(tmp_path: Path) -> BootstrapConfig:
    return BootstrapConfig(
        plugin_dir=tmp_path / "nvim" / "nvim-lspconfig",
        fonts_dir=tmp_path / "fonts",
        stream_output=False,
    )


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, home: Path) -> Path:
    """Point HOME at a temp dir and drop devstrap env vars."""
    monkeypatch.setenv("HOME", str(home))
    for var in list(os.environ):
        if var.startswith("DEVSTRAP_"):
            monkeypatch.delenv(var, raising=False)
    return home
