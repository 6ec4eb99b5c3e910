"""
Tests for the existence probe.
"""

from pathlib import Path

import pytest
from conftest import make_tool

from devstrap.core.context import ProcessContext
from devstrap.core.errors import PrerequisiteMissing
from devstrap.core.models.target import InstallMethod, InstallTarget, Prerequisite
from devstrap.core.services.bootstrap.probe import (
    command_exists,
    missing_commands,
    probe,
    require,
)


class TestCommandProbe:
    def test_absent(self, ctx: ProcessContext):
        assert not command_exists("texlab", ctx)

    def test_present(self, ctx: ProcessContext, bin_dir: Path):
        make_tool(bin_dir, "texlab")
        assert command_exists("texlab", ctx)

    def test_not_executable(self, ctx: ProcessContext, bin_dir: Path):
        (bin_dir / "texlab").write_text("")
        assert not command_exists("texlab", ctx)

    def test_every_verify_name_needed(self, ctx: ProcessContext, bin_dir: Path):
        target = InstallTarget(
            id="rustc", method=InstallMethod.SCRIPT, reference="x",
            verify=("rustc", "cargo"),
        )
        make_tool(bin_dir, "rustc")
        assert not probe(target, ctx)
        assert missing_commands(target, ctx) == ["cargo"]
        make_tool(bin_dir, "cargo")
        assert probe(target, ctx)

    def test_probe_uses_verify_not_id(self, ctx: ProcessContext, bin_dir: Path):
        target = InstallTarget(
            id="tinymist", method=InstallMethod.CARGO, reference="tinymist-cli",
            verify=("tinymist",),
        )
        make_tool(bin_dir, "tinymist")
        assert probe(target, ctx)


class TestPathProbe:
    def test_clone_directory(self, ctx: ProcessContext, home: Path):
        target = InstallTarget(
            id="nvim-lspconfig", method=InstallMethod.GIT_CLONE, reference="x",
            path="~/plugin",
        )
        assert not probe(target, ctx)
        (home / "plugin").mkdir()
        assert probe(target, ctx)

    def test_download_needs_files(self, ctx: ProcessContext, tmp_path: Path):
        dest = tmp_path / "fonts" / "Hack"
        target = InstallTarget(
            id="Hack", method=InstallMethod.DOWNLOAD, reference="x", path=str(dest),
        )
        dest.mkdir(parents=True)
        assert not probe(target, ctx)
        (dest / "HackNerdFont-Regular.ttf").write_bytes(b"\0")
        assert probe(target, ctx)

    def test_file_is_not_a_directory(self, ctx: ProcessContext, tmp_path: Path):
        (tmp_path / "plugin").write_text("")
        target = InstallTarget(
            id="p", method=InstallMethod.GIT_CLONE, reference="x",
            path=str(tmp_path / "plugin"),
        )
        assert not probe(target, ctx)


class TestRequire:
    def test_passes(self, ctx: ProcessContext, bin_dir: Path):
        make_tool(bin_dir, "fc-cache")
        require([Prerequisite(tool="fc-cache")], ctx)

    def test_raises_with_hint(self, ctx: ProcessContext):
        with pytest.raises(PrerequisiteMissing) as exc:
            require([Prerequisite(tool="fc-cache", hint="apt install fontconfig")], ctx)
        assert exc.value.tool == "fc-cache"
        assert exc.value.hint == "apt install fontconfig"
        assert "fc-cache is not installed" in str(exc.value)
