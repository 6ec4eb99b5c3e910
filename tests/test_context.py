"""
Tests for ProcessContext — PATH handling and expansion.
"""

import os
from pathlib import Path

from conftest import make_tool

from devstrap.core.context import ProcessContext


class TestExpand:
    def test_tilde(self, home: Path):
        ctx = ProcessContext(env={"HOME": str(home)}, home=home)
        assert ctx.expand("~/.cargo/bin") == f"{home}/.cargo/bin"

    def test_variables(self):
        ctx = ProcessContext(env={"A": "one", "B": "two"})
        assert ctx.expand("$A/${B}/c") == "one/two/c"

    def test_longest_name_wins(self):
        ctx = ProcessContext(env={"HOME": "/h", "HOMEBREW_PREFIX": "/brew"})
        assert ctx.expand("$HOMEBREW_PREFIX/bin") == "/brew/bin"

    def test_unknown_variable_left_alone(self):
        ctx = ProcessContext(env={})
        assert ctx.expand("$NOPE/bin") == "$NOPE/bin"


class TestPath:
    def test_env_is_a_copy(self):
        source = {"PATH": "/usr/bin"}
        ctx = ProcessContext(env=source)
        ctx.env["PATH"] = "/changed"
        ctx.set_var("X", "1")
        assert ctx.path == "/usr/bin"
        assert "X" not in source

    def test_does_not_touch_os_environ(self):
        before = os.environ.get("PATH")
        ctx = ProcessContext.from_environ()
        ctx.prepend_path("/definitely/not/real")
        assert os.environ.get("PATH") == before

    def test_prepend(self):
        ctx = ProcessContext(env={"PATH": os.pathsep.join(["/a", "/b"])})
        assert ctx.prepend_path("/b")
        assert ctx.path_entries() == ["/b", "/a"]
        assert not ctx.prepend_path("/b")

    def test_which_uses_context_path(self, ctx: ProcessContext, bin_dir: Path):
        assert ctx.which("marksman") is None
        make_tool(bin_dir, "marksman")
        assert ctx.which("marksman") == str(bin_dir / "marksman")

    def test_apply_post_path_only_existing(self, ctx: ProcessContext, home: Path):
        (home / ".cargo" / "bin").mkdir(parents=True)
        added = ctx.apply_post_path(("~/.local/bin", "~/.cargo/bin"))
        assert added == [f"{home}/.cargo/bin"]
        assert ctx.path_entries()[0] == f"{home}/.cargo/bin"

    def test_apply_post_path_keeps_order(self, ctx: ProcessContext, home: Path):
        (home / "one").mkdir()
        (home / "two").mkdir()
        ctx.apply_post_path(("~/one", "~/two"))
        assert ctx.path_entries()[:2] == [f"{home}/one", f"{home}/two"]

    def test_mutation_visible_to_later_lookups(self, ctx: ProcessContext, home: Path):
        cargo_bin = home / ".cargo" / "bin"
        make_tool(cargo_bin, "cargo")
        assert ctx.which("cargo") is None
        ctx.apply_post_path(("~/.cargo/bin",))
        assert ctx.which("cargo") == str(cargo_bin / "cargo")
