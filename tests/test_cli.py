"""
Tests for CLI commands and global options.
"""

import json
from pathlib import Path

from click.testing import CliRunner

from devstrap.main import cli


def _config(tmp_path: Path, extra: str = "") -> Path:
    path = tmp_path / "config.yml"
    path.write_text(
        f"plugin_dir: {tmp_path / 'plugin'}\n"
        f"fonts_dir: {tmp_path / 'fonts'}\n"
        f"{extra}"
    )
    return path


class TestCLIGlobal:
    def test_help(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "lsp" in result.output
        assert "fonts" in result.output

    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_bad_config(self, tmp_path: Path):
        path = tmp_path / "bad.yml"
        path.write_text("npm_install_scope: sideways\n")
        result = CliRunner().invoke(cli, ["--config", str(path), "lsp"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output


class TestLspCommand:
    def test_decline(self, tmp_path: Path):
        config = _config(tmp_path)
        result = CliRunner().invoke(cli, ["--config", str(config), "lsp"], input="n\n")
        assert result.exit_code == 0
        assert "Installation cancelled by user" in result.output
        assert "[INFO]" in result.output
        assert not (tmp_path / "plugin").exists()

    def test_decline_json(self, tmp_path: Path):
        config = _config(tmp_path)
        result = CliRunner().invoke(
            cli, ["--config", str(config), "lsp", "--json"], input="n\n",
        )
        assert result.exit_code == 0
        payload = result.output[result.output.index("{"):]
        assert json.loads(payload)["cancelled"] is True


class TestFontsCommand:
    def test_missing_fc_cache(self, tmp_path: Path):
        config = _config(tmp_path)
        empty = tmp_path / "empty-bin"
        empty.mkdir()
        result = CliRunner(env={"PATH": str(empty)}).invoke(
            cli, ["--config", str(config), "fonts"],
        )
        assert result.exit_code == 1
        assert "fc-cache is not installed" in result.output
        assert not (tmp_path / "fonts").exists()


class TestListCommand:
    def test_json(self, tmp_path: Path):
        config = _config(tmp_path, "skip: [nixd]\n")
        result = CliRunner().invoke(cli, ["--config", str(config), "list", "--json"])
        assert result.exit_code == 0
        rows = json.loads(result.output)
        ids = [r["id"] for r in rows]
        assert "tinymist" in ids
        assert "nixd" not in ids
        plugin = next(r for r in rows if r["id"] == "nvim-lspconfig")
        assert plugin["installed"] is False
        assert plugin["method"] == "git-clone"

    def test_table(self, tmp_path: Path):
        config = _config(tmp_path)
        result = CliRunner().invoke(cli, ["--config", str(config), "list"])
        assert result.exit_code == 0
        assert "language-servers" in result.output
        assert "JetBrainsMono" in result.output
        assert "installers" in result.output


class TestConfigCheck:
    def test_valid(self, tmp_path: Path):
        config = _config(tmp_path, "npm_install_scope: local\n")
        result = CliRunner().invoke(cli, ["--config", str(config), "config", "check"])
        assert result.exit_code == 0
        assert "Configuration is valid" in result.output
        assert "local" in result.output

    def test_valid_json(self, tmp_path: Path):
        config = _config(tmp_path)
        result = CliRunner().invoke(
            cli, ["--config", str(config), "config", "check", "--json"],
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["valid"] is True
        assert data["settings"]["nerd_fonts_version"] == "v3.1.1"

    def test_invalid(self, tmp_path: Path):
        path = tmp_path / "bad.yml"
        path.write_text("skip: [unclosed\n")
        result = CliRunner().invoke(cli, ["--config", str(path), "config", "check"])
        assert result.exit_code == 1
        assert "Configuration error" in result.output

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "bad.yml"
        path.write_text("unknown: 1\n")
        result = CliRunner().invoke(
            cli, ["--config", str(path), "config", "check", "--json"],
        )
        assert result.exit_code == 1
        assert json.loads(result.output)["valid"] is False
