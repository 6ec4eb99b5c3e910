"""
Tests for the configuration loader.
"""

import textwrap
from pathlib import Path

import pytest

from devstrap.core.config.loader import (
    BootstrapConfig,
    ConfigError,
    find_config_file,
    load_config,
)


def _write(path: Path, content: str) -> Path:
    path.write_text(textwrap.dedent(content))
    return path


class TestFindConfigFile:
    def test_explicit_wins(self, clean_env, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("DEVSTRAP_CONFIG", str(tmp_path / "env.yml"))
        assert find_config_file(tmp_path / "cli.yml") == tmp_path / "cli.yml"

    def test_env_var(self, clean_env, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("DEVSTRAP_CONFIG", str(tmp_path / "env.yml"))
        assert find_config_file() == tmp_path / "env.yml"

    def test_default_location(self, clean_env: Path):
        default = clean_env / ".config" / "devstrap" / "config.yml"
        assert find_config_file() is None
        default.parent.mkdir(parents=True)
        default.write_text("skip: []\n")
        assert find_config_file() == default


class TestLoadConfig:
    def test_defaults_without_file(self, clean_env: Path):
        config = load_config()
        assert config == BootstrapConfig()
        assert config.npm_install_scope == "global"
        assert config.nerd_fonts_version == "v3.1.1"
        assert config.command_timeout is None
        assert config.plugin_dir == clean_env / ".config/nvim/pack/nvim/start/nvim-lspconfig"

    def test_flat(self, tmp_path: Path):
        path = _write(tmp_path / "c.yml", """\
            nerd_fonts_version: v3.2.1
            npm_install_scope: local
            skip: [nixd]
        """)
        config = load_config(path)
        assert config.nerd_fonts_version == "v3.2.1"
        assert config.npm_install_scope == "local"
        assert config.skip == ["nixd"]
        assert config.fonts_release_url.endswith("/v3.2.1")

    def test_wrapped(self, tmp_path: Path):
        path = _write(tmp_path / "c.yml", """\
            devstrap:
              command_timeout: 600
        """)
        assert load_config(path).command_timeout == 600

    def test_empty_file(self, tmp_path: Path):
        path = _write(tmp_path / "c.yml", "")
        assert load_config(path) == BootstrapConfig()

    def test_tilde_expanded(self, clean_env: Path, tmp_path: Path):
        path = _write(tmp_path / "c.yml", "fonts_dir: ~/fonts\n")
        assert load_config(path).fonts_dir == clean_env / "fonts"

    def test_missing_explicit(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "missing.yml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = _write(tmp_path / "c.yml", "skip: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path = _write(tmp_path / "c.yml", "- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_unknown_key(self, tmp_path: Path):
        path = _write(tmp_path / "c.yml", "npm_scope: local\n")
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(path)

    def test_bad_scope(self, tmp_path: Path):
        path = _write(tmp_path / "c.yml", "npm_install_scope: user\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_non_positive_timeout(self, tmp_path: Path):
        path = _write(tmp_path / "c.yml", "download_timeout: 0\n")
        with pytest.raises(ConfigError):
            load_config(path)
