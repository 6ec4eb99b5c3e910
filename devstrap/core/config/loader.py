"""
Configuration loader — reads the optional devstrap YAML config.

Every setting has a default, so a missing file is not an error: the
bootstrapper runs with the defaults.  A file that exists but does not
parse, or does not validate, is a ``ConfigError``.

Lookup order:
    --config PATH  >  $DEVSTRAP_CONFIG  >  ~/.config/devstrap/config.yml
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "DEVSTRAP_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/devstrap/config.yml")


class ConfigError(Exception):
    """Raised when the configuration file is unreadable or invalid."""


class BootstrapConfig(BaseModel):
    """Resolved bootstrapper settings."""

    model_config = ConfigDict(extra="forbid", validate_default=True)

    # Editor plugin
    plugin_repo: str = "https://github.com/neovim/nvim-lspconfig"
    plugin_dir: Path = Path("~/.config/nvim/pack/nvim/start/nvim-lspconfig")

    # Fonts
    fonts_dir: Path = Path("~/.local/share/fonts")
    nerd_fonts_version: str = "v3.1.1"
    nerd_fonts_base_url: str = "https://github.com/ryanoasis/nerd-fonts/releases/download"

    # Installers
    npm_install_scope: Literal["global", "local"] = "global"
    skip: list[str] = Field(default_factory=list)

    # Execution (None = no timeout, a hung call blocks the run)
    command_timeout: int | None = None
    download_timeout: int | None = None
    stream_output: bool = True

    @field_validator("plugin_dir", "fonts_dir", mode="after")
    @classmethod
    def _expand_user(cls, value: Path) -> Path:
        return value.expanduser()

    @field_validator("command_timeout", "download_timeout")
    @classmethod
    def _positive_timeout(cls, value: int | None) -> int | None:
        if value is not None and value <= 0:
            raise ValueError("timeout must be a positive number of seconds")
        return value

    @property
    def fonts_release_url(self) -> str:
        return f"{self.nerd_fonts_base_url.rstrip('/')}/{self.nerd_fonts_version}"


def find_config_file(explicit: Path | None = None) -> Path | None:
    """Locate the config file to load, if any.

    Args:
        explicit: Path given on the command line.  Returned as-is,
            even if missing, so ``load_config`` can report it.

    Returns:
        Path to the config file, or None when running on defaults.
    """
    if explicit is not None:
        return explicit

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()

    default = DEFAULT_CONFIG_PATH.expanduser()
    if default.is_file():
        return default

    return None


def load_config(path: Path | None = None) -> BootstrapConfig:
    """Load and validate the bootstrapper configuration.

    Args:
        path: Explicit path to a YAML file.  If None, uses
            ``find_config_file()`` and falls back to defaults.

    Returns:
        Validated BootstrapConfig.

    Raises:
        ConfigError: If the file is missing (when explicit) or invalid.
    """
    path = find_config_file(path)
    if path is None:
        logger.debug("No config file found, using defaults")
        return BootstrapConfig()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return BootstrapConfig()

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # The YAML may wrap everything under a "devstrap" key or be flat
    data = data.get("devstrap", data)

    try:
        config = BootstrapConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    logger.info("Loaded config from %s", path)
    return config
