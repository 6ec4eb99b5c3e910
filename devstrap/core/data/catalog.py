"""
L0 Data — Install catalog.

Every tool devstrap knows about, as typed records.  Pure data, no logic
beyond assembling phases from configuration.

This is the single place to edit when adding a tool: the installers,
``devstrap list`` and the post-install next steps all read from here.
"""

from __future__ import annotations

from devstrap.core.config.loader import BootstrapConfig
from devstrap.core.models.target import (
    FontSpec,
    InstallMethod,
    InstallPhase,
    InstallTarget,
    Prerequisite,
)

_SHELL_HINT = "Restart your shell or source your profile."

# ── Package managers ────────────────────────────────────────────

PACKAGE_MANAGERS: tuple[InstallTarget, ...] = (
    InstallTarget(
        id="brew",
        method=InstallMethod.SCRIPT,
        reference="https://raw.githubusercontent.com/Homebrew/install/HEAD/install.sh",
        description="Homebrew",
        interpreter="bash",
        post_path=("/home/linuxbrew/.linuxbrew/bin", "/opt/homebrew/bin"),
        version_args=("--version",),
        hint='Add Homebrew to PATH: eval "$(/home/linuxbrew/.linuxbrew/bin/brew shellenv)"',
    ),
    InstallTarget(
        id="uv",
        method=InstallMethod.SCRIPT,
        reference="https://astral.sh/uv/install.sh",
        description="uv (Astral)",
        post_path=("~/.local/bin", "~/.cargo/bin"),
        version_args=("--version",),
        hint=_SHELL_HINT,
    ),
    InstallTarget(
        id="rustc",
        method=InstallMethod.SCRIPT,
        reference="https://sh.rustup.rs",
        description="Rust toolchain (rustup)",
        verify=("rustc", "cargo"),
        script_args=("-y",),
        post_path=("~/.cargo/bin",),
        version_args=("--version",),
        hint='Run: source "$HOME/.cargo/env"',
    ),
)

# ── Language servers ────────────────────────────────────────────

LANGUAGE_SERVERS: tuple[InstallTarget, ...] = (
    InstallTarget(
        id="basedpyright",
        method=InstallMethod.NPM,
        reference="basedpyright",
        description="Python LSP (Pyright fork)",
        hint=_SHELL_HINT,
    ),
    InstallTarget(
        id="bash-language-server",
        method=InstallMethod.NPM,
        reference="bash-language-server",
        description="Bash LSP",
        hint=_SHELL_HINT,
    ),
    InstallTarget(
        id="lua-language-server",
        method=InstallMethod.BREW,
        reference="lua-language-server",
        description="Lua LSP",
        hint=_SHELL_HINT,
    ),
    InstallTarget(
        id="marksman",
        method=InstallMethod.BREW,
        reference="marksman",
        description="Markdown LSP",
        hint=_SHELL_HINT,
    ),
    InstallTarget(
        id="nixd",
        method=InstallMethod.NIX,
        reference="nixd",
        description="Nix LSP",
        hint="To install Nix, visit: https://nixos.org/download.html",
    ),
    InstallTarget(
        id="texlab",
        method=InstallMethod.BREW,
        reference="texlab",
        description="LaTeX LSP",
        hint=_SHELL_HINT,
    ),
    # The crate is tinymist-cli, built from git; the binary is tinymist.
    InstallTarget(
        id="tinymist",
        method=InstallMethod.CARGO,
        reference="tinymist-cli",
        description="Typst LSP",
        command=(
            "cargo", "install",
            "--git", "https://github.com/Myriad-Dreamin/tinymist",
            "--locked", "tinymist-cli",
        ),
        verify=("tinymist",),
        post_path=("~/.cargo/bin",),
        hint=_SHELL_HINT,
    ),
    InstallTarget(
        id="ty",
        method=InstallMethod.UV_TOOL,
        reference="ty",
        description="Python type checker (Astral)",
        post_path=("~/.local/bin",),
        hint=_SHELL_HINT,
    ),
)

LANGUAGE_SERVER_PREREQUISITES: tuple[Prerequisite, ...] = (
    Prerequisite(
        tool="npm",
        methods=(InstallMethod.NPM,),
        hint="Install Node.js first: https://nodejs.org/ or use: brew install node",
    ),
)

# ── Fonts ───────────────────────────────────────────────────────

NERD_FONTS: tuple[FontSpec, ...] = (
    FontSpec(stem="JetBrainsMono", display_name="JetBrains Mono Nerd Font (Recommended)"),
    FontSpec(stem="FiraCode", display_name="Fira Code Nerd Font"),
    FontSpec(stem="Hack", display_name="Hack Nerd Font"),
    FontSpec(stem="CascadiaCode", display_name="Cascadia Code Nerd Font"),
    FontSpec(stem="Meslo", display_name="Meslo Nerd Font"),
)

# Checked before any font is downloaded; missing = nothing is attempted.
FONT_PREREQUISITES: tuple[Prerequisite, ...] = (
    Prerequisite(
        tool="fc-cache",
        hint="Install fontconfig first: sudo apt update && sudo apt install fontconfig",
    ),
)


# ── Phase assembly ──────────────────────────────────────────────


def plugin_phase(config: BootstrapConfig) -> InstallPhase:
    """Editor plugin clone, located by configuration."""
    return InstallPhase(
        name="plugin",
        title="Step 1: Installing nvim-lspconfig",
        targets=(
            InstallTarget(
                id="nvim-lspconfig",
                method=InstallMethod.GIT_CLONE,
                reference=config.plugin_repo,
                description="Neovim LSP configurations",
                path=str(config.plugin_dir),
                updatable=True,
            ),
        ),
        prerequisites=(
            Prerequisite(tool="git", hint="Install git with your system package manager."),
        ),
    )


def package_manager_phase() -> InstallPhase:
    return InstallPhase(
        name="package-managers",
        title="Step 2: Installing package managers",
        targets=PACKAGE_MANAGERS,
    )


def language_server_phase() -> InstallPhase:
    return InstallPhase(
        name="language-servers",
        title="Step 3: Installing language servers",
        targets=LANGUAGE_SERVERS,
        prerequisites=LANGUAGE_SERVER_PREREQUISITES,
    )


def lsp_phases(config: BootstrapConfig) -> list[InstallPhase]:
    """The LSP bootstrap, in execution order, minus ``config.skip``."""
    skip = frozenset(config.skip)
    return [
        plugin_phase(config).without(skip),
        package_manager_phase().without(skip),
        language_server_phase().without(skip),
    ]


def font_target(config: BootstrapConfig, font: FontSpec) -> InstallTarget:
    return InstallTarget(
        id=font.stem,
        method=InstallMethod.DOWNLOAD,
        reference=f"{config.fonts_release_url}/{font.stem}.zip",
        description=font.display_name,
        path=str(config.fonts_dir / font.stem),
        hint="You may need to log out and back in.",
    )


def font_phase(
    config: BootstrapConfig,
    fonts: tuple[FontSpec, ...] | list[FontSpec] = NERD_FONTS,
) -> InstallPhase:
    """Download phase for the given fonts, in the given order."""
    return InstallPhase(
        name="fonts",
        title="Installing Nerd Fonts",
        targets=tuple(font_target(config, f) for f in fonts),
    ).without(frozenset(config.skip))


def all_targets(config: BootstrapConfig) -> list[tuple[str, InstallTarget]]:
    """Every target with its phase name, for listings."""
    rows: list[tuple[str, InstallTarget]] = []
    for phase in [*lsp_phases(config), font_phase(config)]:
        rows.extend((phase.name, t) for t in phase.targets)
    return rows


def verification_commands(config: BootstrapConfig) -> list[str]:
    """``<binary> --version`` lines for the post-install next steps."""
    commands: list[str] = []
    for phase in (package_manager_phase(), language_server_phase()):
        for target in phase.without(frozenset(config.skip)).targets:
            commands.extend(f"{name} --version" for name in target.verify)
    return commands
