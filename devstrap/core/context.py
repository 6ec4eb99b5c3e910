"""
Process context — the environment every install step runs against.

Installers mutate the search path mid-run (Homebrew's prefix, uv's and
cargo's bin directories).  Instead of touching ``os.environ`` behind the
runner's back, those mutations go through one ``ProcessContext`` that is
passed explicitly into every probe and dispatcher call.  A mutation made
by one target is visible to every target that runs after it in the same
invocation, and to nothing else.

Design notes:
    - Created once per entry point from ``os.environ`` (a copy).
    - Subprocesses receive ``ctx.env`` as their full environment.
    - Path lookups use ``ctx.path``, never the process PATH.
"""

from __future__ import annotations

import logging
import os
import re
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)

_VAR_RE = re.compile(r"\$\{(\w+)\}|\$(\w+)")


class ProcessContext:
    """Mutable environment shared by all steps of one bootstrap run."""

    def __init__(self, env: dict[str, str] | None = None, home: Path | None = None):
        self._env: dict[str, str] = dict(os.environ if env is None else env)
        self.home = home or Path(self._env.get("HOME") or Path.home())

    @classmethod
    def from_environ(cls) -> ProcessContext:
        """Snapshot the current process environment."""
        return cls()

    @property
    def env(self) -> dict[str, str]:
        """A copy of the environment, suitable for ``subprocess.run(env=...)``."""
        return dict(self._env)

    @property
    def path(self) -> str:
        return self._env.get("PATH", "")

    def path_entries(self) -> list[str]:
        return [p for p in self.path.split(os.pathsep) if p]

    def which(self, name: str) -> str | None:
        """Resolve ``name`` against this context's PATH."""
        return shutil.which(name, path=self.path)

    def expand(self, value: str) -> str:
        """Expand ``~`` and ``$VAR`` references using this context."""
        if value.startswith("~"):
            value = str(self.home) + value[1:]

        def _sub(match: re.Match[str]) -> str:
            name = match.group(1) or match.group(2)
            return self._env.get(name, match.group(0))

        return _VAR_RE.sub(_sub, value)

    def prepend_path(self, entry: str | Path) -> bool:
        """Put ``entry`` at the front of PATH.

        Returns:
            True if PATH changed, False if the entry was already first.
        """
        entry = self.expand(str(entry))
        entries = self.path_entries()
        if entries and entries[0] == entry:
            return False
        entries = [entry] + [p for p in entries if p != entry]
        self._env["PATH"] = os.pathsep.join(entries)
        logger.debug("PATH += %s", entry)
        return True

    def apply_post_path(self, candidates: tuple[str, ...] | list[str]) -> list[str]:
        """Prepend every existing directory among ``candidates`` to PATH.

        Candidates are applied in reverse so the first listed ends up first.

        Returns:
            The entries that were added.
        """
        added: list[str] = []
        for candidate in reversed(candidates):
            expanded = self.expand(candidate)
            if Path(expanded).is_dir() and self.prepend_path(expanded):
                added.insert(0, expanded)
        return added

    def set_var(self, key: str, value: str) -> None:
        self._env[key] = value

    def __repr__(self) -> str:
        return f"<ProcessContext home={str(self.home)!r} path_entries={len(self.path_entries())}>"
