"""
Installer-script adapter — the ``curl ... | sh`` pattern, without the pipe.

The script is downloaded to a temporary file first and executed from
there, so a truncated download never runs half a script.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from devstrap.adapters.base import Installer
from devstrap.adapters.download.http import download_file
from devstrap.core.context import ProcessContext
from devstrap.core.models.target import InstallMethod, InstallTarget

logger = logging.getLogger(__name__)


class ScriptInstaller(Installer):
    """Run ``<interpreter> <script> <script_args...>`` for a fetched script."""

    @property
    def method(self) -> InstallMethod:
        return InstallMethod.SCRIPT

    def install(self, target: InstallTarget, ctx: ProcessContext) -> None:
        with tempfile.NamedTemporaryFile(
            prefix=f"{target.id}-install-", suffix=".sh", delete=False,
        ) as tmp:
            script = Path(tmp.name)

        try:
            download_file(
                target.reference,
                script,
                timeout=self.config.download_timeout,
                target_id=target.id,
            )
            cmd = [target.interpreter, str(script), *target.script_args]
            logger.info("Running installer script for %s", target.id)
            self.run(cmd, ctx, target)
        finally:
            script.unlink(missing_ok=True)
