"""
Archive installer — download a zip and unpack it into place.

Used for Nerd Fonts release assets.  The downloaded archive is a
temporary file and is removed whether extraction succeeds or not.
"""

from __future__ import annotations

import logging
import shutil
import tempfile
import zipfile
import zlib
from pathlib import Path

from devstrap.adapters.base import Installer
from devstrap.adapters.download.http import download_file
from devstrap.core.context import ProcessContext
from devstrap.core.errors import ExtractionFailed, InstallError
from devstrap.core.models.target import InstallMethod, InstallTarget

logger = logging.getLogger(__name__)

# Corrupt deflate data raises zlib.error; unsupported compression or
# encrypted members raise NotImplementedError or RuntimeError.
_EXTRACT_ERRORS = (zipfile.BadZipFile, zlib.error, NotImplementedError, RuntimeError, OSError)


class ArchiveInstaller(Installer):
    """Fetch ``target.reference`` and extract it into ``target.path``."""

    @property
    def method(self) -> InstallMethod:
        return InstallMethod.DOWNLOAD

    def install(self, target: InstallTarget, ctx: ProcessContext) -> None:
        if not target.path:
            raise InstallError(
                f"Download target '{target.id}' has no destination path",
                target_id=target.id,
            )

        dest = Path(ctx.expand(target.path))
        fresh = not dest.exists() or not any(dest.iterdir())
        try:
            dest.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ExtractionFailed(
                f"Cannot create {dest}: {e}", target_id=target.id,
            ) from e

        with tempfile.NamedTemporaryFile(
            prefix=f"{target.id}-", suffix=".zip", delete=False,
        ) as tmp:
            archive = Path(tmp.name)

        try:
            download_file(
                target.reference,
                archive,
                timeout=self.config.download_timeout,
                target_id=target.id,
            )
            self._extract(archive, dest, target)
        except ExtractionFailed:
            # A half-extracted directory would pass the presence check next run
            if fresh:
                shutil.rmtree(dest, ignore_errors=True)
            raise
        finally:
            archive.unlink(missing_ok=True)

    @staticmethod
    def _extract(archive: Path, dest: Path, target: InstallTarget) -> None:
        """Unpack ``archive`` into ``dest``, overwriting existing files."""
        try:
            with zipfile.ZipFile(archive) as zf:
                members = zf.namelist()
                zf.extractall(dest)
        except _EXTRACT_ERRORS as e:
            raise ExtractionFailed(
                f"Failed to extract {target.description or target.id}: {e}",
                target_id=target.id,
            ) from e
        logger.info("Extracted %d files into %s", len(members), dest)
