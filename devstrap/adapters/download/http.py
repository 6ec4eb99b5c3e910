"""
HTTP download helper shared by the archive and script installers.
"""

from __future__ import annotations

import http.client
import logging
import shutil
import urllib.error
import urllib.request
from pathlib import Path

from devstrap import __version__
from devstrap.core.errors import DownloadFailed

logger = logging.getLogger(__name__)

_USER_AGENT = f"devstrap/{__version__}"


def download_file(
    url: str,
    dest: Path,
    *,
    timeout: int | None = None,
    target_id: str = "",
) -> int:
    """Stream ``url`` into ``dest``.

    Args:
        url: Source URL (``https://``, or ``file://`` for local mirrors).
        dest: File to write; parent directories must exist.
        timeout: Socket timeout in seconds.  None blocks indefinitely.
        target_id: Target the download belongs to, for error reporting.

    Returns:
        Number of bytes written.

    Raises:
        DownloadFailed: On any network or filesystem error.
    """
    logger.debug("Downloading %s → %s", url, dest)
    req = urllib.request.Request(url, headers={"User-Agent": _USER_AGENT})

    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp, open(dest, "wb") as fh:
            shutil.copyfileobj(resp, fh)
    except urllib.error.HTTPError as e:
        raise DownloadFailed(
            f"Failed to download {url}: HTTP {e.code}", target_id=target_id,
        ) from e
    except (urllib.error.URLError, http.client.HTTPException, OSError, ValueError) as e:
        raise DownloadFailed(
            f"Failed to download {url}: {e}",
            target_id=target_id,
            hint="Check your network connection.",
        ) from e

    size = dest.stat().st_size
    logger.info("Downloaded %s (%d bytes)", url, size)
    return size
