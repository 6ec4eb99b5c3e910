"""
Shell command runner — the single place install commands are executed.

Every installer goes through ``run_command``.  The environment always
comes from the ``ProcessContext`` so PATH changes made by earlier steps
are visible to later ones.
"""

from __future__ import annotations

import logging
import subprocess
import time
from typing import Any

from devstrap.core.context import ProcessContext

logger = logging.getLogger(__name__)

_TAIL = 2000


def run_command(
    cmd: list[str],
    ctx: ProcessContext,
    *,
    timeout: int | None = None,
    cwd: str | None = None,
    capture: bool = True,
    max_output: int | None = _TAIL,
) -> dict[str, Any]:
    """Run a command and report what happened.

    Args:
        cmd: Command list for ``subprocess.run()``.
        ctx: Process context supplying the environment.
        timeout: Seconds before giving up.  None blocks until exit.
        cwd: Working directory for the command.
        capture: Capture stdout/stderr.  When False the command writes
            straight to the operator's terminal (installer progress,
            interactive prompts).
        max_output: Keep only the last N characters of captured output.
            None keeps everything.

    Returns:
        ``{"ok": True, "stdout": "...", "elapsed_ms": N}`` on success,
        ``{"ok": False, "error": "...", ...}`` on failure.
    """
    logger.debug("Executing: %s (cwd=%s)", " ".join(cmd), cwd)
    start = time.monotonic()

    try:
        result = subprocess.run(
            cmd,
            capture_output=capture,
            text=True,
            timeout=timeout,
            env=ctx.env,
            cwd=cwd,
        )
    except subprocess.TimeoutExpired:
        return {"ok": False, "error": f"Command timed out ({timeout}s)"}
    except FileNotFoundError:
        return {"ok": False, "error": f"Command not found: {cmd[0]}", "returncode": 127}
    except OSError as e:
        logger.debug("Subprocess error for %s: %s", cmd, e)
        return {"ok": False, "error": str(e)}

    elapsed_ms = int((time.monotonic() - start) * 1000)
    stdout = _tail(result.stdout, max_output)
    stderr = _tail(result.stderr, max_output)

    if result.returncode == 0:
        return {"ok": True, "stdout": stdout, "elapsed_ms": elapsed_ms}

    return {
        "ok": False,
        "error": f"Command failed (exit {result.returncode})",
        "returncode": result.returncode,
        "stderr": stderr,
        "stdout": stdout,
        "elapsed_ms": elapsed_ms,
    }


def _tail(text: str | None, limit: int | None) -> str:
    if not text:
        return ""
    return text if limit is None else text[-limit:]
