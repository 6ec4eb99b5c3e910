"""
Logging setup for the devstrap CLI.

Two outputs:

    stderr              diagnostics, at the level picked on the command line
    $DEVSTRAP_LOG_FILE  a transcript: diagnostics plus every line the
                        Reporter showed the operator

Operator-facing lines reach the terminal through the Reporter on stdout
and are mirrored to the ``devstrap.report`` logger.  The console handler
drops that logger, so a line is never shown twice; the file keeps it.

Console level precedence:
    --debug  >  --verbose  >  --quiet  >  $DEVSTRAP_LOG_LEVEL  >  WARNING
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

LEVEL_ENV_VAR = "DEVSTRAP_LOG_LEVEL"
FILE_ENV_VAR = "DEVSTRAP_LOG_FILE"
FILE_LEVEL_ENV_VAR = "DEVSTRAP_LOG_FILE_LEVEL"

#: Logger the Reporter mirrors its lines to.
REPORT_LOGGER = "devstrap.report"

_CONSOLE_FORMATS: dict[int, tuple[str, str | None]] = {
    logging.DEBUG: ("%(asctime)s %(levelname)s %(name)s:%(lineno)d %(message)s", "%H:%M:%S"),
    logging.INFO: ("%(asctime)s %(name)s: %(message)s", "%H:%M:%S"),
}
_CONSOLE_QUIET = ("devstrap: %(levelname)s: %(message)s", None)

_FILE_FORMAT = "%(asctime)s %(levelname)-7s %(name)s %(message)s"
_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever ``sys.stderr`` is when a record is emitted.

    click swaps the standard streams while testing commands, and a
    handler holding the original stream would write to a closed file.
    """

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def _not_report(record: logging.LogRecord) -> bool:
    return not record.name.startswith(REPORT_LOGGER)


def resolve_level(
    *,
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Console level name from the CLI flags and the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    environ = os.environ if environ is None else environ
    return environ.get(LEVEL_ENV_VAR) or "WARNING"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Configure the root logger for one CLI invocation.

    Replaces the handlers of an earlier call and leaves any others
    alone, so it is safe to run once per command.

    Args:
        level: Console level name.
        log_file: Optional transcript file, appended to.
        log_file_level: Level for the file.  Defaults to DEBUG, so the
            transcript is complete whatever the console shows.
    """
    console_level = _parse_level(level)
    fmt, datefmt = _CONSOLE_FORMATS.get(console_level, _CONSOLE_QUIET)

    console = _StderrHandler()
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    console.addFilter(_not_report)

    root = logging.getLogger()
    for handler in devstrap_handlers():
        root.removeHandler(handler)
        handler.close()
    console._devstrap = True
    root.addHandler(console)
    root_level = console_level

    if log_file:
        file_level = _parse_level(log_file_level or "DEBUG")
        transcript = logging.FileHandler(log_file, encoding="utf-8")
        transcript.setLevel(file_level)
        transcript.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_FILE_DATEFMT))
        transcript._devstrap = True
        root.addHandler(transcript)
        root_level = min(root_level, file_level)

    root.setLevel(root_level)


def devstrap_handlers() -> list[logging.Handler]:
    """Root handlers installed by ``setup_logging``."""
    return [h for h in logging.getLogger().handlers if getattr(h, "_devstrap", False)]


def _parse_level(level: str | None) -> int:
    """Level name to number; unknown or empty names mean WARNING."""
    if not level:
        return logging.WARNING
    return logging.getLevelNamesMapping().get(level.upper(), logging.WARNING)
