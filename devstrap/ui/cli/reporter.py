"""
Console reporter — colored, severity-tagged progress lines on stdout.

Every line is also mirrored to the ``devstrap.report`` logger, which
only the transcript file (``$DEVSTRAP_LOG_FILE``) receives.
"""

from __future__ import annotations

import logging

import click

from devstrap.core.observability.logging_config import REPORT_LOGGER

report_log = logging.getLogger(REPORT_LOGGER)

_BANNER = "=" * 40

_STYLES: dict[str, tuple[str, str, int]] = {
    "info": ("[INFO]", "blue", logging.INFO),
    "success": ("[SUCCESS]", "green", logging.INFO),
    "warning": ("[WARNING]", "yellow", logging.WARNING),
    "error": ("[ERROR]", "red", logging.ERROR),
}


class ConsoleReporter:
    """Terminal implementation of the ``Reporter`` protocol.

    ``quiet`` drops info and detail lines from the terminal; warnings,
    errors, successes and banners are always shown.  The transcript
    gets every line regardless.
    """

    def __init__(self, quiet: bool = False):
        self.quiet = quiet

    def _emit(self, severity: str, message: str) -> None:
        tag, color, level = _STYLES[severity]
        report_log.log(level, "%s %s", tag, message)
        if self.quiet and severity == "info":
            return
        click.secho(tag, fg=color, bold=severity == "warning", nl=False)
        click.echo(f" {message}")

    def info(self, message: str) -> None:
        self._emit("info", message)

    def success(self, message: str) -> None:
        self._emit("success", message)

    def warning(self, message: str) -> None:
        self._emit("warning", message)

    def error(self, message: str) -> None:
        self._emit("error", message)

    def section(self, title: str) -> None:
        report_log.info("== %s ==", title)
        click.echo()
        click.secho(_BANNER, fg="blue")
        click.secho(title, fg="blue", bold=True)
        click.secho(_BANNER, fg="blue")
        click.echo()

    def detail(self, message: str) -> None:
        report_log.info("  %s", message)
        if not self.quiet:
            click.echo(f"  {message}")
