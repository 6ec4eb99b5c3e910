"""
Install error taxonomy.

Installers raise these; the step runner catches ``InstallError`` per
target and downgrades it to a recorded ``failed`` outcome.  Only a
``PrerequisiteMissing`` raised before any installation work begins
escapes to the entry point.

A tool that installs but does not resolve afterwards is NOT an error:
it becomes the ``unverified`` outcome.  An operator declining the
confirmation prompt is NOT an error either: it is a cancelled result.
"""

from __future__ import annotations


class DevstrapError(Exception):
    """Base class for all devstrap errors."""


class InstallError(DevstrapError):
    """Acquisition of a single target failed.

    Attributes:
        target_id: Target the failure belongs to (empty when not tied to one).
        hint: Optional remediation hint for the operator.
    """

    def __init__(self, message: str, *, target_id: str = "", hint: str = ""):
        super().__init__(message)
        self.target_id = target_id
        self.hint = hint


class PrerequisiteMissing(InstallError):
    """A required ambient tool (archive tool, package manager) is absent."""

    def __init__(self, tool: str, *, target_id: str = "", hint: str = ""):
        super().__init__(f"{tool} is not installed", target_id=target_id, hint=hint)
        self.tool = tool


class DownloadFailed(InstallError):
    """Fetching an archive or installer script failed."""


class ExtractionFailed(InstallError):
    """A downloaded archive could not be extracted."""


class InstallCommandFailed(InstallError):
    """An installer command exited non-zero or could not be started."""


class UpdateFailed(InstallError):
    """Updating an already-present target failed."""
