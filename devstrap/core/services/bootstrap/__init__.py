"""
Bootstrap service — probe, dispatch, run and report install phases.
"""

from devstrap.core.services.bootstrap.probe import command_exists, probe  # noqa: F401
from devstrap.core.services.bootstrap.runner import StepRunner  # noqa: F401
from devstrap.core.services.bootstrap.selection import parse_selection  # noqa: F401
