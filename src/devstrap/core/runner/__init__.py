"""Command runner subpackage.

This subpackage provides the seam between provisioning drivers and external
processes, with support for testing via fakes and dry-run via wrappers.
"""

from devstrap.core.runner.abc import CommandResult, CommandRunner
from devstrap.core.runner.dry_run import DryRunCommandRunner
from devstrap.core.runner.real import RealCommandRunner
from devstrap.core.runner.retrying import RetryingCommandRunner

__all__ = [
    "CommandResult",
    "CommandRunner",
    "DryRunCommandRunner",
    "RealCommandRunner",
    "RetryingCommandRunner",
]
