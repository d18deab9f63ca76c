"""Presence checks for executables."""

from devstrap.core.runner.abc import CommandRunner


def exists(runner: CommandRunner, identifier: str) -> bool:
    """Return True when `identifier` resolves to an executable.

    Absence is an expected outcome and never raises.
    """
    if not identifier:
        return False
    return runner.which(identifier) is not None
