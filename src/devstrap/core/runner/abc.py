"""External command operations interface.

This module provides a narrow abstraction over the external tools devstrap
drives (package manager, git, editor CLIs), making the provisioning drivers
testable without touching the real system.

Architecture:
- CommandRunner: Abstract base class defining the interface
- RealCommandRunner: Production implementation using subprocess
- RetryingCommandRunner / DryRunCommandRunner: Wrappers around any runner
"""

import shlex
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a single external command.

    A missing executable is reported as returncode 127, an expired timeout as
    timed_out=True. Neither raises.
    """

    argv: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""
    timed_out: bool = False

    @property
    def success(self) -> bool:
        return self.returncode == 0 and not self.timed_out

    def describe_failure(self) -> str:
        """Short human-readable reason for a failed result."""
        if self.timed_out:
            return "timed out"
        if self.returncode == 127 and not self.stdout:
            return self.stderr.strip() or "command not found"
        message = f"exit code {self.returncode}"
        stderr = self.stderr.strip()
        if stderr:
            message += f": {stderr.splitlines()[-1]}"
        return message


def format_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


class CommandRunner(ABC):
    """Abstract interface for running external commands.

    All implementations (real, wrappers and fakes) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    @abstractmethod
    def which(self, name: str) -> str | None:
        """Resolve an executable on the search path.

        Args:
            name: Executable name (e.g. "git", "code")

        Returns:
            Absolute path of the executable, or None if it cannot be resolved
        """
        ...

    @abstractmethod
    def run(
        self,
        argv: Sequence[str],
        *,
        operation_context: str,
        cwd: Path | None = None,
    ) -> CommandResult:
        """Run a command to completion.

        Args:
            argv: Command and arguments to execute
            operation_context: Human-readable description of the operation,
                used in logs (e.g. "install package 'git'")
            cwd: Working directory for the command

        Returns:
            CommandResult describing the outcome. Implementations never raise
            for a failed, missing or timed-out command.
        """
        ...
