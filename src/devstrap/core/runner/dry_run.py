"""No-op CommandRunner wrapper for dry-run mode.

Presence checks are delegated to the wrapped runner so a dry run reports the
same install/skip decisions a real run would make.
"""

from collections.abc import Sequence
from pathlib import Path

import click

from devstrap.cli.output import user_output
from devstrap.core.runner.abc import CommandResult, CommandRunner, format_argv


class DryRunCommandRunner(CommandRunner):
    """No-op wrapper that prints commands instead of executing them.

    Usage:
        real_runner = RealCommandRunner()
        dry_runner = DryRunCommandRunner(real_runner)

        # Prints "[DRY RUN] Would run: choco install git -y"
        dry_runner.run(["choco", "install", "git", "-y"], operation_context="install git")
    """

    def __init__(self, wrapped: CommandRunner) -> None:
        """Create a dry-run wrapper around a CommandRunner implementation.

        Args:
            wrapped: The runner to wrap (usually RealCommandRunner or a fake)
        """
        self._wrapped = wrapped

    def which(self, name: str) -> str | None:
        """Resolve executable (read-only, delegates to wrapped)."""
        return self._wrapped.which(name)

    def run(
        self,
        argv: Sequence[str],
        *,
        operation_context: str,
        cwd: Path | None = None,
    ) -> CommandResult:
        """Print the command and report success without executing it."""
        user_output(click.style("[DRY RUN] ", fg="yellow") + f"Would run: {format_argv(argv)}")
        return CommandResult(argv=tuple(str(a) for a in argv), returncode=0)
