"""Production CommandRunner implementation using subprocess.

Unlike a plain subprocess.run(check=True), process failures are never raised:
the provisioning drivers follow a forward-progress policy and need a result
object for every item.
"""

import logging
import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path

from devstrap.core.runner.abc import CommandResult, CommandRunner, format_argv

logger = logging.getLogger(__name__)


class RealCommandRunner(CommandRunner):
    """Production implementation using subprocess.

    Example:
        runner = RealCommandRunner(timeout=600)
        if runner.which("git") is not None:
            runner.run(["git", "config", "--global", "alias.s", "status"],
                       operation_context="set alias 's'")
    """

    def __init__(self, *, timeout: float | None = None) -> None:
        """Create a runner.

        Args:
            timeout: Seconds to wait for each command, or None to wait forever
        """
        self._timeout = timeout

    def which(self, name: str) -> str | None:
        """Resolve an executable using shutil.which."""
        return shutil.which(name)

    def run(
        self,
        argv: Sequence[str],
        *,
        operation_context: str,
        cwd: Path | None = None,
    ) -> CommandResult:
        """Run a command, capturing output, without raising on failure.

        The executable is resolved with shutil.which first: on Windows,
        CreateProcess ignores PATHEXT, so shims such as code.cmd or scoop.ps1
        are only found through their full path.
        """
        argv_tuple = tuple(str(a) for a in argv)
        logger.debug("Running (%s): %s", operation_context, format_argv(argv_tuple))
        executable = shutil.which(argv_tuple[0]) or argv_tuple[0]

        try:
            completed = subprocess.run(
                (executable, *argv_tuple[1:]),
                cwd=cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
                timeout=self._timeout,
            )
        except FileNotFoundError:
            logger.debug(
                "Command not found while trying to %s: %s", operation_context, argv_tuple[0]
            )
            return CommandResult(
                argv=argv_tuple,
                returncode=127,
                stderr=f"command not found: {argv_tuple[0]}",
            )
        except subprocess.TimeoutExpired:
            logger.debug("Timed out after %ss trying to %s", self._timeout, operation_context)
            return CommandResult(argv=argv_tuple, returncode=-1, timed_out=True)

        if completed.stdout:
            logger.debug("stdout: %s", completed.stdout.strip())
        if completed.stderr:
            logger.debug("stderr: %s", completed.stderr.strip())

        return CommandResult(
            argv=argv_tuple,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
