"""Retrying CommandRunner wrapper.

Re-runs commands that timed out. Commands that exit non-zero are returned as-is:
a failed install is not assumed to be transient.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from devstrap.core.runner.abc import CommandResult, CommandRunner
from devstrap.core.time.abc import Time

logger = logging.getLogger(__name__)


class RetryingCommandRunner(CommandRunner):
    """Wrapper that retries timed-out commands before delegating the result.

    Usage:
        runner = RetryingCommandRunner(RealCommandRunner(timeout=600), RealTime(),
                                       retries=2, delay=5.0)
    """

    def __init__(self, wrapped: CommandRunner, time: Time, *, retries: int, delay: float) -> None:
        """Create a retrying wrapper.

        Args:
            wrapped: The runner to delegate to
            time: Time implementation used to sleep between attempts
            retries: Extra attempts after the first timed-out one
            delay: Seconds to sleep between attempts
        """
        self._wrapped = wrapped
        self._time = time
        self._retries = max(retries, 0)
        self._delay = delay

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
        result = self._wrapped.run(argv, operation_context=operation_context, cwd=cwd)
        attempt = 1
        while result.timed_out and attempt <= self._retries:
            logger.debug(
                "Retrying %s after timeout (attempt %d of %d)",
                operation_context,
                attempt + 1,
                self._retries + 1,
            )
            if self._delay > 0:
                self._time.sleep(self._delay)
            result = self._wrapped.run(argv, operation_context=operation_context, cwd=cwd)
            attempt += 1
        return result
