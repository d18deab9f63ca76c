"""User-facing diagnostic output with mode awareness."""

from abc import ABC, abstractmethod

import click

from devstrap.cli.output import user_output


class UserFeedback(ABC):
    """Provides user-facing diagnostic output that's mode-aware.

    Provisioning drivers call feedback methods instead of printing, so the
    --quiet flag and tests never have to thread booleans through signatures.

    Two modes:
    - Interactive: Show all diagnostics (info, success, warnings, errors)
    - Quiet: Suppress info and success, keep warnings and errors

    Usage:
        feedback.info("Installing Git...")
        feedback.success("✓ Git installed")
        feedback.warning("git not found; skipping identity configuration")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message (suppressed in quiet mode)."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message (suppressed in quiet mode)."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show warning message (always shown)."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message (always shown)."""


class InteractiveFeedback(UserFeedback):
    """Feedback shown in interactive mode (all messages)."""

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        user_output(click.style(message, fg="green"))

    def warning(self, message: str) -> None:
        user_output(click.style("Warning: ", fg="yellow") + message)

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))


class QuietFeedback(UserFeedback):
    """Feedback for --quiet (only warnings and errors shown)."""

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        user_output(click.style("Warning: ", fg="yellow") + message)

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))
