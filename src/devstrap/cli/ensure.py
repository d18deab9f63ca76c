"""CLI error handling utilities with styled output.

This module provides the Ensure class for asserting preconditions in CLI
commands with consistent, user-friendly error messages. All errors use a red
"Error:" prefix and exit with status 1.
"""

from typing import TYPE_CHECKING, TypeVar

import click

from devstrap.cli.output import user_output
from devstrap.provision.packages import PackageManager

if TYPE_CHECKING:
    from devstrap.core.context import DevstrapContext

T = TypeVar("T")


class Ensure:
    """Helper class for asserting preconditions with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Args:
            condition: Boolean condition to check
            error_message: Error message to display if condition is false.
                          "Error: " prefix will be added automatically in red.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)

    @staticmethod
    def truthy(value: T, error_message: str) -> T:
        """Ensure value is truthy, otherwise output styled error and exit.

        Returns:
            The value unchanged if truthy

        Raises:
            SystemExit: If value is falsy (with exit code 1)
        """
        if not value:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)
        return value

    @staticmethod
    def package_manager(ctx: "DevstrapContext") -> PackageManager:
        """Resolve the context's package manager, exiting on an unsupported name."""
        try:
            return ctx.package_manager
        except ValueError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from e

    @staticmethod
    def elevated(ctx: "DevstrapContext", manager: PackageManager) -> None:
        """Ensure the process has the privileges the package manager needs.

        Checked before any action so a run never starts half-privileged.

        Raises:
            SystemExit: If elevation is required but missing (with exit code 1)
        """
        if not manager.requires_elevation:
            return
        Ensure.invariant(
            ctx.host.is_elevated(),
            f"{manager.name} installs require an elevated shell. "
            "Re-run as administrator (or root), or pass --skip-elevation-check.",
        )
