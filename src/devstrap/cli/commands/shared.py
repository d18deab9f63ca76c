"""Helpers shared by provisioning commands."""

import click
from rich.console import Console

from devstrap.cli.output import format_run_summary
from devstrap.core.context import DevstrapContext
from devstrap.provision.report import ProvisionReport

strict_option = click.option(
    "--strict",
    is_flag=True,
    help="Exit with status 1 if any item failed.",
)

skip_elevation_check_option = click.option(
    "--skip-elevation-check",
    is_flag=True,
    help="Do not require an elevated shell before installing packages.",
)


def finish_run(ctx: DevstrapContext, report: ProvisionReport, *, strict: bool) -> None:
    """Print the summary panel and exit non-zero on failures in strict mode.

    Strict mode is on when --strict is passed or `strict = true` is configured.
    """
    console = Console(stderr=True)
    console.print(format_run_summary(report, dry_run=ctx.dry_run))

    if (strict or ctx.config.strict) and report.has_failures:
        raise SystemExit(1)
