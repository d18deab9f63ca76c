"""Output utilities for CLI commands with clear intent.

user_output() is for diagnostics and progress (stderr), machine_output() is for
data a caller may pipe (stdout). format_run_summary() renders the end-of-run
panel.
"""

import click
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from devstrap.provision.report import ItemStatus, ProvisionReport


def user_output(message: str = "", nl: bool = True) -> None:
    """Output informational message for the user (stderr)."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str = "", nl: bool = True) -> None:
    """Output structured data for scripts (stdout)."""
    click.echo(message, nl=nl)


def format_run_summary(report: ProvisionReport, *, dry_run: bool = False) -> Panel:
    """Format final summary box with per-step counts and failure details.

    Example:
        >>> panel = format_run_summary(report)
        >>> Console(stderr=True).print(panel)
    """
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Step")
    table.add_column("Installed", justify="right")
    table.add_column("Skipped", justify="right")
    table.add_column("Failed", justify="right")
    table.add_column("Note", style="dim")

    for step in report.steps:
        failed = step.count(ItemStatus.FAILED)
        table.add_row(
            step.step,
            str(step.count(ItemStatus.INSTALLED)),
            str(step.count(ItemStatus.SKIPPED)),
            Text(str(failed), style="red" if failed else ""),
            step.skipped_reason or "",
        )

    lines: list[Text | Table] = [table]
    for step_name, result in report.failures:
        lines.append(Text(f"✗ {step_name}: {result.name} ({result.detail})", style="red"))

    ok = not report.has_failures
    if dry_run:
        title = "Dry Run Complete"
    else:
        title = "Provisioning Complete" if ok else "Provisioning Finished With Failures"

    body = Table.grid()
    for line in lines:
        body.add_row(line)

    return Panel(body, title=title, border_style="green" if ok else "red", padding=(1, 2))
