import click

from devstrap.cli.commands.shared import finish_run, skip_elevation_check_option, strict_option
from devstrap.cli.ensure import Ensure
from devstrap.core.context import DevstrapContext
from devstrap.provision.packages import install_all
from devstrap.provision.report import ProvisionReport


@click.command("packages")
@strict_option
@skip_elevation_check_option
@click.pass_obj
def packages_cmd(ctx: DevstrapContext, strict: bool, skip_elevation_check: bool) -> None:
    """Install catalog packages that are not already present."""
    manager = Ensure.package_manager(ctx)
    if not skip_elevation_check:
        Ensure.elevated(ctx, manager)

    report = ProvisionReport()
    report.add(install_all(ctx.runner, ctx.feedback, ctx.catalog.packages, manager))
    finish_run(ctx, report, strict=strict)
