import click

from devstrap.cli.commands.shared import finish_run, strict_option
from devstrap.core.context import DevstrapContext
from devstrap.provision.git_config import apply_git_config
from devstrap.provision.report import ProvisionReport


@click.command("git-config")
@click.option("--name", default=None, help="Override GitUserName from the config file.")
@click.option("--email", default=None, help="Override GitUserEmail from the config file.")
@strict_option
@click.pass_obj
def git_config_cmd(
    ctx: DevstrapContext, name: str | None, email: str | None, strict: bool
) -> None:
    """Set git identity and aliases globally.

    Aliases are always applied when git is installed; identity only when both
    name and email are known.
    """
    report = ProvisionReport()
    report.add(
        apply_git_config(
            ctx.runner,
            ctx.feedback,
            name if name is not None else ctx.config.identity_name,
            email if email is not None else ctx.config.identity_email,
            ctx.catalog.git_aliases,
        )
    )
    finish_run(ctx, report, strict=strict)
