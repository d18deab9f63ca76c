import click

from devstrap.cli.commands.shared import finish_run, strict_option
from devstrap.cli.ensure import Ensure
from devstrap.core.context import DevstrapContext
from devstrap.provision.extensions import install_extensions
from devstrap.provision.report import ProvisionReport


@click.command("extensions")
@click.option(
    "--editor",
    "editor_overrides",
    multiple=True,
    help="Editor CLI to install into (repeatable). Defaults to the configured editors.",
)
@strict_option
@click.pass_obj
def extensions_cmd(
    ctx: DevstrapContext, editor_overrides: tuple[str, ...], strict: bool
) -> None:
    """Install catalog extensions into every editor that is present."""
    editors = Ensure.truthy(
        list(editor_overrides) or ctx.editors,
        "No editors configured. Pass --editor or set 'editors' in the config file.",
    )

    report = ProvisionReport()
    for editor in editors:
        report.add(install_extensions(ctx.runner, ctx.feedback, editor, ctx.catalog.extensions))
    finish_run(ctx, report, strict=strict)
