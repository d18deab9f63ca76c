"""Full provisioning run: packages, git, extensions, then optional clone."""

from pathlib import Path

import click

from devstrap.cli.commands.shared import finish_run, skip_elevation_check_option, strict_option
from devstrap.cli.ensure import Ensure
from devstrap.core.context import DevstrapContext
from devstrap.provision.extensions import install_extensions
from devstrap.provision.git_config import apply_git_config
from devstrap.provision.packages import install_all
from devstrap.provision.repos import clone_all
from devstrap.provision.report import ProvisionReport


@click.command("run")
@click.option("--clone", is_flag=True, help="Also clone the repositories listed in repos.txt.")
@click.option(
    "--repos-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Repository list file (default: repos.txt in the working directory).",
)
@click.option(
    "--clone-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory receiving cloned repositories (default: ~/repos).",
)
@strict_option
@skip_elevation_check_option
@click.pass_obj
def run_cmd(
    ctx: DevstrapContext,
    clone: bool,
    repos_file: Path | None,
    clone_dir: Path | None,
    strict: bool,
    skip_elevation_check: bool,
) -> None:
    """Provision this machine from the catalog.

    Installs missing packages, configures git, installs editor extensions
    and, with --clone, clones the listed repositories. Individual failures
    are reported at the end and never stop the run.
    """
    manager = Ensure.package_manager(ctx)
    if not skip_elevation_check:
        Ensure.elevated(ctx, manager)

    if ctx.config.load_error is not None:
        ctx.feedback.warning(
            f"Could not parse config ({ctx.config.load_error}); git identity will not be set"
        )

    report = ProvisionReport()
    report.add(install_all(ctx.runner, ctx.feedback, ctx.catalog.packages, manager))
    report.add(
        apply_git_config(
            ctx.runner,
            ctx.feedback,
            ctx.config.identity_name,
            ctx.config.identity_email,
            ctx.catalog.git_aliases,
        )
    )
    for editor in ctx.editors:
        report.add(install_extensions(ctx.runner, ctx.feedback, editor, ctx.catalog.extensions))

    if clone:
        report.add(
            clone_all(
                ctx.runner,
                ctx.feedback,
                repos_file or ctx.config.repos_file,
                clone_dir or ctx.config.clone_dir,
                dry_run=ctx.dry_run,
            )
        )

    finish_run(ctx, report, strict=strict)
