from pathlib import Path

import click

from devstrap.cli.commands.shared import finish_run, strict_option
from devstrap.core.context import DevstrapContext
from devstrap.provision.repos import clone_all
from devstrap.provision.report import ProvisionReport


@click.command("clone")
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
@click.pass_obj
def clone_cmd(
    ctx: DevstrapContext, repos_file: Path | None, clone_dir: Path | None, strict: bool
) -> None:
    """Clone every repository listed in the repository list file."""
    report = ProvisionReport()
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
