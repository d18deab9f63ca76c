import logging
import os
from pathlib import Path

import click

from devstrap.cli.commands.catalog import catalog_cmd
from devstrap.cli.commands.clone import clone_cmd
from devstrap.cli.commands.config import config_group
from devstrap.cli.commands.extensions import extensions_cmd
from devstrap.cli.commands.git_config import git_config_cmd
from devstrap.cli.commands.packages import packages_cmd
from devstrap.cli.commands.run import run_cmd
from devstrap.cli.output import user_output
from devstrap.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


def _configure_logging(verbose: bool) -> None:
    # DEVSTRAP_DEBUG enables debug logging without changing the command line
    if verbose or os.environ.get("DEVSTRAP_DEBUG"):
        logging.basicConfig(
            level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s"
        )


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="devstrap")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Run configuration file (default: ./devstrap.toml).",
)
@click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Catalog YAML overriding the bundled one.",
)
@click.option("--dry-run", is_flag=True, help="Print commands instead of running them.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.option("-q", "--quiet", is_flag=True, help="Only show warnings, errors and the summary.")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Path | None,
    catalog_path: Path | None,
    dry_run: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """Bootstrap a developer workstation: packages, git, editor extensions, repos."""
    _configure_logging(verbose)
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context(
                dry_run=dry_run,
                quiet=quiet,
                config_path=config_path,
                catalog_path=catalog_path,
            )
        except (FileNotFoundError, ValueError) as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from e


cli.add_command(run_cmd)
cli.add_command(packages_cmd)
cli.add_command(git_config_cmd)
cli.add_command(extensions_cmd)
cli.add_command(clone_cmd)
cli.add_command(catalog_cmd)
cli.add_command(config_group)


def main() -> None:
    """CLI entry point used by the `devstrap` console script."""
    cli()
