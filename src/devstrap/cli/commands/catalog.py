import click
from rich.console import Console
from rich.table import Table

from devstrap.cli.ensure import Ensure
from devstrap.core.context import DevstrapContext


@click.command("catalog")
@click.pass_obj
def catalog_cmd(ctx: DevstrapContext) -> None:
    """Show the packages, extensions and git aliases devstrap manages."""
    console = Console()
    manager = Ensure.package_manager(ctx)

    packages = Table(title=f"Packages ({manager.name})")
    packages.add_column("Name")
    packages.add_column("Identifier")
    packages.add_column("Presence check")
    for package in ctx.catalog.packages:
        packages.add_row(
            package.display_name, package.identifier_for(manager.name), package.presence_check
        )
    console.print(packages)

    extensions = Table(title=f"Extensions ({', '.join(ctx.editors) or 'no editors'})")
    extensions.add_column("Identifier")
    for extension in ctx.catalog.extensions:
        extensions.add_row(extension)
    console.print(extensions)

    aliases = Table(title="Git aliases")
    aliases.add_column("Alias")
    aliases.add_column("Command")
    for alias, command in ctx.catalog.git_aliases.items():
        aliases.add_row(alias, command)
    console.print(aliases)
