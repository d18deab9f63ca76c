import click

from devstrap.cli.output import machine_output, user_output
from devstrap.core.context import DevstrapContext
from devstrap.core.run_config import write_config_template


@click.group("config")
def config_group() -> None:
    """Manage the devstrap run configuration."""


@config_group.command("init")
@click.option("--name", default=None, help="Value for GitUserName.")
@click.option("--email", default=None, help="Value for GitUserEmail.")
@click.option("--package-manager", default=None, help="Package manager to record.")
@click.option("--force", is_flag=True, help="Overwrite an existing config file.")
@click.pass_obj
def config_init(
    ctx: DevstrapContext,
    name: str | None,
    email: str | None,
    package_manager: str | None,
    force: bool,
) -> None:
    """Write a commented starter config file."""
    path = ctx.config_path
    if path.exists() and not force:
        user_output(
            click.style("Error: ", fg="red") + f"{path} already exists (use --force to overwrite)"
        )
        raise SystemExit(1)

    write_config_template(
        path, identity_name=name, identity_email=email, package_manager=package_manager
    )
    user_output(click.style("✓ ", fg="green") + f"Wrote {path}")


@config_group.command("list")
@click.pass_obj
def config_list(ctx: DevstrapContext) -> None:
    """Print the effective configuration keys and values."""
    cfg = ctx.config
    user_output(click.style(f"Run configuration ({ctx.config_path}):", bold=True))
    if not ctx.config_path.exists():
        user_output("  (no config file - run 'devstrap config init' to create one)")
    if cfg.load_error is not None:
        user_output(click.style("  could not parse: ", fg="yellow") + cfg.load_error)

    try:
        manager_name = ctx.package_manager.name
    except ValueError as e:
        manager_name = f"{cfg.package_manager} (invalid: {e})"

    machine_output(f"GitUserName={cfg.identity_name or ''}")
    machine_output(f"GitUserEmail={cfg.identity_email or ''}")
    machine_output(f"package_manager={manager_name}")
    machine_output(f"editors={','.join(ctx.editors)}")
    timeout = "none" if cfg.command_timeout is None else f"{cfg.command_timeout:g}"
    machine_output(f"command_timeout={timeout}")
    machine_output(f"retries={cfg.retries}")
    machine_output(f"retry_delay={cfg.retry_delay:g}")
    machine_output(f"repos_file={cfg.repos_file}")
    machine_output(f"clone_dir={cfg.clone_dir}")
    machine_output(f"catalog={cfg.catalog_path or 'bundled'}")
    machine_output(f"strict={str(cfg.strict).lower()}")
