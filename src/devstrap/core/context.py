"""Application context with dependency injection."""

import logging
from dataclasses import dataclass
from pathlib import Path

from devstrap.core.catalog import Catalog, load_catalog
from devstrap.core.host.abc import Host
from devstrap.core.host.real import RealHost
from devstrap.core.run_config import DEFAULT_CONFIG_FILENAME, RunConfig, load_run_config
from devstrap.core.runner.abc import CommandRunner
from devstrap.core.runner.dry_run import DryRunCommandRunner
from devstrap.core.runner.real import RealCommandRunner
from devstrap.core.runner.retrying import RetryingCommandRunner
from devstrap.core.time.real import RealTime
from devstrap.core.user_feedback import InteractiveFeedback, QuietFeedback, UserFeedback
from devstrap.provision.packages import (
    PLATFORM_DEFAULT_MANAGERS,
    PackageManager,
    get_package_manager,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DevstrapContext:
    """Immutable context holding all dependencies for devstrap operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    runner: CommandRunner
    host: Host
    feedback: UserFeedback
    cwd: Path  # Current working directory at CLI invocation
    config_path: Path
    config: RunConfig
    catalog: Catalog
    dry_run: bool

    @property
    def package_manager(self) -> PackageManager:
        """Configured package manager, or the platform default.

        Raises:
            ValueError: If the configured name is not supported
        """
        name = self.config.package_manager or PLATFORM_DEFAULT_MANAGERS.get(
            self.host.platform_name(), "choco"
        )
        return get_package_manager(name)

    @property
    def editors(self) -> list[str]:
        """Editors from the run configuration, falling back to the catalog."""
        if self.config.editors is not None:
            return self.config.editors
        return self.catalog.editors


def create_context(
    *,
    dry_run: bool,
    quiet: bool = False,
    config_path: Path | None = None,
    catalog_path: Path | None = None,
) -> DevstrapContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Args:
        dry_run: If True, wrap the runner so commands are printed, not executed
        quiet: If True, suppress informational output
        config_path: Run configuration file (defaults to ./devstrap.toml)
        catalog_path: Catalog override; takes precedence over the config file

    Returns:
        DevstrapContext with real implementations

    Raises:
        FileNotFoundError: If an explicit catalog path doesn't exist
        ValueError: If the config or catalog is invalid
    """
    # 1. Capture cwd (no deps)
    cwd = Path.cwd()

    # 2. Load run config (no deps) - defaults if the file doesn't exist
    resolved_config_path = (
        config_path if config_path is not None else cwd / DEFAULT_CONFIG_FILENAME
    )
    config = load_run_config(resolved_config_path, cwd)
    logger.debug("Loaded run config from %s: %s", resolved_config_path, config)

    # 3. Load catalog (CLI flag beats config file beats bundled default)
    catalog = load_catalog(catalog_path or config.catalog_path)

    # 4. Build runner stack: real -> retrying -> dry-run
    runner: CommandRunner = RealCommandRunner(timeout=config.command_timeout)
    if config.retries > 0:
        runner = RetryingCommandRunner(
            runner, RealTime(), retries=config.retries, delay=config.retry_delay
        )
    if dry_run:
        runner = DryRunCommandRunner(runner)

    feedback: UserFeedback = QuietFeedback() if quiet else InteractiveFeedback()

    return DevstrapContext(
        runner=runner,
        host=RealHost(),
        feedback=feedback,
        cwd=cwd,
        config_path=resolved_config_path,
        config=config,
        catalog=catalog,
        dry_run=dry_run,
    )
