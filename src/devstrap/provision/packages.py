"""Package install driver.

Installs every catalog package whose presence check fails, one package manager
call per package, in catalog order. A failed install never stops the batch.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from devstrap.core.catalog import DesiredPackage
from devstrap.core.runner.abc import CommandRunner
from devstrap.core.user_feedback import UserFeedback
from devstrap.provision.presence import exists
from devstrap.provision.report import ItemStatus, StepReport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackageManager:
    """How to drive one package manager unattended.

    install_args is the argv template; "{id}" is replaced by the package
    identifier.
    """

    name: str
    executable: str
    install_args: tuple[str, ...]
    requires_elevation: bool

    def install_argv(self, identifier: str) -> list[str]:
        return [self.executable, *(a.replace("{id}", identifier) for a in self.install_args)]


PACKAGE_MANAGERS: dict[str, PackageManager] = {
    "choco": PackageManager(
        name="choco",
        executable="choco",
        install_args=("install", "{id}", "-y"),
        requires_elevation=True,
    ),
    "winget": PackageManager(
        name="winget",
        executable="winget",
        install_args=(
            "install",
            "--id",
            "{id}",
            "--exact",
            "--silent",
            "--accept-package-agreements",
            "--accept-source-agreements",
        ),
        requires_elevation=True,
    ),
    "scoop": PackageManager(
        name="scoop",
        executable="scoop",
        install_args=("install", "{id}"),
        requires_elevation=False,
    ),
    "brew": PackageManager(
        name="brew",
        executable="brew",
        install_args=("install", "{id}"),
        requires_elevation=False,
    ),
    "apt": PackageManager(
        name="apt",
        executable="apt-get",
        install_args=("install", "-y", "{id}"),
        requires_elevation=True,
    ),
}

PLATFORM_DEFAULT_MANAGERS = {
    "windows": "choco",
    "darwin": "brew",
    "linux": "apt",
}


def get_package_manager(name: str) -> PackageManager:
    """Look up a supported package manager by name.

    Raises:
        ValueError: If the name is not a supported package manager
    """
    manager = PACKAGE_MANAGERS.get(name)
    if manager is None:
        supported = ", ".join(sorted(PACKAGE_MANAGERS))
        raise ValueError(f"Unsupported package manager '{name}' (supported: {supported})")
    return manager


def install_all(
    runner: CommandRunner,
    feedback: UserFeedback,
    packages: Sequence[DesiredPackage],
    manager: PackageManager,
) -> StepReport:
    """Install every package that is not already present.

    Args:
        runner: Runner used for presence checks and install commands
        feedback: User-facing output
        packages: Catalog packages, processed in order
        manager: Package manager used for installs

    Returns:
        StepReport with one result per package
    """
    report = StepReport(step="packages")
    manager_available = exists(runner, manager.executable)
    if not manager_available:
        feedback.warning(
            f"{manager.executable} not found; missing packages cannot be installed. "
            f"Install {manager.name} first."
        )

    for package in packages:
        if exists(runner, package.presence_check):
            feedback.info(f"{package.display_name} already installed, skipping")
            report.record(package.display_name, ItemStatus.SKIPPED, "already installed")
            continue

        if not manager_available:
            report.record(
                package.display_name,
                ItemStatus.FAILED,
                f"{manager.executable} not available",
            )
            continue

        identifier = package.identifier_for(manager.name)
        feedback.info(f"Installing {package.display_name} ({identifier})...")
        result = runner.run(
            manager.install_argv(identifier),
            operation_context=f"install package '{identifier}'",
        )
        if result.success:
            feedback.success(f"✓ {package.display_name} installed")
            report.record(package.display_name, ItemStatus.INSTALLED)
        else:
            reason = result.describe_failure()
            logger.debug("Install of %s failed: %s", identifier, reason)
            feedback.warning(f"Failed to install {package.display_name}: {reason}")
            report.record(package.display_name, ItemStatus.FAILED, reason)

    return report
