"""Editor extension install driver.

The same extension list is offered to every compatible editor CLI (VS Code
and its forks share the `--install-extension` subcommand). Each editor is
handled independently.
"""

import logging
from collections.abc import Sequence

from devstrap.core.runner.abc import CommandRunner
from devstrap.core.user_feedback import UserFeedback
from devstrap.provision.presence import exists
from devstrap.provision.report import ItemStatus, StepReport

logger = logging.getLogger(__name__)


def install_extensions(
    runner: CommandRunner,
    feedback: UserFeedback,
    editor_command: str,
    extensions: Sequence[str],
) -> StepReport:
    """Install extensions into one editor.

    Args:
        runner: Runner used for the presence check and install commands
        feedback: User-facing output
        editor_command: Editor CLI executable (e.g. "code", "cursor")
        extensions: Extension identifiers, installed in order

    Returns:
        StepReport named "extensions (<editor>)"; skipped when the editor
        is not installed
    """
    report = StepReport(step=f"extensions ({editor_command})")

    if not exists(runner, editor_command):
        feedback.warning(f"{editor_command} not found; skipping its extensions")
        report.skipped_reason = f"{editor_command} not found"
        return report

    feedback.info(f"Installing {len(extensions)} extension(s) into {editor_command}...")
    for extension in extensions:
        result = runner.run(
            [editor_command, "--install-extension", extension, "--force"],
            operation_context=f"install extension '{extension}' into {editor_command}",
        )
        if result.success:
            report.record(extension, ItemStatus.INSTALLED)
        else:
            reason = result.describe_failure()
            logger.debug("Extension %s failed in %s: %s", extension, editor_command, reason)
            feedback.warning(f"Failed to install {extension} into {editor_command}: {reason}")
            report.record(extension, ItemStatus.FAILED, reason)

    installed = report.count(ItemStatus.INSTALLED)
    feedback.success(
        f"✓ {installed}/{len(extensions)} extension(s) installed into {editor_command}"
    )
    return report
