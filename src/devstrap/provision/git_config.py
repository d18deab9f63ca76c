"""Git global configuration: identity and aliases.

Identity (user.name / user.email) is applied only when both values are set.
Aliases are applied whenever git is present, whether or not identity was.
"""

import logging
from collections.abc import Mapping

from devstrap.core.runner.abc import CommandRunner
from devstrap.core.user_feedback import UserFeedback
from devstrap.provision.presence import exists
from devstrap.provision.report import ItemStatus, StepReport

logger = logging.getLogger(__name__)

GIT_EXECUTABLE = "git"


def _set_global(
    runner: CommandRunner,
    feedback: UserFeedback,
    report: StepReport,
    key: str,
    value: str,
) -> None:
    result = runner.run(
        [GIT_EXECUTABLE, "config", "--global", key, value],
        operation_context=f"set git config '{key}'",
    )
    if result.success:
        report.record(key, ItemStatus.INSTALLED)
    else:
        reason = result.describe_failure()
        feedback.warning(f"Failed to set git {key}: {reason}")
        report.record(key, ItemStatus.FAILED, reason)


def apply_git_config(
    runner: CommandRunner,
    feedback: UserFeedback,
    name: str | None,
    email: str | None,
    aliases: Mapping[str, str],
) -> StepReport:
    """Apply identity and alias settings to git's global configuration.

    Args:
        runner: Runner used for the presence check and git config calls
        feedback: User-facing output
        name: Value for user.name (None or blank means unset)
        email: Value for user.email (None or blank means unset)
        aliases: Alias name to git command, e.g. {"s": "status"}

    Returns:
        StepReport with one result per setting written
    """
    report = StepReport(step="git-config")

    if not exists(runner, GIT_EXECUTABLE):
        feedback.warning("git not found; skipping git configuration")
        report.skipped_reason = "git not found"
        return report

    name = (name or "").strip()
    email = (email or "").strip()
    if name and email:
        feedback.info(f"Configuring git identity: {name} <{email}>")
        _set_global(runner, feedback, report, "user.name", name)
        _set_global(runner, feedback, report, "user.email", email)
    else:
        feedback.warning(
            "GitUserName and GitUserEmail are not both set; git identity was not configured"
        )

    logger.debug("Applying %d git aliases", len(aliases))
    for alias, command in aliases.items():
        _set_global(runner, feedback, report, f"alias.{alias}", command)

    if not report.failures:
        feedback.success(f"✓ git configured ({len(report.results)} settings)")
    return report
