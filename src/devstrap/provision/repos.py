"""Batch repository cloner.

Reads a newline-delimited list of repository references and clones each into
its own directory under a target directory.
"""

import logging
import re
from pathlib import Path

from devstrap.core.runner.abc import CommandRunner
from devstrap.core.user_feedback import UserFeedback
from devstrap.provision.report import ItemStatus, StepReport

logger = logging.getLogger(__name__)

# Path separators for URLs, Windows paths and scp-style "host:org/repo" references
_SEPARATORS = re.compile(r"[/\\:]")


def read_repo_list(list_file: Path) -> list[str]:
    """Return the non-blank lines of a repository list file, stripped.

    A UTF-8 byte order mark (as written by Windows Notepad) is ignored.

    Raises:
        UnicodeDecodeError: If the file is not UTF-8
        OSError: If the file cannot be read
    """
    lines = list_file.read_text(encoding="utf-8-sig").splitlines()
    return [line.strip() for line in lines if line.strip()]


def derive_clone_name(entry: str) -> str:
    """Derive the destination directory name from a repository reference.

    Takes the final path component and strips its extension:

        >>> derive_clone_name("https://example.com/a/b.git")
        'b'
        >>> derive_clone_name("git@github.com:org/tool.git")
        'tool'
        >>> derive_clone_name("C:\\\\src\\\\mirror\\\\lib")
        'lib'

    Returns an empty string when the reference has no usable component.
    """
    trimmed = entry.strip().rstrip("/\\")
    last = _SEPARATORS.split(trimmed)[-1] if trimmed else ""
    stem, dot, _ext = last.rpartition(".")
    if dot and stem:
        return stem
    return last


def clone_all(
    runner: CommandRunner,
    feedback: UserFeedback,
    list_file: Path,
    target_dir: Path,
    *,
    dry_run: bool = False,
) -> StepReport:
    """Clone every repository listed in `list_file` into `target_dir`.

    A missing list file makes the step a no-op and the target directory is
    left untouched. Destinations that already exist are skipped.

    Args:
        runner: Runner used for git clone
        feedback: User-facing output
        list_file: Newline-delimited repository references
        target_dir: Directory receiving one subdirectory per repository
        dry_run: When True, the target directory is not created

    Returns:
        StepReport with one result per listed repository
    """
    report = StepReport(step="clone")

    if not list_file.exists():
        feedback.info(f"No repository list at {list_file}; skipping clone")
        report.skipped_reason = f"{list_file.name} not found"
        return report

    try:
        entries = read_repo_list(list_file)
    except (UnicodeDecodeError, OSError) as e:
        feedback.warning(f"Cannot read repository list {list_file}: {e}; skipping clone")
        report.skipped_reason = f"{list_file.name} unreadable"
        return report
    logger.debug("Read %d repository reference(s) from %s", len(entries), list_file)

    if not target_dir.exists():
        if dry_run:
            feedback.info(f"Would create {target_dir}")
        else:
            target_dir.mkdir(parents=True, exist_ok=True)

    for entry in entries:
        name = derive_clone_name(entry)
        if not name:
            feedback.warning(f"Cannot derive a directory name from '{entry}'; skipping")
            report.record(entry, ItemStatus.FAILED, "no directory name")
            continue

        destination = target_dir / name
        if destination.exists():
            feedback.info(f"{destination} already exists, skipping")
            report.record(entry, ItemStatus.SKIPPED, "destination exists")
            continue

        feedback.info(f"Cloning {entry} into {destination}...")
        result = runner.run(
            ["git", "clone", entry, str(destination)],
            operation_context=f"clone '{entry}'",
        )
        if result.success:
            report.record(entry, ItemStatus.INSTALLED)
        else:
            reason = result.describe_failure()
            feedback.warning(f"Failed to clone {entry}: {reason}")
            report.record(entry, ItemStatus.FAILED, reason)

    return report
