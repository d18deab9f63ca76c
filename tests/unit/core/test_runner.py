"""Tests for the real, retrying and dry-run command runners."""

import subprocess
from unittest.mock import Mock, patch

import pytest

from devstrap.core.runner.abc import CommandResult
from devstrap.core.runner.dry_run import DryRunCommandRunner
from devstrap.core.runner.real import RealCommandRunner
from devstrap.core.runner.retrying import RetryingCommandRunner
from tests.fakes.runner import FakeCommandRunner
from tests.fakes.time import FakeTime


def test_real_runner_returns_result_for_success() -> None:
    with (
        patch("devstrap.core.runner.real.shutil.which", return_value=None),
        patch("devstrap.core.runner.real.subprocess.run") as mock_run,
    ):
        mock_run.return_value = Mock(returncode=0, stdout="ok\n", stderr="")

        result = RealCommandRunner(timeout=30).run(
            ["git", "config", "--global", "alias.s", "status"],
            operation_context="set alias 's'",
        )

    assert result.success
    assert result.argv == ("git", "config", "--global", "alias.s", "status")
    assert result.stdout == "ok\n"
    mock_run.assert_called_once_with(
        ("git", "config", "--global", "alias.s", "status"),
        cwd=None,
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
        check=False,
        timeout=30,
    )


def test_real_runner_executes_resolved_path() -> None:
    """Shims like code.cmd only launch on Windows through their full path."""
    shim = r"C:\Users\dev\AppData\Local\Programs\Microsoft VS Code\bin\code.cmd"
    with (
        patch("devstrap.core.runner.real.shutil.which", return_value=shim) as which,
        patch("devstrap.core.runner.real.subprocess.run") as mock_run,
    ):
        mock_run.return_value = Mock(returncode=0, stdout="", stderr="")

        result = RealCommandRunner().run(
            ["code", "--install-extension", "eamodio.gitlens", "--force"],
            operation_context="install extension",
        )

    which.assert_called_once_with("code")
    assert mock_run.call_args.args[0] == (shim, "--install-extension", "eamodio.gitlens", "--force")
    assert result.argv == ("code", "--install-extension", "eamodio.gitlens", "--force")
    assert result.success


def test_real_runner_does_not_raise_on_nonzero_exit() -> None:
    with patch("devstrap.core.runner.real.subprocess.run") as mock_run:
        mock_run.return_value = Mock(returncode=1603, stdout="", stderr="install failed\n")

        result = RealCommandRunner().run(["choco", "install", "x", "-y"], operation_context="x")

    assert not result.success
    assert result.describe_failure() == "exit code 1603: install failed"


def test_real_runner_reports_missing_executable() -> None:
    with patch("devstrap.core.runner.real.subprocess.run", side_effect=FileNotFoundError):
        result = RealCommandRunner().run(["nope", "--version"], operation_context="check version")

    assert result.returncode == 127
    assert result.describe_failure() == "command not found: nope"


def test_real_runner_reports_timeout() -> None:
    with patch(
        "devstrap.core.runner.real.subprocess.run",
        side_effect=subprocess.TimeoutExpired(cmd=["git", "clone"], timeout=5),
    ):
        result = RealCommandRunner(timeout=5).run(["git", "clone"], operation_context="clone")

    assert result.timed_out
    assert not result.success
    assert result.describe_failure() == "timed out"


def test_real_runner_which_uses_shutil() -> None:
    with patch("devstrap.core.runner.real.shutil.which", return_value="/usr/bin/git") as which:
        assert RealCommandRunner().which("git") == "/usr/bin/git"
    which.assert_called_once_with("git")


def test_retrying_runner_retries_timeouts_then_succeeds() -> None:
    argv = ("git", "clone", "u", "d")
    fake = FakeCommandRunner(timeouts={argv: 2})
    time = FakeTime()
    runner = RetryingCommandRunner(fake, time, retries=2, delay=3.0)

    result = runner.run(argv, operation_context="clone")

    assert result.success
    assert len(fake.commands) == 3
    assert time.sleep_calls == [3.0, 3.0]


def test_retrying_runner_gives_up_after_retries() -> None:
    argv = ("git", "clone", "u", "d")
    fake = FakeCommandRunner(timeouts={argv: 5})
    runner = RetryingCommandRunner(fake, FakeTime(), retries=1, delay=0)

    result = runner.run(argv, operation_context="clone")

    assert result.timed_out
    assert len(fake.commands) == 2


def test_retrying_runner_does_not_retry_ordinary_failures() -> None:
    argv = ("choco", "install", "git", "-y")
    fake = FakeCommandRunner(failing_commands=[argv])
    time = FakeTime()
    runner = RetryingCommandRunner(fake, time, retries=3, delay=1.0)

    result = runner.run(argv, operation_context="install")

    assert result.returncode == 1
    assert len(fake.commands) == 1
    assert time.sleep_calls == []


def test_dry_run_runner_prints_instead_of_running(capsys: pytest.CaptureFixture[str]) -> None:
    fake = FakeCommandRunner(installed=["choco"])
    runner = DryRunCommandRunner(fake)

    result = runner.run(["choco", "install", "git", "-y"], operation_context="install")

    assert result == CommandResult(argv=("choco", "install", "git", "-y"), returncode=0)
    assert fake.commands == []
    assert "Would run: choco install git -y" in capsys.readouterr().err


def test_dry_run_runner_delegates_presence_checks() -> None:
    runner = DryRunCommandRunner(FakeCommandRunner(installed=["git"]))

    assert runner.which("git") == "/usr/bin/git"
    assert runner.which("code") is None
