"""Tests for CLI Ensure utility class."""

import pytest

from devstrap.cli.ensure import Ensure
from devstrap.provision.packages import get_package_manager
from tests.fakes.context import create_test_context, make_config
from tests.fakes.host import FakeHost


class TestEnsureInvariant:
    """Tests for Ensure.invariant method."""

    def test_passes_when_true(self) -> None:
        Ensure.invariant(True, "unused")

    def test_error_message_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Ensure.invariant outputs error message with red Error prefix to stderr."""
        with pytest.raises(SystemExit) as exc_info:
            Ensure.invariant(False, "Custom error message")

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert "Error:" in captured.err
        assert "Custom error message" in captured.err


class TestEnsureTruthy:
    """Tests for Ensure.truthy method."""

    def test_returns_value_when_truthy(self) -> None:
        assert Ensure.truthy(["code"], "No editors") == ["code"]

    def test_exits_when_empty(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            Ensure.truthy([], "No editors")
        assert exc_info.value.code == 1


class TestEnsurePackageManager:
    """Tests for Ensure.package_manager method."""

    def test_returns_resolved_manager(self) -> None:
        ctx = create_test_context(config=make_config(package_manager="winget"))

        assert Ensure.package_manager(ctx).name == "winget"

    def test_exits_for_unsupported_manager(self, capsys: pytest.CaptureFixture[str]) -> None:
        ctx = create_test_context(config=make_config(package_manager="pacman"))

        with pytest.raises(SystemExit):
            Ensure.package_manager(ctx)

        assert "Unsupported package manager 'pacman'" in capsys.readouterr().err


class TestEnsureElevated:
    """Tests for Ensure.elevated method."""

    def test_passes_when_elevated(self) -> None:
        ctx = create_test_context(host=FakeHost(elevated=True))

        Ensure.elevated(ctx, get_package_manager("choco"))

    def test_exits_when_not_elevated(self, capsys: pytest.CaptureFixture[str]) -> None:
        ctx = create_test_context(host=FakeHost(elevated=False))

        with pytest.raises(SystemExit) as exc_info:
            Ensure.elevated(ctx, get_package_manager("choco"))

        assert exc_info.value.code == 1
        assert "choco installs require an elevated shell" in capsys.readouterr().err

    def test_user_scoped_manager_needs_no_elevation(self) -> None:
        ctx = create_test_context(host=FakeHost(elevated=False))

        Ensure.elevated(ctx, get_package_manager("scoop"))
