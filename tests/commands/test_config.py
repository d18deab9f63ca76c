"""Tests for the config and catalog commands."""

import tomllib
from pathlib import Path

import pytest
from click.testing import CliRunner

from devstrap.cli.cli import cli
from devstrap.core.catalog import DesiredPackage
from tests.fakes.context import create_test_context, make_catalog, make_config


def test_config_init_writes_template(tmp_path: Path) -> None:
    ctx = create_test_context(cwd=tmp_path)

    result = CliRunner().invoke(
        cli,
        ["config", "init", "--name", "Ada", "--email", "ada@example.com"],
        obj=ctx,
    )

    assert result.exit_code == 0, result.output
    assert f"Wrote {tmp_path / 'devstrap.toml'}" in result.output
    data = tomllib.loads((tmp_path / "devstrap.toml").read_text(encoding="utf-8"))
    assert data["GitUserName"] == "Ada"
    assert data["GitUserEmail"] == "ada@example.com"


def test_config_init_refuses_to_overwrite(tmp_path: Path) -> None:
    config_path = tmp_path / "devstrap.toml"
    config_path.write_text('GitUserName = "Keep"\n', encoding="utf-8")
    ctx = create_test_context(cwd=tmp_path)

    result = CliRunner().invoke(cli, ["config", "init"], obj=ctx)

    assert result.exit_code == 1
    assert "already exists" in result.output
    assert config_path.read_text(encoding="utf-8") == 'GitUserName = "Keep"\n'


def test_config_init_force_overwrites(tmp_path: Path) -> None:
    config_path = tmp_path / "devstrap.toml"
    config_path.write_text('GitUserName = "Old"\n', encoding="utf-8")
    ctx = create_test_context(cwd=tmp_path)

    result = CliRunner().invoke(cli, ["config", "init", "--force", "--name", "New"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert tomllib.loads(config_path.read_text(encoding="utf-8"))["GitUserName"] == "New"


def test_config_list_prints_effective_values(tmp_path: Path) -> None:
    ctx = create_test_context(
        cwd=tmp_path,
        config=make_config(
            tmp_path,
            identity_name="Ada",
            package_manager="winget",
            command_timeout=None,
            retries=2,
        ),
        catalog=make_catalog(editors=["code"]),
    )

    result = CliRunner().invoke(cli, ["config", "list"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "GitUserName=Ada" in result.output
    assert "GitUserEmail=\n" in result.output
    assert "package_manager=winget" in result.output
    assert "editors=code" in result.output
    assert "command_timeout=none" in result.output
    assert "retries=2" in result.output
    assert "catalog=bundled" in result.output
    assert "strict=false" in result.output


def test_catalog_shows_manager_specific_identifiers() -> None:
    catalog = make_catalog(
        packages=[DesiredPackage("Git", "git", "git", manager_identifiers={"winget": "Git.Git"})],
        extensions=["eamodio.gitlens"],
        git_aliases={"s": "status"},
    )
    ctx = create_test_context(config=make_config(package_manager="winget"), catalog=catalog)

    result = CliRunner().invoke(cli, ["catalog"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Packages (winget)" in result.output
    assert "Git.Git" in result.output
    assert "eamodio.gitlens" in result.output
    assert "status" in result.output


def test_malformed_catalog_flag_is_a_precondition_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    catalog_path = tmp_path / "catalog.yaml"
    catalog_path.write_text("packages: [\n", encoding="utf-8")

    result = CliRunner().invoke(cli, ["--catalog", str(catalog_path), "catalog"])

    assert result.exit_code == 1
    assert "Error: " in result.output
    assert "not valid YAML" in result.output


def test_config_list_header_goes_to_stderr(tmp_path: Path) -> None:
    ctx = create_test_context(cwd=tmp_path)

    result = CliRunner().invoke(cli, ["config", "list"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert f"Run configuration ({tmp_path / 'devstrap.toml'}):" in result.stderr
    assert "Run configuration" not in result.stdout
