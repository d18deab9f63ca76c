"""Run configuration data structures and loading.

Provides immutable run configuration loaded once from devstrap.toml at the
CLI entry point and passed explicitly to the steps that need it.

Example devstrap.toml:

    GitUserName = "Ada Lovelace"
    GitUserEmail = "ada@example.com"

    [devstrap]
    package_manager = "winget"
    editors = ["code", "cursor"]
    command_timeout = 900
    retries = 1
"""

import tomllib
from dataclasses import dataclass
from pathlib import Path

import tomlkit
from tomlkit.items import Item

DEFAULT_CONFIG_FILENAME = "devstrap.toml"
DEFAULT_REPOS_FILENAME = "repos.txt"
DEFAULT_COMMAND_TIMEOUT = 1800.0
DEFAULT_RETRY_DELAY = 5.0


def default_clone_dir() -> Path:
    return (Path.home() / "repos").resolve()


@dataclass(frozen=True)
class RunConfig:
    """Immutable run configuration.

    identity_name/identity_email are None when unset or blank. package_manager
    and editors are None when the platform default or the catalog should decide.
    load_error holds the parse error message when the file was malformed.
    """

    identity_name: str | None
    identity_email: str | None
    package_manager: str | None
    editors: list[str] | None
    command_timeout: float | None
    retries: int
    retry_delay: float
    repos_file: Path
    clone_dir: Path
    catalog_path: Path | None
    strict: bool
    load_error: str | None = None

    @property
    def has_identity(self) -> bool:
        return bool(self.identity_name) and bool(self.identity_email)

    @staticmethod
    def defaults(cwd: Path) -> "RunConfig":
        """Configuration used when no file exists."""
        return RunConfig(
            identity_name=None,
            identity_email=None,
            package_manager=None,
            editors=None,
            command_timeout=DEFAULT_COMMAND_TIMEOUT,
            retries=0,
            retry_delay=DEFAULT_RETRY_DELAY,
            repos_file=cwd / DEFAULT_REPOS_FILENAME,
            clone_dir=default_clone_dir(),
            catalog_path=None,
            strict=False,
        )


def _optional_str(value: object) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _resolve_path(value: object, base: Path) -> Path:
    path = Path(str(value)).expanduser()
    if not path.is_absolute():
        path = base / path
    return path


def load_run_config(path: Path, cwd: Path) -> RunConfig:
    """Load the run configuration from a TOML file.

    A missing file yields defaults. A malformed, non-UTF-8 or unreadable file
    also yields defaults, with load_error set so the caller can warn; only the
    identity step degrades.

    Args:
        path: Config file path
        cwd: Directory relative paths in the file are resolved against

    Returns:
        RunConfig instance with loaded values

    Raises:
        ValueError: If a [devstrap] value has the wrong type
    """
    defaults = RunConfig.defaults(cwd)
    if not path.exists():
        return defaults

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError, OSError) as e:
        return RunConfig(
            identity_name=None,
            identity_email=None,
            package_manager=defaults.package_manager,
            editors=defaults.editors,
            command_timeout=defaults.command_timeout,
            retries=defaults.retries,
            retry_delay=defaults.retry_delay,
            repos_file=defaults.repos_file,
            clone_dir=defaults.clone_dir,
            catalog_path=defaults.catalog_path,
            strict=defaults.strict,
            load_error=f"{path}: {e}",
        )

    section = data.get("devstrap", {})
    if not isinstance(section, dict):
        raise ValueError(f"[devstrap] in {path} must be a table")

    editors = section.get("editors")
    if editors is not None and not isinstance(editors, list):
        raise ValueError(f"'editors' in {path} must be a list of editor commands")

    timeout = section.get("command_timeout", defaults.command_timeout)
    if timeout is not None and not isinstance(timeout, (int, float)):
        raise ValueError(f"'command_timeout' in {path} must be a number of seconds")

    retries = section.get("retries", defaults.retries)
    if not isinstance(retries, int) or retries < 0:
        raise ValueError(f"'retries' in {path} must be a non-negative integer")

    retry_delay = section.get("retry_delay", defaults.retry_delay)
    if not isinstance(retry_delay, (int, float)):
        raise ValueError(f"'retry_delay' in {path} must be a number of seconds")

    strict = section.get("strict", defaults.strict)
    if not isinstance(strict, bool):
        raise ValueError(f"'strict' in {path} must be true or false")

    repos_file = section.get("repos_file")
    clone_dir = section.get("clone_dir")
    catalog = section.get("catalog")

    return RunConfig(
        identity_name=_optional_str(data.get("GitUserName")),
        identity_email=_optional_str(data.get("GitUserEmail")),
        package_manager=_optional_str(section.get("package_manager")),
        editors=[str(e) for e in editors] if editors is not None else None,
        # 0 disables the timeout
        command_timeout=float(timeout) if timeout else None,
        retries=retries,
        retry_delay=float(retry_delay),
        repos_file=_resolve_path(repos_file, cwd) if repos_file else defaults.repos_file,
        clone_dir=_resolve_path(clone_dir, cwd) if clone_dir else defaults.clone_dir,
        catalog_path=_resolve_path(catalog, cwd) if catalog else None,
        strict=strict,
    )


def _commented(value: object, comment: str) -> Item:
    item = tomlkit.item(value)
    item.comment(comment)
    return item


def write_config_template(
    path: Path,
    *,
    identity_name: str | None = None,
    identity_email: str | None = None,
    package_manager: str | None = None,
) -> None:
    """Write a commented starter devstrap.toml.

    Uses tomlkit so the generated file carries comments explaining each key.
    """
    doc = tomlkit.document()
    doc.add(tomlkit.comment("devstrap run configuration"))
    doc.add(tomlkit.comment("Identity is applied with `git config --global` when both are set."))
    doc["GitUserName"] = identity_name or ""
    doc["GitUserEmail"] = identity_email or ""

    section = tomlkit.table()
    if package_manager:
        section["package_manager"] = package_manager
    else:
        section.add(tomlkit.comment('package_manager = "choco"  # choco, winget, scoop, brew, apt'))
    section.add(tomlkit.comment('editors = ["code", "cursor"]'))
    section.add(
        "command_timeout",
        _commented(int(DEFAULT_COMMAND_TIMEOUT), "seconds per command, 0 disables"),
    )
    section.add("retries", _commented(0, "extra attempts for commands that time out"))
    section.add(tomlkit.comment(f'repos_file = "{DEFAULT_REPOS_FILENAME}"'))
    section.add(tomlkit.comment('clone_dir = "~/repos"'))
    section.add("strict", _commented(False, "exit non-zero when any item fails"))
    doc["devstrap"] = section

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(tomlkit.dumps(doc), encoding="utf-8")
