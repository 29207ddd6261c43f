from __future__ import annotations

from pathlib import Path

from result import is_err

from confy.common import BadConfigDirectoryError
from confy.storage import resolve_config_path


def test_resolve_config_path_appends_default_name_and_extension(tmp_path: Path) -> None:
    result = resolve_config_path("my-app", None, "yaml", resolver=lambda organization, app_name: tmp_path / app_name)

    assert result.unwrap() == tmp_path / "my-app" / "default-config.yaml"


def test_resolve_config_path_treats_empty_name_as_default(tmp_path: Path) -> None:
    result = resolve_config_path("my-app", "", "toml", resolver=lambda organization, app_name: tmp_path)

    assert result.unwrap() == tmp_path / "default-config.toml"


def test_resolve_config_path_is_deterministic(tmp_path: Path) -> None:
    def resolver(organization: str, app_name: str) -> Path:
        return tmp_path / organization / app_name

    first = resolve_config_path("my-app", "db", "json", organization="acme", resolver=resolver)
    second = resolve_config_path("my-app", "db", "json", organization="acme", resolver=resolver)

    assert first == second
    assert first.unwrap() == tmp_path / "acme" / "my-app" / "db.json"


def test_resolve_config_path_reports_unresolvable_directory() -> None:
    result = resolve_config_path("my-app", None, "toml", resolver=lambda organization, app_name: None)

    assert is_err(result)
    error = result.unwrap_err()
    assert isinstance(error, BadConfigDirectoryError)
    assert "my-app" in error.message
