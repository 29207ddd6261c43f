from __future__ import annotations

import sys
from pathlib import Path

import pytest

from confy.utils import resolve_base_config_dir

linux_only = pytest.mark.skipif(not sys.platform.startswith("linux"), reason="XDG layout is Linux-specific")


@linux_only
def test_resolve_base_config_dir_honours_xdg_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))

    assert resolve_base_config_dir("", "my-app") == tmp_path / "xdg" / "my-app"


@linux_only
def test_resolve_base_config_dir_ignores_organization_on_linux(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))

    assert resolve_base_config_dir("acme", "my-app") == tmp_path / "xdg" / "my-app"


@linux_only
def test_resolve_base_config_dir_defaults_to_home_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))

    assert resolve_base_config_dir("", "my-app") == tmp_path / ".config" / "my-app"


@pytest.mark.parametrize("app_name", ["", "   "])
def test_resolve_base_config_dir_rejects_blank_app_name(app_name: str) -> None:
    assert resolve_base_config_dir("", app_name) is None


def test_resolve_base_config_dir_returns_absolute_path() -> None:
    config_dir = resolve_base_config_dir("", "my-app")

    assert config_dir is not None
    assert config_dir.is_absolute()
    assert config_dir.name == "my-app"

