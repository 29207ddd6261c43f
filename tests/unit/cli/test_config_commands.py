from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

import confy.settings as settings_module
from confy.cli.main import app
from confy.settings import Settings

runner = CliRunner()

pytestmark = pytest.mark.skipif(not sys.platform.startswith("linux"), reason="XDG layout is Linux-specific")


@pytest.fixture
def xdg(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setattr(settings_module, "_settings", Settings(format="toml"))
    yield tmp_path / "xdg"
    logger.remove()
    logger.disable("confy")


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_config_path_prints_default_location(xdg: Path) -> None:
    result = runner.invoke(app, ["config", "path", "my-app"])

    assert result.exit_code == 0
    assert result.stdout.strip() == str(xdg / "my-app" / "default-config.toml")


def test_config_path_honours_name_and_format(xdg: Path) -> None:
    result = runner.invoke(app, ["config", "path", "my-app", "--name", "server", "--format", "yaml"])

    assert result.exit_code == 0
    assert result.stdout.strip() == str(xdg / "my-app" / "server.yaml")


def test_config_path_does_not_create_files(xdg: Path) -> None:
    runner.invoke(app, ["config", "path", "my-app"])

    assert not xdg.exists()


def test_config_show_prints_document(xdg: Path) -> None:
    _write(xdg / "my-app" / "default-config.toml", 'name = "shown"\n')

    result = runner.invoke(app, ["config", "show", "my-app"])

    assert result.exit_code == 0
    assert result.stdout == 'name = "shown"\n'


def test_config_show_fails_when_document_missing(xdg: Path) -> None:
    result = runner.invoke(app, ["config", "show", "my-app", "--no-color"])

    assert result.exit_code == 1
    assert "Unable to read" in result.output


def test_config_check_accepts_valid_document(xdg: Path) -> None:
    config_file = xdg / "my-app" / "default-config.yaml"
    _write(config_file, "name: ok\nnested:\n  value: 1\n")

    result = runner.invoke(app, ["config", "check", "my-app", "-f", "yaml"])

    assert result.exit_code == 0
    assert result.stdout.strip() == f"OK {config_file}"


def test_config_check_reports_decode_error(xdg: Path) -> None:
    config_file = xdg / "my-app" / "db.json"
    _write(config_file, "{invalid json")

    result = runner.invoke(app, ["config", "check", "my-app", "--name", "db", "--format", "json"])

    assert result.exit_code == 1
    assert str(config_file) in result.output
    assert "line 1" in result.output


def test_config_check_rejects_non_mapping_document(xdg: Path) -> None:
    _write(xdg / "my-app" / "default-config.toml", "")
    _write(xdg / "my-app" / "list.yaml", "- a\n- b\n")

    assert runner.invoke(app, ["config", "check", "my-app"]).exit_code == 0

    result = runner.invoke(app, ["config", "check", "my-app", "-n", "list", "-f", "yaml"])
    assert result.exit_code == 1
    assert "mapping" in result.output


def test_root_without_command_prints_help(xdg: Path) -> None:
    result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert "config" in result.stdout


def test_verbose_flag_enables_debug_logging(xdg: Path) -> None:
    result = runner.invoke(app, ["--verbose", "--no-color", "config", "path", "my-app"])

    assert result.exit_code == 0
    assert str(xdg / "my-app" / "default-config.toml") in result.stdout
