from __future__ import annotations

import pytest
from loguru import logger

from confy.common import AppInfo, LoggingConfig, create_logger, setup_cli_logging
from confy.common.logging import get_cli_logs_format


def test_cli_logs_format_references_extras_by_key() -> None:
    record = {"extra": {"scope": "store", "env": "test", "path": "{not-a-field}"}}

    log_format = get_cli_logs_format(record)

    assert "path={extra[path]}" in log_format
    assert "{not-a-field}" not in log_format
    assert "env=" not in log_format


def test_setup_cli_logging_writes_text_with_braces_in_extras(capsys: pytest.CaptureFixture[str]) -> None:
    config = LoggingConfig(enabled=True, log_level="DEBUG", format="text")

    handler_id = setup_cli_logging(AppInfo(environment="test"), config, colorize=False)
    try:
        create_logger("store").debug("Config stored", payload={"a": 1})
    finally:
        logger.remove(handler_id)
        logger.disable("confy")

    err = capsys.readouterr().err
    assert "[store]" in err
    assert "Config stored payload={'a': 1}" in err


def test_create_logger_binds_scope() -> None:
    records: list[dict] = []
    logger.enable("confy")
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    try:
        create_logger("store").debug("hello", path="/tmp/x")
    finally:
        logger.remove(handler_id)
        logger.disable("confy")

    assert records
    assert records[-1]["extra"]["scope"] == "store"
    assert records[-1]["extra"]["path"] == "/tmp/x"


def test_setup_cli_logging_writes_json_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    config = LoggingConfig(enabled=True, log_level="DEBUG", format="json")

    handler_id = setup_cli_logging(AppInfo(environment="test"), config)
    try:
        create_logger("cli").info("structured")
    finally:
        logger.remove(handler_id)
        logger.disable("confy")

    assert '"structured"' in capsys.readouterr().err


def test_logging_config_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        LoggingConfig(log_level="LOUD")
