"""Logging utilities for confy using Loguru.

Library usage keeps logging disabled until the caller opts in with
``confy.enable_logging()``. The CLI installs its own stderr sink.
"""

import sys
from typing import Literal

import loguru
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from confy.constants import APP_NAME

from .models import AppInfo

type Logger = "loguru.Logger"


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    enabled: bool = Field(default=False)
    log_level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = Field(default="WARNING")
    format: Literal["json", "text"] = Field(default="text")


def get_cli_logs_format(record: "loguru.Record") -> str:
    # Extras are referenced by key; their values may contain braces
    extra_keys = [k for k in record["extra"] if k not in ["scope", "env"]]
    extra_str = "".join(f" {k}={{extra[{k}]}}" for k in extra_keys)

    return (
        "<cyan>[{extra[scope]}]</cyan> <level>{level: <8}</level> {message}"
        f"<dim>{extra_str}</dim>\n{{exception}}"
    )


def setup_cli_logging(app_info: AppInfo, config: LoggingConfig, colorize: bool = True) -> int:
    logger.enable(APP_NAME)
    logger.remove()
    logger.configure(extra={"scope": "cli", "env": app_info.environment})

    if config.format == "json":
        handler_id = logger.add(
            sys.stderr,
            level=config.log_level,
            serialize=True,
            format="{message}",
            diagnose=(app_info.environment == "dev"),
        )
    else:
        handler_id = logger.add(
            sys.stderr,
            level=config.log_level,
            format=get_cli_logs_format,
            colorize=colorize,
            diagnose=(app_info.environment == "dev"),
        )

    logger.debug("CLI logging initialized", level=config.log_level, format=config.format)

    return handler_id


def disable_library_logging() -> None:
    logger.disable(APP_NAME)


def enable_library_logging(level: str = "INFO") -> int:
    logger.enable(APP_NAME)
    logger.remove()

    return logger.add(
        sys.stderr,
        level=level,
        format=_get_text_format(),
        colorize=False,
    )


def create_logger(scope: str) -> Logger:
    return logger.bind(scope=scope)


def _get_text_format() -> str:
    return "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}\n{exception}"
