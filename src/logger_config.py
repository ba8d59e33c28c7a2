"""Logging setup shared by the command line and the batch checker."""

from __future__ import annotations

import logging
import logging.config
import os
from pathlib import Path

DEFAULT_LOGGING_CONFIG = "logging_config.ini"
LOG_CONFIG_ENV = "LOG_CFG"


def _config_path(default_path: str, env_key: str) -> Path:
    value = os.getenv(env_key)
    if value:
        return Path(value)
    return Path(__file__).parent.parent / default_path


def setup_logging(
    default_path: str = DEFAULT_LOGGING_CONFIG,
    default_level: int = logging.INFO,
    env_key: str = LOG_CONFIG_ENV,
    level: int | None = None,
) -> None:
    """
    Configure logging from an ini file, else fall back to basicConfig.

    Args:
    ----
        default_path (str): Ini file name, relative to the project root.
        default_level (int): Level used when no ini file is found.
        env_key (str): Environment variable that overrides the ini path.
        level (int | None): Root level forced after configuration, e.g.
            DEBUG to see per-line checksum mismatches.

    """
    path = _config_path(default_path, env_key)
    if path.exists():
        logging.config.fileConfig(path.resolve(), disable_existing_loggers=False)
    else:
        logging.basicConfig(level=default_level)

    if level is not None:
        root = logging.getLogger()
        root.setLevel(level)
        for handler in root.handlers:
            handler.setLevel(level)
