"""Logging configuration utilities for the profile switcher."""

import logging
import logging.config
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Optional, Union

import yaml

DEFAULT_ENV_KEY = "CC_SWITCH_LOG_CFG"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_MAX_BYTES = 1024 * 1024
LOG_FILE_BACKUP_COUNT = 3

# Marks handlers installed here so repeated setup replaces them
_HANDLER_MARKER = "_settings_switch_handler"


def setup_logging(
    config_path: Optional[Union[str, Path]] = None,
    default_level: int = logging.WARNING,
    env_key: str = DEFAULT_ENV_KEY,
    log_file: Optional[Union[str, Path]] = None,
) -> None:
    """Setup logging configuration.

    A YAML ``dictConfig`` file wins when one is found, either at
    ``config_path`` or at the path named by ``env_key``. Otherwise console
    logging to stderr is installed, plus a rotating file when ``log_file``
    is given.

    Args:
        config_path: Path to a YAML logging configuration file
        default_level: Console level used without a configuration file
        env_key: Environment variable naming a configuration file
        log_file: Optional log file for the default configuration
    """
    if config_path is None:
        config_path = os.getenv(env_key)

    if config_path:
        config_path = Path(config_path).expanduser()
        if config_path.exists():
            try:
                with open(config_path, encoding="utf-8") as config_file:
                    config = yaml.safe_load(config_file)
                logging.config.dictConfig(config)
                return
            except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
                print(
                    f"Error loading logging configuration from {config_path}: {e}",
                    file=sys.stderr,
                )
        else:
            print(
                f"Logging config file {config_path} not found. Using default configuration.",
                file=sys.stderr,
            )

    _setup_default_logging(default_level, log_file)


def _setup_default_logging(
    level: int, log_file: Optional[Union[str, Path]] = None
) -> None:
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            root_logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    setattr(console_handler, _HANDLER_MARKER, True)
    root_logger.addHandler(console_handler)

    root_level = level
    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        setattr(file_handler, _HANDLER_MARKER, True)
        root_logger.addHandler(file_handler)
        root_level = logging.DEBUG

    root_logger.setLevel(root_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
