"""Logging configuration for Rolka.

Entry points call ``setup_logging`` once; every other module receives its
logger as an argument instead of looking one up.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Optional
from config import Config

LOGGER_NAME = "rolka"

# Loggers of the HTTP stack that are too chatty at DEBUG
_NOISY_LOGGERS = ("urllib3",)


def get_log_file_path(config: Config, today: Optional[date] = None) -> Path:
    """Get the log file for a day, named after the data directory.

    A base_dir of ~/data/rolka logs to <log_dir>/rolka-2024-01-15.log.
    """
    day = (today or date.today()).isoformat()
    return config.log_dir / f"{config.base_dir.name}-{day}.log"


def _configure_handler(
    handler: logging.Handler, level: str, fmt: str, datefmt: Optional[str] = None
) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    return handler


def setup_logging(config: Config) -> logging.Logger:
    """Set up application logging with a dated file and the console.

    Args:
        config: Application configuration containing log settings.

    Returns:
        Configured logger instance.
    """
    config.log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.log_level)
    logger.handlers.clear()

    logger.addHandler(
        _configure_handler(
            logging.FileHandler(get_log_file_path(config), encoding="utf-8"),
            config.log_level,
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(
        _configure_handler(
            logging.StreamHandler(), config.log_level, "%(levelname)s - %(message)s"
        )
    )

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger."""
    return logging.getLogger(LOGGER_NAME)
