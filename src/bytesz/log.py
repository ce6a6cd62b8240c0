"""Loguru setup for the bytesz command line."""

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level.icon} {level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {elapsed} | {level.icon} {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger(
    level: str = "WARNING",
    log_file: Optional[Union[str, Path]] = None,
    console_output: bool = True,
):
    """Configure the Loguru logging system.

    Args:
        level: Minimum level for the console sink
        log_file: Optional file to also log to, at DEBUG level
        console_output: Whether to log to stderr

    Returns:
        tuple: (logger, config_info)
            - logger: the configured logger instance
            - config_info: dict with the resolved ``level`` and ``log_file``
    """
    logger.remove()

    if console_output:
        logger.add(sys.stderr, level=level.upper(), format=CONSOLE_FORMAT)

    log_path = None
    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            level="DEBUG",
            rotation="10 MB",
            retention="30 days",
            compression="zip",
            encoding="utf-8",
            format=FILE_FORMAT,
            enqueue=True,
        )

    logger.enable("bytesz")

    config_info = {
        "level": level.upper(),
        "log_file": str(log_path) if log_path else None,
    }
    logger.debug(f"Logging initialised: {config_info}")
    return logger, config_info
