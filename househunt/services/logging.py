"""Logging configuration for the tracker API server and seed CLI.

Records go to stdout and to settings.log_file. The level comes from
settings.log_level (LOG_LEVEL in the environment or .env, default INFO).
"""

import logging
import sys
from pathlib import Path

from househunt.config import settings

LOG_FORMAT = "[%(asctime)s] %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def get_log_level(level_name: str | None = None) -> int:
    """Resolve a level name to a logging constant.

    Args:
        level_name: e.g. "debug" or "WARNING"; defaults to settings.log_level

    Returns:
        Logging level constant; unknown names give INFO
    """
    level_name = level_name or settings.log_level
    return LOG_LEVEL_MAP.get(level_name.strip().upper(), logging.INFO)


def setup_server_logging(log_file: str | None = None, level_name: str | None = None) -> None:
    """
    Route every logger to stdout and a log file.

    Args:
        log_file: Path to log file (default: settings.log_file); parent
            directories are created
        level_name: Level override (default: settings.log_level)

    Calling it again replaces the handlers instead of stacking them.
    """
    log_path = Path(log_file or settings.log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    log_level = get_log_level(level_name)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    for handler in (logging.StreamHandler(sys.stdout), logging.FileHandler(log_path)):
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    logging.getLogger(__name__).debug(
        f"Logging to {log_path} at {logging.getLevelName(log_level)}"
    )
