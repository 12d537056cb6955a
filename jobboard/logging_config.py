"""
Logging configuration for the job-board service.

Creates a rotating file-based logger under ./logs (or $LOG_DIR).
"""

import logging
import os
from pathlib import Path
from logging.handlers import RotatingFileHandler

# relative to the working directory unless LOG_DIR is set
DEFAULT_LOG_DIR = "logs"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_BYTES = 10 * 1024 * 1024  # 10 MB
BACKUP_COUNT = 5


def _setup_file_logger(name: str, log_file: Path, level: int) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    # Avoid duplicate handlers if setup_logging is called multiple times
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=MAX_BYTES,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    return logger


def setup_logging(log_level: str = None) -> Path:
    """
    Configure root + service loggers for the job board.

    Returns the log file path.
    """
    log_level = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, log_level, logging.INFO)

    log_dir = Path(os.getenv("LOG_DIR") or Path.cwd() / DEFAULT_LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "jobboard.log"

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    _setup_file_logger("jobboard", log_file, level)

    # twilio's http client logs full request bodies at INFO
    logging.getLogger("twilio.http_client").setLevel(logging.WARNING)
    return log_file


def get_logger(name: str) -> logging.Logger:
    """
    Convenience wrapper to get a named logger.
    """
    return logging.getLogger(name)
