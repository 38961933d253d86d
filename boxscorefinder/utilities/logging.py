"""
Logging setup for Box Score Finder
Console logging always; rotating log files when a log directory is configured
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from boxscorefinder.config import LOG_DIR, LOG_LEVEL

LOG_FORMAT = '[%(asctime)s] %(levelname)-8s [%(name)s:%(lineno)d] %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Third-party loggers that are too chatty at DEBUG/INFO
NOISY_LOGGERS = ('httpx', 'httpcore', 'uvicorn.access')

_configured = False


def setup_logging(log_level: str | None = None, log_dir: str | None = None) -> None:
    """
    Configure the root logger once per process

    Args:
        log_level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to the LOG_LEVEL setting.
        log_dir: Directory for rotating log files. Defaults to the
            BOXSCORE_LOG_DIR setting; no files are written when unset.
    """
    global _configured
    if _configured:
        return

    level = getattr(logging, (log_level or LOG_LEVEL).upper(), logging.INFO)
    log_dir = log_dir or LOG_DIR
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

        file_handler = RotatingFileHandler(
            os.path.join(log_dir, 'boxscorefinder.log'),
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

        error_handler = RotatingFileHandler(
            os.path.join(log_dir, 'boxscorefinder_errors.log'),
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=3
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(formatter)
        root_logger.addHandler(error_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _configured = True
    logging.getLogger(__name__).info(
        f"Logging configured (level={logging.getLevelName(level)}, log_dir={log_dir or 'console only'})"
    )
