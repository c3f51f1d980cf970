import logging
import sys
from logging.handlers import RotatingFileHandler

from ..api.config.RoConfig import RoConfig
from ..api.config.LogConfig import LogConfig
from ..constants import LOG_FILE_NAME, LOG_FORMAT

# Prevent multiple configurations
_CONFIGURED = False

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


def configure_logging(config: LogConfig | None = None) -> logging.Logger:
    """Configure the ``roview`` logger once.

    Args:
        config: Logging configuration. Defaults to INFO on stderr only.
    """
    global _CONFIGURED
    root_logger = logging.getLogger("roview")
    if _CONFIGURED:
        return root_logger

    if config is None:
        config = LogConfig()

    root_logger.setLevel(_LEVELS[config.level])
    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    if config.file:
        log_file = RoConfig.home_dir(LOG_FILE_NAME)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,  # 5MB * 3
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _CONFIGURED = True
    return root_logger


def reset_logging() -> None:
    """Remove handlers installed by configure_logging."""
    global _CONFIGURED
    root_logger = logging.getLogger("roview")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(logging.NOTSET)
    _CONFIGURED = False
