# logging_setup.py

import logging
import sys
from logging.handlers import RotatingFileHandler

from realaddress import config

PACKAGE_LOGGER = "realaddress"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s - %(message)s"


def setup_logging(level=None, log_file=None):
    """
    Configures the package logger.

    A console handler writing to stdout is always attached. A rotating file
    handler is added when a log file path is configured. Calling this more
    than once leaves exactly one set of handlers in place.

    Args:
        level (str, optional): Log level name. Defaults to config.LOG_LEVEL.
        log_file (str, optional): Log file path. Defaults to config.LOG_FILE_PATH.

    Returns:
        logging.Logger: The configured package logger.
    """
    level = level or config.LOG_LEVEL
    log_file = log_file if log_file is not None else config.LOG_FILE_PATH

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=config.LOG_FILE_MAX_BYTES,
                backupCount=config.LOG_FILE_BACKUP_COUNT,
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
            logger.info(f"Logging to file: {log_file}")
        except OSError as e:
            # File logging is optional; keep the console handler.
            logger.error(f"Failed to set up file logging: {e}")
            logger.warning("Proceeding without file logging.")

    # Flask and werkzeug configure the root logger on their own.
    logger.propagate = False
    return logger
