"""Process-wide logging setup for the runtime entrypoint."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
PACKAGE_LOGGER_NAME = "hello_service"


def logging_configure(log_level: str = "INFO") -> logging.Logger:
    """Route package log records to stdout with a single shared format.

    Repeated calls replace the previously installed handler.

    Args:
        log_level: Standard logging level name.

    Returns:
        logging.Logger: Configured package logger.
    """

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for existing_handler in list(package_logger.handlers):
        package_logger.removeHandler(existing_handler)
    package_logger.addHandler(stream_handler)
    package_logger.setLevel(log_level)
    package_logger.propagate = False
    return package_logger
