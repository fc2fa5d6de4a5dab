# This module contains a custom formatter and the logging setup for the status poster.
import logging
from typing import Optional

LOGGER_NAME = "status_poster"


class CustomFormatter(logging.Formatter):
    """
    A custom formatter for logging messages with different log levels.

    Attributes:
        grey (str): ANSI escape sequence for grey color.
        yellow (str): ANSI escape sequence for yellow color.
        red (str): ANSI escape sequence for red color.
        bold_red (str): ANSI escape sequence for bold red color.
        reset (str): ANSI escape sequence to reset color.
        format (str): The log message format.
        FORMATS (dict): A dictionary mapping log levels to their respective log message formats.

    Methods:
        format(record): Formats the log record based on its log level.
    """
    grey = "\x1b[37;20m"
    yellow = "\x1b[33;20m"
    red = "\x1b[31;20m"
    bold_red = "\x1b[31;1m"
    dark_grey = "\x1b[30;1m"
    reset = "\x1b[0m"
    format = '[%(levelname)s] %(asctime)s - %(name)s - %(message)s'

    FORMATS = {
        logging.DEBUG: dark_grey + format + reset,
        logging.INFO: grey + format + reset,
        logging.WARNING: yellow + format + reset,
        logging.ERROR: red + format + reset,
        logging.CRITICAL: bold_red + format + reset
    }

    def format(self, record):
        """
        Formats the log record based on its log level.

        Args:
            record (logging.LogRecord): The log record to be formatted.

        Returns:
            str: The formatted log message.
        """
        log_fmt = self.FORMATS.get(record.levelno)
        formatter = logging.Formatter(log_fmt)
        return formatter.format(record)


def get_logger(name: str) -> logging.Logger:
    """
    Return a module logger under the application namespace.

    Args:
        name: Usually the calling module's __name__.

    Returns:
        logging.Logger: A child of the "status_poster" logger.
    """
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach handlers to the application logger.

    Safe to call on every invocation: warm Lambda containers reuse the
    process, so handlers are only added once. When the root logger already
    has handlers (the Lambda runtime installs one) records propagate to
    those instead of being printed twice.

    Args:
        level: Logging level for the application logger.
        log_file: Optional path of a plain-text log file.

    Returns:
        logging.Logger: The configured application logger.
    """
    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(level)

    if not log.handlers:
        if not logging.getLogger().handlers:
            ch = logging.StreamHandler()
            ch.setLevel(logging.DEBUG)
            ch.setFormatter(CustomFormatter())
            log.addHandler(ch)

        if log_file:
            fh = logging.FileHandler(log_file)
            fh.setLevel(logging.DEBUG)
            fh.setFormatter(logging.Formatter('[%(levelname)s] %(asctime)s - %(name)s - %(message)s'))
            log.addHandler(fh)

    return log
