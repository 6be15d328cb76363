import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = 'gethttp'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(log_file: Optional[str] = None, verbose: bool = False) -> logging.Logger:
    """
    Configure the package logger once per process.

    Without a log file or --verbose the records are dropped so that stdout only
    carries the step trail and the response.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False
    logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(LOG_FORMAT)

    if log_file:
        file_handler = RotatingFileHandler(
            log_file, maxBytes=10000, backupCount=1, encoding='utf-8', errors='backslashreplace'
        )
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if verbose:
        rich_handler = RichHandler(console=Console(stderr=True), show_path=False)
        rich_handler.setLevel(logging.DEBUG)
        logger.addHandler(rich_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
