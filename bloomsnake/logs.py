import logging
import sys
import typing

FORMAT = "[%(levelname)s] %(message)s"


def setup_logger(level: typing.Union[int, str] = logging.INFO, log_file: typing.Optional[str] = None):
    """Configure the bloomsnake logger with a console and an optional file handler"""
    logger = logging.getLogger("bloomsnake")
    logger.setLevel(level)
    logger.handlers.clear()

    formatter = logging.Formatter(FORMAT)

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False

    # Flask logs every request otherwise
    logging.getLogger("werkzeug").setLevel(logging.ERROR)
    return logger
