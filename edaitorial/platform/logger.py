import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE_NAME = "edaitorial.log"


def get_logger(name: str, log_dir: Optional[str] = None, level: str = "INFO"):
    """
    Creates a logger instance that writes to console AND a file.
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    logger.setLevel(level)

    # 1. Create the logs directory if it doesn't exist
    log_dir = log_dir or os.path.join(os.getcwd(), "logs")
    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    formatter = logging.Formatter(LOG_FORMAT)

    # 2. Handler 1: Write to File (Rotating)
    file_handler = RotatingFileHandler(
        os.path.join(log_dir, LOG_FILE_NAME), maxBytes=10_000_000, backupCount=5)
    file_handler.setFormatter(formatter)
    file_handler.setLevel(level)

    # 3. Handler 2: Write to Console (Terminal)
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def configure_logging(log_dir: Optional[str] = None, level: str = "INFO"):
    """Attach the console/file handlers to the package root logger."""
    return get_logger("edaitorial", log_dir=log_dir, level=level)
