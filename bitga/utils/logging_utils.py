"""
Logging setup for drivers using the operators

Operator modules only log through logging.getLogger(__name__); attaching
handlers is left to whoever runs the generations.
"""

import logging
import os
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(name: str, log_file: Optional[str] = None, level: int = logging.INFO) -> logging.Logger:
    """
    Attach a console handler, and a file handler when log_file is given

    Handlers from an earlier call on the same logger are closed and replaced.

    Args:
        name: Logger name, e.g. 'bitga' to capture every operator
        log_file: Path of a log file; missing parent directories are created
        level: Level applied to the logger and its handlers

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    handlers = [logging.StreamHandler()]
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
