"""
Logging Setup

Root logger configuration for a hosted match. The engine reads the bot's
moves from stdout, so log output only goes to a file and stderr.
"""

import logging
import os
import sys
from typing import Optional

from config import config

LOG_FILE_NAME = 'algo.log'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _is_log_file_handler(handler: logging.Handler, log_path: str) -> bool:
    return (isinstance(handler, logging.FileHandler)
            and handler.baseFilename == os.path.abspath(log_path))


def _is_stderr_handler(handler: logging.Handler) -> bool:
    return (isinstance(handler, logging.StreamHandler)
            and not isinstance(handler, logging.FileHandler)
            and handler.stream is sys.stderr)


def configure_logging(log_dir: Optional[str] = None, level: Optional[str] = None,
                      to_file: Optional[bool] = None) -> logging.Logger:
    """
    Install file + stderr handlers on the root logger.

    Safe to call more than once: a handler already writing to the same log
    file (or to stderr) is not added again.

    Returns:
        The root logger
    """
    log_dir = log_dir or config.LOG_DIR
    level_name = (level or config.LOG_LEVEL).upper()
    to_file = config.LOG_TO_FILE if to_file is None else to_file

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level_name, logging.INFO))
    formatter = logging.Formatter(LOG_FORMAT)

    if to_file:
        log_path = os.path.join(log_dir, LOG_FILE_NAME)
        if not any(_is_log_file_handler(h, log_path) for h in root_logger.handlers):
            os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.FileHandler(log_path)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

    if not any(_is_stderr_handler(h) for h in root_logger.handlers):
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        root_logger.addHandler(stream_handler)

    return root_logger
