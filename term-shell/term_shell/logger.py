"""
Log file setup.

Log records go to ``<config dir>/term_log.txt`` when the config directory
exists, and nowhere otherwise. Nothing is logged to the terminal so the
prompt stays clean.
"""

import logging
import os
from typing import Optional

from .settings import config_folder

LOG_FILE = 'term_log.txt'
LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def find_log_location() -> Optional[str]:
    """Path of the log file, or None when there is no config folder."""
    folder = config_folder()
    if folder is None:
        return None
    return os.path.join(folder, LOG_FILE)


def setup_logging(level: str = 'WARNING', log_file: Optional[str] = None) -> Optional[str]:
    """
    Configure the ``term_shell`` logger.

    Args:
        level: Logging level name
        log_file: File to append to; defaults to ``find_log_location()``

    Returns:
        The log file in use, or None when file logging is disabled
    """
    root = logging.getLogger('term_shell')
    root.setLevel(level.upper())
    root.propagate = False
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    if log_file is None:
        log_file = find_log_location()
    if log_file is None:
        root.addHandler(logging.NullHandler())
        return None

    try:
        handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
    except OSError:
        root.addHandler(logging.NullHandler())
        return None
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    return log_file
