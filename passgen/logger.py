# --- START OF FILE passgen/logger.py ---

import os
import logging
from logging.handlers import RotatingFileHandler

from . import settings_manager

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILENAME = 'passgen.log'


def setup_logging(log_dir=None, level=None):
    """
    Configures the 'passgen' logger for applications embedding the library.
    Logs to the console and, when the log_to_file setting is enabled or a
    log_dir is given explicitly, to a rotating 'passgen.log' file.
    Calling it again is a no-op once handlers are attached.
    """
    package_logger = logging.getLogger('passgen')
    if package_logger.handlers:
        return package_logger

    level = level or settings_manager.get_setting('log_level', 'INFO')
    package_logger.setLevel(str(level).upper())
    formatter = logging.Formatter(LOG_FORMAT)

    if log_dir or settings_manager.get_bool_setting('log_to_file'):
        log_dir = log_dir or settings_manager.get_setting('log_dir', 'logs')
        os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            os.path.join(log_dir, LOG_FILENAME),
            maxBytes=1024 * 1024 * 2,  # 2 MB
            backupCount=3
        )
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    package_logger.info("Password generator logging configured.")
    return package_logger

# --- END OF FILE passgen/logger.py ---
