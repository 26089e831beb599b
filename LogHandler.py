import logging
import os
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler

import config


class LogHandler:
    """
    Log handler that writes dispatch logs to rotating files and the console.
    Features:
    - Creates logs directory if it doesn't exist
    - Rotating file handler to prevent huge log files
    - Console output for development
    - Reuses handlers already attached to the same logger
    """

    def __init__(
        self,
        log_dir=config.LOG_DIR,
        log_file_prefix="dispatch",
        max_bytes=5_000_000,  # 5MB
        backup_count=5,
        log_level=config.LOG_LEVEL,
        console_output=True,
        logger_name=None,
    ):
        self.log_dir = log_dir
        self.log_file_prefix = log_file_prefix
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self.log_level = log_level
        self.console_output = console_output

        # An empty logger_name configures the root logger so module loggers share the files
        self.logger = logging.getLogger(self.log_file_prefix if logger_name is None else logger_name)
        self.logger.setLevel(self.log_level)

        os.makedirs(self.log_dir, exist_ok=True)

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%dT%H:%M:%S%z'
        )

        self.log_file = os.path.abspath(os.path.join(
            self.log_dir,
            f"{self.log_file_prefix}_{datetime.now().strftime('%Y%m%d')}.log"
        ))

        if not any(
            isinstance(h, RotatingFileHandler) and h.baseFilename == self.log_file
            for h in self.logger.handlers
        ):
            file_handler = RotatingFileHandler(
                self.log_file,
                maxBytes=self.max_bytes,
                backupCount=self.backup_count
            )
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

        if self.console_output and not any(
            type(h) is logging.StreamHandler and h.stream is sys.stdout
            for h in self.logger.handlers
        ):
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

    def get_logger(self):
        """Returns the configured logger instance."""
        return self.logger


def setup_logger(
    log_dir=config.LOG_DIR,
    log_file_prefix="dispatch",
    log_level=config.LOG_LEVEL,
    console_output=True,
    logger_name=None,
):
    """
    Helper function to quickly set up a logger with default settings.
    Returns a configured logger instance.
    """
    handler = LogHandler(
        log_dir=log_dir,
        log_file_prefix=log_file_prefix,
        log_level=log_level,
        console_output=console_output,
        logger_name=logger_name,
    )
    return handler.get_logger()
