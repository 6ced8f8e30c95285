"""
This module provides logging functionality for the naobridge agent.
"""

import logging
from pathlib import Path

from naobridge.singleton import Singleton

NAOBRIDGE = 'NaoBridge'
LOGS_FOLDER = Path.home() / 'naobridge' / 'logs'


class Logger(metaclass=Singleton):
    """A singleton logger class for setting up logging handlers."""

    def __init__(self, logs_folder: Path = LOGS_FOLDER):
        """Initialize the logger with file and stream handlers.

        Args:
            logs_folder (Path): Folder receiving the log file. Created when missing.
        """
        Path(logs_folder).mkdir(parents=True, exist_ok=True)

        # file handler keeps everything, the agent must not print while it is synchronized with the server
        self.logging_file_handler = logging.FileHandler(Path(logs_folder) / (NAOBRIDGE.lower() + '.log'))

        self.logging_stream_handler = logging.StreamHandler()

        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        self.logging_file_handler.setFormatter(formatter)
        self.logging_stream_handler.setFormatter(formatter)

        self._loggers: list[logging.Logger] = []

    def setup_logger(self, logger_name=None, enable_stream_handler=False):
        """Set up a logger with the given name and return it.

        Args:
            logger_name (str, optional): Name of the logger. Defaults to None.
            enable_stream_handler (bool): Whether to add the stream handler for console output. Defaults to False.

        Returns:
            logging.Logger: The configured logger.
        """
        if not logger_name:
            logger_name = NAOBRIDGE
        else:
            logger_name = NAOBRIDGE + ' ' + logger_name

        logger = logging.getLogger(f"{logger_name:<32}")

        logger.setLevel(logging.INFO)

        if self.logging_file_handler not in logger.handlers:
            logger.addHandler(self.logging_file_handler)
        if enable_stream_handler and self.logging_stream_handler not in logger.handlers:
            logger.addHandler(self.logging_stream_handler)

        if logger not in self._loggers:
            self._loggers.append(logger)

        return logger

    def enable_console(self) -> None:
        """Attach the console handler to every logger handed out so far."""
        for logger in self._loggers:
            if self.logging_stream_handler not in logger.handlers:
                logger.addHandler(self.logging_stream_handler)

    def set_level(self, level: int) -> None:
        for logger in self._loggers:
            logger.setLevel(level)
