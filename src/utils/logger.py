"""
Thin wrapper around the logging module shared by the bot and the CLI.
"""

import logging
import os

from constants import LOG_DIR


class Logger:
    """Named logger writing to logs/<name>.log and, optionally, the console."""

    def __init__(self, name, log_dir=LOG_DIR, see_time=False, console_log=False, file_log=True):
        self.name = name
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG)

        # A second Logger with the same name must not duplicate output
        self._remove_handlers()

        if see_time:
            fmt = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            fmt = "%(name)s - %(levelname)s - %(message)s"
        formatter = logging.Formatter(fmt, datefmt="%Y-%m-%d %H:%M:%S")

        if file_log:
            os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.FileHandler(os.path.join(log_dir, f"{name}.log"), encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

        if console_log:
            console_handler = logging.StreamHandler()
            console_handler.setLevel(logging.INFO)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

    def log_message(self, message, level=logging.INFO):
        self.logger.log(level, message)

    def _remove_handlers(self):
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    def cleanup(self):
        """Closes file handles held by this logger."""
        self._remove_handlers()
