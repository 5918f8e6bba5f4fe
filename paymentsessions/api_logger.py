import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

import settings

LOGGING_MESSAGE_FORMAT = "%(asctime)s %(name)-12s %(levelname)s %(message)s"


def _get_file_logger(path: str) -> logging.FileHandler:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    file_handler = logging.FileHandler(path)
    file_handler.setLevel(settings.LOG_LEVEL)
    return file_handler


def _get_console_logger() -> logging.StreamHandler:
    console_handler = logging.StreamHandler()
    console_handler.setLevel(settings.LOG_LEVEL)
    return console_handler


def _apply_default_formatter(handler: logging.Handler):
    formatter = jsonlogger.JsonFormatter(LOGGING_MESSAGE_FORMAT)
    handler.setFormatter(formatter)


class APILogger:
    def __init__(self, _logger=None):
        self.logger: logging.Logger = _logger

    @classmethod
    def start_logger(cls, log_file_path: Optional[str] = None):
        name = settings.APPLICATION_NAME
        _logger = logging.getLogger(name)
        _logger.setLevel(settings.LOG_LEVEL)
        # Restarting replaces the handlers of the previous start
        for handler in list(_logger.handlers):
            _logger.removeHandler(handler)
            handler.close()

        console_handler = _get_console_logger()
        _apply_default_formatter(console_handler)
        _logger.addHandler(console_handler)
        if log_file_path:
            file_handler = _get_file_logger(log_file_path)
            _apply_default_formatter(file_handler)
            _logger.addHandler(file_handler)
        return cls(_logger=_logger)

    def get(self):
        return self.logger


# Singleton logger, used across the package
api_logger: APILogger = APILogger.start_logger(settings.LOG_FILE_PATH)


def get() -> logging.Logger:
    return api_logger.get()
