# roirotate/infrastructure/logging/logger_service.py
"""
Logger service backed by Python's built-in logging module.
"""
import logging
import os
import sys
from datetime import datetime
from typing import Any, Dict

from roirotate.domain.services.i_logger_service import ILoggerService

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class ConsoleLoggerService(ILoggerService):
    """Logs to stdout through a named `logging` logger."""

    def __init__(self, level: int = logging.INFO, name: str = "roirotate"):
        """
        Args:
            level: Initial log level (default: INFO)
            name: Logger name
        """
        self.logger = logging.getLogger(name)
        self.set_level(level)

        # Don't add handlers if they already exist
        if not self.logger.handlers:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)
            console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self.logger.addHandler(console_handler)

    def debug(self, message: str, **kwargs) -> None:
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._log(logging.ERROR, message, kwargs)

    def critical(self, message: str, **kwargs) -> None:
        self._log(logging.CRITICAL, message, kwargs)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)

    def _log(self, level: int, message: str, extra: Dict[str, Any]) -> None:
        context = self._format_extra(extra)
        if context:
            message = f"{message} {context}"
        self.logger.log(level, message)

    def _format_extra(self, extra: Dict[str, Any]) -> str:
        """Render context as "[key=value key=value]"."""
        if not extra:
            return ""
        return "[" + " ".join(f"{key}={value}" for key, value in extra.items()) + "]"


class FileLoggerService(ConsoleLoggerService):
    """Console logger that also writes to a dated file in `log_dir`."""

    def __init__(self, level: int = logging.INFO, name: str = "roirotate",
                 log_dir: str = "logs"):
        super().__init__(level, name)

        os.makedirs(log_dir, exist_ok=True)

        current_date = datetime.now().strftime("%Y-%m-%d")
        self.log_file = os.path.join(log_dir, f"{name}_{current_date}.log")

        log_path = os.path.abspath(self.log_file)
        already_attached = any(
            isinstance(handler, logging.FileHandler) and handler.baseFilename == log_path
            for handler in self.logger.handlers
        )
        if not already_attached:
            file_handler = logging.FileHandler(self.log_file)
            file_handler.setLevel(level)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self.logger.addHandler(file_handler)
