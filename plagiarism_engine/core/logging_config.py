"""
Centralized logging configuration for the plagiarism similarity engine.

Library modules only obtain loggers through ``LoggerMixin`` or
``logging.getLogger``; handlers are installed by the embedding application
(see ``setup_logging``), never on import.
"""

import json
import logging
import logging.handlers
import sys
import time
from datetime import datetime, timezone
from pathlib import Path


# Extra record attributes copied into structured log entries
EXTRA_FIELDS = ('operation', 'reference_id', 'reference_count', 'pair_count', 'duration')


class StructuredFormatter(logging.Formatter):
    """Custom formatter for structured JSON logging."""

    def format(self, record):
        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)

        for field in EXTRA_FIELDS:
            if hasattr(record, field):
                log_entry[field] = getattr(record, field)

        # Indonesian reference texts may show up in messages
        return json.dumps(log_entry, ensure_ascii=False, separators=(',', ':'))


class ProductionLogger:
    """
    Root logger setup for applications embedding the engine.

    Installs an optional stdout handler plus two rotating files under
    ``log_dir``: ``app.log`` at the configured level and ``errors.log`` for
    warnings and above (truncated corpora, failed checks).
    """

    def __init__(self,
                 log_level: str = "INFO",
                 log_dir: str = "logs",
                 max_file_size: int = 10 * 1024 * 1024,  # 10MB
                 backup_count: int = 5,
                 enable_console: bool = True,
                 structured_logging: bool = True):
        self.log_level = getattr(logging, log_level.upper())
        self.log_dir = Path(log_dir)
        self.max_file_size = max_file_size
        self.backup_count = backup_count
        self.formatter = StructuredFormatter() if structured_logging else logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.handlers = [
            self._file_handler("app.log", self.log_level),
            self._file_handler("errors.log", logging.WARNING),
        ]
        if enable_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(self.log_level)
            console_handler.setFormatter(self.formatter)
            self.handlers.append(console_handler)

        self._install()

    def _file_handler(self, filename: str, level: int) -> logging.Handler:
        handler = logging.handlers.RotatingFileHandler(
            self.log_dir / filename,
            maxBytes=self.max_file_size,
            backupCount=self.backup_count,
            encoding='utf-8'
        )
        handler.setLevel(level)
        handler.setFormatter(self.formatter)
        return handler

    def _install(self):
        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()

        root_logger.setLevel(self.log_level)
        for handler in self.handlers:
            root_logger.addHandler(handler)


class LoggerMixin:
    """Mixin class to add logging capabilities to any class."""

    @property
    def logger(self) -> logging.Logger:
        """Get logger instance for this class."""
        if not hasattr(self, '_logger'):
            self._logger = logging.getLogger(f"{self.__class__.__module__}.{self.__class__.__name__}")
        return self._logger

    def log_operation(self, operation: str, **kwargs):
        """Log an operation with additional context."""
        extra = {'operation': operation}
        extra.update(kwargs)
        return OperationLogger(self.logger, extra)


class OperationLogger:
    """
    Times one engine operation. Start is logged at DEBUG, completion at INFO
    with ``duration`` in seconds, failure at ERROR with the traceback.
    Exceptions always propagate.
    """

    def __init__(self, logger: logging.Logger, extra: dict):
        self.logger = logger
        self.extra = extra
        self.operation = extra.get('operation', 'unknown')
        self.start_time = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        self.logger.debug(f"Starting operation: {self.operation}", extra=self.extra)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.extra['duration'] = round(time.perf_counter() - self.start_time, 6)
        if exc_type is None:
            self.logger.info(f"Completed operation: {self.operation}", extra=self.extra)
        else:
            self.logger.error(f"Failed operation: {self.operation}", extra=self.extra,
                              exc_info=(exc_type, exc_val, exc_tb))
        return False


def setup_logging(log_level: str = "INFO",
                  log_dir: str = "logs",
                  structured_logging: bool = True,
                  **kwargs) -> ProductionLogger:
    """
    Configure the root logger for an application run.

    Args:
        log_level: Logging level
        log_dir: Directory for log files
        structured_logging: Whether to use structured JSON logging
        **kwargs: Additional arguments for ProductionLogger

    Returns:
        ProductionLogger instance
    """
    return ProductionLogger(
        log_level=log_level,
        log_dir=log_dir,
        structured_logging=structured_logging,
        **kwargs
    )
