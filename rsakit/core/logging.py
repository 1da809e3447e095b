"""Logging utilities for rsakit modules."""

import logging
from enum import Enum
from typing import List, Optional


class LogLevel(Enum):
    """Log levels accepted by the rsakit logger."""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


class RSALogger:
    """
    Singleton wrapper around the ``rsakit`` package logger.

    Handlers are attached to the package logger only, so child loggers
    obtained through get_logger() share them.

    Example:
        >>> RSALogger().set_level(LogLevel.DEBUG).enable_console()
    """

    NAME = 'rsakit'
    DEFAULT_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
    DEBUG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s'

    _instance: Optional['RSALogger'] = None

    def __new__(cls) -> 'RSALogger':
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._logger = logging.getLogger(cls.NAME)
            instance._handlers = []
            cls._instance = instance
        return cls._instance

    @property
    def logger(self) -> logging.Logger:
        """Underlying ``logging.Logger``."""
        return self._logger

    @property
    def handlers(self) -> List[logging.Handler]:
        """Handlers installed through this wrapper."""
        return list(self._handlers)

    def set_level(self, level: LogLevel) -> 'RSALogger':
        """Set the package log level."""
        self._logger.setLevel(level.value)
        return self

    def _formatter(self, level: LogLevel) -> logging.Formatter:
        fmt = self.DEBUG_FORMAT if level == LogLevel.DEBUG else self.DEFAULT_FORMAT
        return logging.Formatter(fmt)

    def _add_handler(self, handler: logging.Handler, level: LogLevel) -> 'RSALogger':
        handler.setLevel(level.value)
        handler.setFormatter(self._formatter(level))
        self._logger.addHandler(handler)
        self._handlers.append(handler)
        return self

    def enable_console(self, level: LogLevel = LogLevel.INFO) -> 'RSALogger':
        """Log to stderr at the given level."""
        return self._add_handler(logging.StreamHandler(), level)

    def enable_file(self, filepath: str, level: LogLevel = LogLevel.DEBUG) -> 'RSALogger':
        """Log to a file at the given level."""
        return self._add_handler(logging.FileHandler(filepath, encoding='utf-8'), level)

    def disable_all(self) -> 'RSALogger':
        """Remove and close every handler installed through this wrapper."""
        for handler in self._handlers:
            self._logger.removeHandler(handler)
            handler.close()
        self._handlers.clear()
        return self


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger under the ``rsakit`` namespace.

    The logger propagates to the root logger, so basicConfig() works
    without calling configure_logging().

    Args:
        name: Child name, e.g. ``'primes'``. Module paths that already
            start with ``rsakit`` are used as-is.

    Returns:
        Logger instance
    """
    if not name:
        full_name = RSALogger.NAME
    elif name == RSALogger.NAME or name.startswith(RSALogger.NAME + '.'):
        full_name = name
    else:
        full_name = f"{RSALogger.NAME}.{name}"

    logger = logging.getLogger(full_name)
    logger.propagate = True
    return logger


def configure_logging(
    level: LogLevel = LogLevel.INFO,
    log_file: Optional[str] = None,
    enable_console: bool = True
) -> RSALogger:
    """
    Configure the package logger in one call.

    Args:
        level: Package log level
        log_file: Optional path of a log file
        enable_console: Whether to log to stderr

    Returns:
        The RSALogger singleton
    """
    logger = RSALogger().disable_all().set_level(level)
    if enable_console:
        logger.enable_console(level)
    if log_file:
        logger.enable_file(log_file, level)
    return logger


def debug(msg: str, *args, **kwargs) -> None:
    get_logger().debug(msg, *args, **kwargs)


def info(msg: str, *args, **kwargs) -> None:
    get_logger().info(msg, *args, **kwargs)


def warning(msg: str, *args, **kwargs) -> None:
    get_logger().warning(msg, *args, **kwargs)


def error(msg: str, *args, **kwargs) -> None:
    get_logger().error(msg, *args, **kwargs)


def critical(msg: str, *args, **kwargs) -> None:
    get_logger().critical(msg, *args, **kwargs)
