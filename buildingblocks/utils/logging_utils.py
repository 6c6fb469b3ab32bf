"""
Structured Logging Utilities

Standard-library backend for the IAppLogger facade, plus helpers for adding
request-scoped context to every log record.
"""

import inspect
import logging
import sys
from contextvars import ContextVar
from functools import wraps
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional, Union

from ..config.settings import LoggingSettings
from ..services.interfaces import IAppLogger


# Context variable for request-scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})

# Keys lifted from call kwargs by log_operation
_CONTEXT_KEYS = ("entity_id", "event_id", "topic", "user_id")


class StructuredLogger(IAppLogger):
    """
    IAppLogger over a standard library logger.

    trace maps to DEBUG. The current logging context (see
    set_logging_context) is attached to every record through `extra`.

    Usage:
        logger = get_logger(OrderService)
        set_logging_context(request_id="abc-123")
        logger.info("Order %s placed", order.id)
    """

    def __init__(self, name: str):
        """
        Initialize structured logger.

        Args:
            name: Logger name (typically __name__ or a class path)
        """
        self.logger = logging.getLogger(name)

    @property
    def name(self) -> str:
        return self.logger.name

    def _context(self) -> Dict[str, Any]:
        return {"context": _logging_context.get().copy()}

    def trace(self, message: str, *args: Any) -> None:
        self.logger.debug(message, *args, extra=self._context())

    def info(self, message: str, *args: Any) -> None:
        self.logger.info(message, *args, extra=self._context())

    def warn(self, message: str, *args: Any) -> None:
        self.logger.warning(message, *args, extra=self._context())

    def error(self, exc: Optional[BaseException], message: str, *args: Any) -> None:
        self.logger.error(message, *args, exc_info=exc, extra=self._context())


def get_logger(owner: Union[type, str]) -> StructuredLogger:
    """
    Create a logger named after its owner.

    Args:
        owner: A class (named module.QualName) or an explicit logger name

    Returns:
        StructuredLogger instance
    """
    if isinstance(owner, str):
        return StructuredLogger(owner)
    return StructuredLogger(f"{owner.__module__}.{owner.__qualname__}")


def get_logging_context() -> Dict[str, Any]:
    """Return a copy of the current logging context."""
    return _logging_context.get().copy()


def set_logging_context(**kwargs):
    """
    Set logging context for the current request/operation.

    This context will be automatically included in all log messages
    within the current context (typically a request or task).

    Args:
        **kwargs: Key-value pairs to add to context

    Example:
        set_logging_context(
            request_id="abc-123",
            user_id="alice",
        )
    """
    context = _logging_context.get().copy()
    context.update(kwargs)
    _logging_context.set(context)


def clear_logging_context():
    """Clear the logging context."""
    _logging_context.set({})


def log_operation(operation_name: str):
    """
    Decorator to log operation start/end and failures.

    Works on both sync and async callables. Known identifiers passed as
    keyword arguments (entity_id, event_id, topic, user_id) are included in
    the messages.

    Args:
        operation_name: Name of the operation

    Example:
        @log_operation("commit")
        async def commit(self) -> int:
            ...
    """
    def decorator(func):
        logger = StructuredLogger(func.__module__)

        def _describe(kwargs) -> str:
            found = [f"{key}={kwargs[key]}" for key in _CONTEXT_KEYS if key in kwargs]
            return f" ({', '.join(found)})" if found else ""

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            suffix = _describe(kwargs)
            logger.trace("Starting %s%s", operation_name, suffix)
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                logger.error(e, "Failed %s%s: %s", operation_name, suffix, type(e).__name__)
                raise
            logger.trace("Completed %s%s", operation_name, suffix)
            return result

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            suffix = _describe(kwargs)
            logger.trace("Starting %s%s", operation_name, suffix)
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.error(e, "Failed %s%s: %s", operation_name, suffix, type(e).__name__)
                raise
            logger.trace("Completed %s%s", operation_name, suffix)
            return result

        # Return appropriate wrapper based on whether the function is async
        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


def configure_logging(settings: Optional[LoggingSettings] = None) -> logging.Logger:
    """
    Configure the root logger with a console handler and, when a log file is
    configured, a rotating file handler.

    Handlers previously installed by this function are replaced, so calling
    it again is safe.

    Args:
        settings: Logging settings (defaults to LoggingSettings.from_env())

    Returns:
        The configured root logger
    """
    settings = settings or LoggingSettings.from_env()
    log_formatter = logging.Formatter(settings.format)

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, "_buildingblocks", False):
            root_logger.removeHandler(handler)
            handler.close()

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    console_handler._buildingblocks = True
    root_logger.addHandler(console_handler)

    # File handler with rotation
    if settings.log_file:
        file_handler = RotatingFileHandler(
            settings.log_file,
            maxBytes=settings.max_bytes,
            backupCount=settings.backup_count,
            encoding='utf-8'
        )
        file_handler.setFormatter(log_formatter)
        file_handler._buildingblocks = True
        root_logger.addHandler(file_handler)

    root_logger.setLevel(settings.level_number)
    root_logger.info(f"Logging initialized (level={settings.level}, file={settings.log_file})")
    return root_logger
