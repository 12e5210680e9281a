import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional, Protocol, runtime_checkable

from loguru import logger as _loguru_logger  # type: ignore

from .constant import *
from .type import LoggerConfig

# Trace ID context variable (thread-safe, async-safe)
_trace_id_var: ContextVar[Optional[str]] = ContextVar(TRACE_ID_KEY, default=None)


@runtime_checkable
class ILogger(Protocol):
    """Protocol defining the Logger interface."""

    def trace_context(self, trace_id: Optional[str] = None) -> Iterator[None]: ...

    def get_trace_id(self) -> Optional[str]: ...

    def debug(self, message: str, **kwargs) -> None: ...

    def info(self, message: str, **kwargs) -> None: ...

    def warning(self, message: str, **kwargs) -> None: ...

    def error(self, message: str, **kwargs) -> None: ...

    def exception(self, message: str, **kwargs) -> None: ...


class Logger(ILogger):
    """Loguru wrapper with service name and trace ID support.

    Library modules log through ``loguru.logger`` directly; constructing a
    Logger configures the process-wide sink they all write to.

    Usage:
        logger = Logger(LoggerConfig(level="DEBUG"))
        with logger.trace_context(trace_id="req_123"):
            logger.info("Decompressing payload")
    """

    def __init__(self, config: LoggerConfig):
        """Initialize logger with configuration.

        Args:
            config: Logger configuration
        """
        self.config = config
        self._loguru = _loguru_logger.bind(**{SERVICE_KEY: config.service_name})

        # Remove default handler
        _loguru_logger.remove()

        if self.config.enable_console:
            self._add_console_handler()

    def _add_console_handler(self) -> None:
        """Add console handler with colors and trace ID."""
        service_name = self.config.service_name

        def patch_record(record):
            record["extra"].setdefault(SERVICE_KEY, service_name)
            record["extra"][TRACE_ID_KEY] = _trace_id_var.get() or ""
            return True

        format_str = (
            f"{LOG_FORMAT_TIME} | {LOG_FORMAT_LEVEL} | {LOG_FORMAT_SERVICE} | "
            f"{LOG_FORMAT_TRACE} | {LOG_FORMAT_LOCATION} - {LOG_FORMAT_MESSAGE}"
        )

        _loguru_logger.add(
            sys.stdout,
            colorize=self.config.colorize,
            format=format_str,
            level=self.config.level.value,
            filter=patch_record,
        )

    @contextmanager
    def trace_context(self, trace_id: Optional[str] = None):
        """Context manager for trace ID.

        Args:
            trace_id: Trace ID for distributed tracing
        """
        token = _trace_id_var.set(trace_id) if trace_id else None
        try:
            yield
        finally:
            if token is not None:
                _trace_id_var.reset(token)

    def get_trace_id(self) -> Optional[str]:
        """Get current trace ID."""
        return _trace_id_var.get()

    def debug(self, message: str, **kwargs) -> None:
        self._loguru.debug(message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._loguru.info(message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._loguru.warning(message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._loguru.error(message, **kwargs)

    def exception(self, message: str, **kwargs) -> None:
        """Log exception with traceback."""
        self._loguru.exception(message, **kwargs)


__all__ = [
    "Logger",
    "ILogger",
    "LoggerConfig",
]
