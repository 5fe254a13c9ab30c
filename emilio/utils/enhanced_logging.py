# emilio/utils/enhanced_logging.py
import json
import inspect
import logging
import sys
from datetime import datetime
from typing import Dict, Any, Optional, Union

from loguru import logger as _loguru_logger


class EnhancedLogger:
    """Logger with context tracking that writes structured records to loguru."""

    def __init__(self, name: str):
        self._name = name
        self._level = logging.NOTSET
        self._context: Dict[str, Any] = {}

    def add_context(self, key: str, value: Any) -> None:
        """Add context information for subsequent log messages."""
        self._context[key] = value

    def remove_context(self, key: str) -> None:
        """Remove context information."""
        if key in self._context:
            del self._context[key]

    def clear_context(self) -> None:
        """Clear all context information."""
        self._context.clear()

    def with_context(self, **context) -> 'EnhancedLogger':
        """Create a new logger with added context."""
        new_logger = EnhancedLogger(self._name)
        new_logger._context = {**self._context, **context}
        return new_logger

    def _format_message(self, msg: str, extra: Optional[Dict[str, Any]] = None) -> str:
        """Attach context to the message when there is any."""
        context = {**self._context}
        if extra:
            context.update(extra)
        if not context:
            return msg
        return f"{msg} | {json.dumps(context, default=str)}"

    def _caller(self) -> str:
        # Skip _emit and the public level method
        frame = inspect.currentframe().f_back.f_back.f_back
        filename = frame.f_code.co_filename.split('/')[-1]
        return f"{filename}:{frame.f_code.co_name}:{frame.f_lineno}"

    def _emit(self, level: Union[str, int], msg: str, extra: Optional[Dict[str, Any]], exception: bool = False) -> None:
        bound = _loguru_logger.bind(name=self._name, caller=self._caller(), timestamp=datetime.now().isoformat())
        if exception:
            bound = bound.opt(exception=True, depth=2)
        else:
            bound = bound.opt(depth=2)
        bound.log(level, self._format_message(msg, extra))

    def debug(self, msg: str, **kwargs) -> None:
        """Log a debug message with context."""
        self._emit("DEBUG", msg, kwargs.pop("extra", {}))

    def info(self, msg: str, **kwargs) -> None:
        """Log an info message with context."""
        self._emit("INFO", msg, kwargs.pop("extra", {}))

    def warning(self, msg: str, **kwargs) -> None:
        """Log a warning message with context."""
        self._emit("WARNING", msg, kwargs.pop("extra", {}))

    def error(self, msg: str, **kwargs) -> None:
        """Log an error message with context."""
        self._emit("ERROR", msg, kwargs.pop("extra", {}))

    def critical(self, msg: str, **kwargs) -> None:
        """Log a critical message with context."""
        self._emit("CRITICAL", msg, kwargs.pop("extra", {}))

    def exception(self, msg: str, exc_info: Union[bool, BaseException] = True, **kwargs) -> None:
        """Log an exception with context."""
        extra = kwargs.pop("extra", {})
        if exc_info:
            if isinstance(exc_info, BaseException):
                exc_type = type(exc_info).__name__
                exc_message = str(exc_info)
            else:
                current = sys.exc_info()
                exc_type = current[0].__name__ if current[0] else "Unknown"
                exc_message = str(current[1]) if current[1] else ""

            extra["exception"] = {
                "exception_type": exc_type,
                "exception_message": exc_message,
            }
        self._emit("ERROR", msg, extra, exception=bool(exc_info))

    def log(self, level: int, msg: str, **kwargs) -> None:
        """Log a message with the specified stdlib level number."""
        self._emit(level, msg, kwargs.pop("extra", {}))

    @property
    def name(self) -> str:
        """Get the logger name."""
        return self._name

    @property
    def level(self) -> int:
        """Get the logger level."""
        return self._level

    @level.setter
    def level(self, level: int) -> None:
        """Set the logger level."""
        self._level = level
