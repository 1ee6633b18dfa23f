from __future__ import annotations

import logging
import os
import sys
from functools import wraps
from typing import Any, Callable, TypeVar

from loguru import logger as _loguru_logger

from timever.config import get as cfg_get


def _format_result(result: Any, max_length: int = 200) -> str:
    """Return a string representation of ``result`` truncated if necessary."""
    if isinstance(result, str) and len(result) > max_length:
        return f"{result[:max_length]}... [truncated {len(result)} chars]"
    return str(result)


class _LoggerProxy:
    """Compatibility wrapper that mimics ``logging.Logger`` semantics."""

    def __init__(self, inner):
        self._inner = inner

    def _log(self, method: str, message: str, *args, **kwargs):
        exc_info = kwargs.pop("exc_info", None)
        if args:
            try:
                message = message % args
            except (TypeError, ValueError):
                try:
                    message = message.format(*args)
                except (IndexError, KeyError, ValueError):
                    message = " ".join([message, *map(str, args)])
        target = self._inner
        if exc_info:
            if exc_info is True:
                target = target.opt(exception=True)
            else:
                target = target.opt(exception=exc_info)
        return getattr(target, method)(message, **kwargs)

    def debug(self, message: str, *args, **kwargs):
        return self._log("debug", message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs):
        return self._log("info", message, *args, **kwargs)

    def warning(self, message: str, *args, **kwargs):
        return self._log("warning", message, *args, **kwargs)

    def error(self, message: str, *args, **kwargs):
        return self._log("error", message, *args, **kwargs)

    def exception(self, message: str, *args, **kwargs):
        return self._log("exception", message, *args, **kwargs)

    def success(self, message: str, *args, **kwargs):
        return self._log("success", message, *args, **kwargs)

    def __getattr__(self, name: str):
        return getattr(self._inner, name)


logger = _LoggerProxy(_loguru_logger)


class InterceptHandler(logging.Handler):
    """Forward standard logging records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:  # type: ignore[override]
        logger.opt(depth=6, exception=record.exc_info).log(
            record.levelno, record.getMessage()
        )


def _debug_enabled() -> bool:
    return os.getenv("TIMEVER_DEBUG", "0") not in {"0", "", "false", "False"}


def setup_logging(
    default_level: int = logging.INFO,
    *,
    stdout: bool = False,
) -> None:
    """Configure loguru logging based on settings and environment."""

    level_name = os.getenv("TIMEVER_LOG_LEVEL", cfg_get("LOG_LEVEL", "INFO")).upper()
    if _debug_enabled():
        level_name = "DEBUG"

    level = getattr(logging, level_name, default_level)
    stream = sys.stdout if stdout else sys.stderr

    logger.remove()
    logger.add(
        stream,
        level=level,
        format="{level} - {time:HH:mm:ss}: {message}",
    )
    logging.basicConfig(handlers=[InterceptHandler()], level=level, force=True)

    logger.debug(
        f"Logging setup: TIMEVER_DEBUG={os.getenv('TIMEVER_DEBUG', '0')}, "
        f"TIMEVER_LOG_LEVEL={logging.getLevelName(level)}"
    )


T = TypeVar("T")


def log_result(func: Callable[..., T]) -> Callable[..., T]:
    """Decorator that logs function calls and their return value."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        logger.debug(f"calling {func.__name__}")
        result = func(*args, **kwargs)
        logger.debug(f"{func.__name__} -> {_format_result(result)}")
        return result

    return wrapper
