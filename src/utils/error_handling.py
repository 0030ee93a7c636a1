"""Error reporting and timing helpers shared by the GUI, the store and the CLI.

Storage failures travel as exceptions: ``StorageWorker`` emits the raw
exception and the controller's failure callback passes it to
``log_exception`` together with the sketch it concerns. Windows turn the
same exception into dialog or status-bar text with ``format_error_message``.
Code without a UI, such as ``scripts/sketch_tools.py``, calls
``handle_worker_error`` to log once and get a printable message back.

``@timed`` logs the duration of a storage call at DEBUG level when
``SKETCHBOOK_PERF_DEBUG=1`` is set.
"""

from __future__ import annotations

import logging
import os
import time
from functools import wraps
from typing import Any, Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

# Environment variable to enable performance timing
PERF_DEBUG = os.environ.get("SKETCHBOOK_PERF_DEBUG", "0") == "1"

F = TypeVar("F", bound=Callable[..., Any])


def timed(func: F) -> F:
    """Decorator to log execution time of functions.

    Only active when SKETCHBOOK_PERF_DEBUG=1 environment variable is set.
    Logs timing at DEBUG level to avoid noise in production.
    """
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if not PERF_DEBUG:
            return func(*args, **kwargs)

        start = time.perf_counter()
        try:
            result = func(*args, **kwargs)
            elapsed = time.perf_counter() - start
            logger.debug(f"PERF: {func.__module__}.{func.__name__} took {elapsed:.3f}s")
            return result
        except Exception:
            elapsed = time.perf_counter() - start
            logger.debug(f"PERF: {func.__module__}.{func.__name__} failed after {elapsed:.3f}s")
            raise

    return wrapper  # type: ignore


def format_error_message(
    error: Exception,
    context: Optional[str] = None,
    include_type: bool = True,
) -> str:
    """Format an exception into a user-friendly message.

    Args:
        error: The exception that occurred
        context: Optional context describing what was being done
        include_type: Whether to include the exception type name

    Returns:
        Formatted error message suitable for display to users
    """
    error_str = str(error)

    if not error_str or error_str == "None":
        error_str = type(error).__name__
        include_type = False

    parts = []
    if context:
        parts.append(context)

    if include_type:
        parts.append(f"{type(error).__name__}: {error_str}")
    else:
        parts.append(error_str)

    return " - ".join(parts) if len(parts) > 1 else parts[0]


def log_exception(
    error: Exception,
    context: str,
    extra: Optional[dict] = None,
    level: int = logging.ERROR,
) -> None:
    """Log an exception with structured context.

    Uses exc_info so the full traceback lands in the structured log file.

    Args:
        error: The exception that occurred
        context: Description of what was being done when error occurred
        extra: Additional context to include in the log record
        level: Logging level (default ERROR)
    """
    log_extra = {"event": "error", "error_type": type(error).__name__}
    if extra:
        log_extra.update(extra)

    logger.log(level, f"{context}: {error}", extra=log_extra, exc_info=error)


def handle_worker_error(
    error: Exception,
    context: str,
    *args: Any,
) -> str:
    """Log a storage failure once and return the message to show for it.

    Args:
        error: The exception that occurred
        context: Description of what was being done (e.g., "Delete failed")
        *args: Additional context items to include in log (e.g., sketch name)

    Returns:
        ``"<context> - <ErrorType>: <detail>"``, ready to print or display
    """
    extra = {}
    for i, arg in enumerate(args):
        extra[f"context_{i}"] = str(arg)

    log_exception(error, context, extra)

    return format_error_message(error, context)
