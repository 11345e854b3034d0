"""Error handling utilities for the Post Finder application."""

import logging
import traceback
from typing import Callable, Optional, TypeVar
from functools import wraps

from .exceptions import PostFinderError, StoreUnavailable

logger = logging.getLogger(__name__)

T = TypeVar('T')


def handle_errors(
    exception_type: type = PostFinderError,
    log_level: int = logging.ERROR
):
    """Decorator for consistent error handling across the application.

    Domain errors are logged and re-raised untouched. Anything else is
    logged and wrapped into ``exception_type`` so callers only ever see the
    documented taxonomy.
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except PostFinderError as e:
                logger.log(log_level, f"{func.__name__} failed: {e.message}", extra={
                    'error_code': e.error_code,
                    'details': e.details,
                    'function': func.__name__
                })
                raise
            except Exception as e:
                error_msg = f"Unexpected error in {func.__name__}: {e}"
                logger.log(log_level, error_msg, extra={
                    'function': func.__name__,
                    'original_error': str(e),
                    'details': {'error_type': type(e).__name__},
                    'traceback': traceback.format_exc()
                })
                raise exception_type(
                    message=error_msg,
                    details={'original_error': str(e), 'function': func.__name__}
                ) from e
        return wrapper
    return decorator


def store_operation(func: Callable[..., T]) -> Callable[..., T]:
    """Mark a repository method whose failures surface as StoreUnavailable."""
    return handle_errors(exception_type=StoreUnavailable)(func)


def log_error(
    error: Exception,
    context: str,
    details: Optional[dict] = None,
    level: int = logging.ERROR
) -> None:
    """Log an error with consistent formatting."""
    if isinstance(error, PostFinderError):
        logger.log(level, f"{context}: {error.message}", extra={
            'error_code': error.error_code,
            'details': {**(error.details or {}), **(details or {})},
            'context': context
        })
    else:
        logger.log(level, f"{context}: {error}", extra={
            'original_error': str(error),
            'details': details or {},
            'context': context,
            'traceback': traceback.format_exc()
        })
