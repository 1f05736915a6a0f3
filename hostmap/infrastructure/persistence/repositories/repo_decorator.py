"""Repository decorator for standardizing DB operations.

This module provides a decorator for repository methods that handles:
- Structured logging with context and timing information
- Error logging with appropriate severity per error class
- Consistent performance monitoring and debugging support

Errors are always re-raised unchanged; callers see the original exception.
"""

from collections.abc import Callable
import functools
import time
from typing import Any, ParamSpec, TypeVar

from sqlalchemy.exc import (
    DatabaseError,
    IntegrityError,
    MultipleResultsFound,
    NoResultFound,
    OperationalError,
    SQLAlchemyError,
    TimeoutError,
)

from hostmap.config import get_logger
from hostmap.domain.exceptions import HostmapError

P = ParamSpec("P")
T = TypeVar("T")

logger = get_logger(__name__)


def db_operation(operation_name: str | None = None):
    """Decorate repository methods with consistent logging and error handling.

    Args:
        operation_name: Optional name for the operation (defaults to function name)

    Example:
        @db_operation("get_domain")
        def get(self, id_: int) -> Domain | None:
            ...
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        func_name = operation_name or func.__name__

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            start_time = time.perf_counter()
            repo_name = args[0].__class__.__name__ if args else "Repository"
            context = _build_log_context(kwargs)

            def elapsed_ms() -> float:
                return (time.perf_counter() - start_time) * 1000

            try:
                logger.trace(
                    f"DB operation starting: {repo_name}.{func_name}",
                    operation=func_name,
                    **context,
                )

                result = func(*args, **kwargs)

                logger.trace(
                    f"DB operation completed: {repo_name}.{func_name}",
                    operation=func_name,
                    exec_time_ms=elapsed_ms(),
                    **context,
                )
                return result

            except HostmapError as e:
                # Expected repository outcomes (missing row, duplicate name)
                logger.debug(
                    f"DB operation rejected: {repo_name}.{func_name}",
                    operation=func_name,
                    error=str(e),
                    exec_time_ms=elapsed_ms(),
                    **context,
                )
                raise

            except NoResultFound as e:
                logger.debug(
                    f"DB record not found: {repo_name}.{func_name}",
                    operation=func_name,
                    error=str(e),
                    exec_time_ms=elapsed_ms(),
                    **context,
                )
                raise

            except (MultipleResultsFound, IntegrityError) as e:
                logger.warning(
                    f"DB integrity error: {repo_name}.{func_name}",
                    operation=func_name,
                    error=str(e),
                    exec_time_ms=elapsed_ms(),
                    **context,
                )
                raise

            except (TimeoutError, OperationalError) as e:
                logger.error(
                    f"DB operational error: {repo_name}.{func_name}",
                    operation=func_name,
                    error=str(e),
                    exec_time_ms=elapsed_ms(),
                    **context,
                )
                raise

            except (DatabaseError, SQLAlchemyError) as e:
                logger.error(
                    f"DB error: {repo_name}.{func_name}",
                    operation=func_name,
                    error=str(e),
                    exec_time_ms=elapsed_ms(),
                    **context,
                )
                raise

            except Exception as e:
                logger.exception(
                    f"Unhandled exception in {repo_name}.{func_name}",
                    operation=func_name,
                    error=str(e),
                    exec_time_ms=elapsed_ms(),
                    **context,
                )
                raise

        return wrapper

    return decorator


def _build_log_context(kwargs: dict[str, Any]) -> dict[str, Any]:
    """Build a context dictionary for logging from function kwargs."""
    id_params = {
        k: v
        for k, v in kwargs.items()
        if k.endswith("_id") and isinstance(v, int | str)
    }

    simple_params = {
        k: v
        for k, v in kwargs.items()
        if (
            not k.startswith("_")
            and isinstance(v, int | str | bool | float)
            and k not in id_params
        )
    }

    return {**simple_params, **id_params}
