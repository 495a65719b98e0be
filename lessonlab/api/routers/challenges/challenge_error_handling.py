"""
Challenge error handling utilities.

Provides a decorator for consistent error handling across code-challenge
API endpoints.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status
from pydantic import ValidationError

from lessonlab.core.exceptions import ContentNotFoundError, ProgressPersistenceError

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_challenge_errors(func: F) -> F:
    """
    Decorator to transform challenge errors into HTTPExceptions.

    - ContentNotFoundError -> 404
    - pydantic ValidationError -> 422
    - ProgressPersistenceError -> 503
    - anything else -> 500
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except ContentNotFoundError as e:
            logger.warning("Lesson not found", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=e.message,
            )

        except ValidationError as e:
            logger.warning("Pydantic validation error", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=e.errors(),
            )

        except ProgressPersistenceError as e:
            logger.error("Progress store unavailable", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=e.message,
            )

        except Exception as e:
            logger.exception(
                "Unexpected failure in challenge operation",
                extra={"error": str(e)}
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred during challenge verification",
            )

    return wrapper  # type: ignore
