import logging
from typing import Optional, TypeVar

from fastapi import HTTPException, status

from app.core.errors import Result

logger = logging.getLogger(__name__)

T = TypeVar("T")

INTERNAL_ERROR_DETAIL = "An internal error occurred"


def unwrap_or_raise(result: Result[T], headers: Optional[dict[str, str]] = None) -> T:
    """
    Return the value of an Ok result, or raise the matching HTTPException.

    500s are logged with their cause and answered with a generic detail so
    internal error text never reaches the client.
    """
    if result.is_ok():
        return result.value

    error = result.error
    if error.status_code >= 500:
        logger.error(error.message, exc_info=error.cause)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_ERROR_DETAIL,
        )

    if error.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer", **(headers or {})}
    raise HTTPException(status_code=error.status_code, detail=error.message, headers=headers)
