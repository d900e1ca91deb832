"""
Error kinds and result types returned by the service layer.

Services never let failures escape as exceptions. Each operation returns
either ``Ok(value)`` or ``Err(error)`` and the caller decides what to do
with it; the HTTP layer turns an ``Err`` into an ``HTTPException``.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


class ServiceError(Exception):
    """
    Base error kind: a human-readable message plus an HTTP-style status.

    Only 500-class errors keep the original exception as ``cause``.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.cause = cause if self.status_code >= 500 else None

    def to_dict(self) -> dict:
        return {"message": self.message, "status_code": self.status_code}


class ConflictError(ServiceError):
    """Resource already exists."""

    status_code = 409


class UnauthorizedError(ServiceError):
    """Credentials or token rejected."""

    status_code = 401


class NotFoundError(ServiceError):
    """Resource not found."""

    status_code = 404


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    error: ServiceError

    def is_ok(self) -> bool:
        return False

    def unwrap(self):
        raise self.error


Result = Union[Ok[T], Err]
