from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.api.errors import unwrap_or_raise
from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.core.errors import NotFoundError
from app.schemas.auth import UserRead
from app.services.user_service import INVALID_TOKEN_MESSAGE, UserService

# Extracts "Authorization: Bearer <token>"; auto_error=False so we control the 401 body
bearer_scheme = HTTPBearer(auto_error=False)


def get_user_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> UserService:
    """Build a UserService bound to this request's session"""
    return UserService(db, settings)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    user_service: UserService = Depends(get_user_service),
) -> UserRead:
    """
    Get current authenticated user from JWT token.

    Raises 401 when the token is missing, invalid, expired, or names a user
    that no longer exists.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=INVALID_TOKEN_MESSAGE,
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None:
        raise credentials_exception

    payload = unwrap_or_raise(await user_service.verify_token(credentials.credentials))

    result = await user_service.get_by_id(payload.userId)
    if not result.is_ok() and isinstance(result.error, NotFoundError):
        raise credentials_exception
    return unwrap_or_raise(result)
