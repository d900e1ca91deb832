import logging
from typing import Any, Callable, Optional

import anyio
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, load_only

from app.core.config import Settings
from app.core.errors import (
    ConflictError,
    Err,
    NotFoundError,
    Ok,
    Result,
    ServiceError,
    UnauthorizedError,
)
from app.core.security import (
    PasswordHasher,
    create_access_token,
    decode_access_token,
    get_password_hasher,
)
from app.models.user import User
from app.schemas.auth import LoginResponse, TokenPayload, UserRead, UserSummary

logger = logging.getLogger(__name__)

EMAIL_TAKEN_MESSAGE = "User with this email already exists"
# Same text for unknown email and wrong password so callers can't probe for accounts
INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"
USER_NOT_FOUND_MESSAGE = "User not found"
INVALID_TOKEN_MESSAGE = "Could not validate credentials"


class UserService:
    """
    Registration, login and lookup of users.

    Every public method returns Ok(value) or Err(ServiceError). Known failures
    carry their own status (409/401/404); anything unexpected is wrapped as a 500
    that keeps the original exception for logging.
    """

    def __init__(
        self,
        db: Session,
        settings: Settings,
        hasher: Optional[PasswordHasher] = None,
    ):
        self._db = db
        self._settings = settings
        self._hasher = hasher or get_password_hasher(settings.BCRYPT_ROUNDS)

    async def register(self, email: str, password: str) -> Result[LoginResponse]:
        """Create a user and return a token for it"""
        try:
            existing_user = self._db.query(User.id).filter(
                User.email == email
            ).first()
            if existing_user:
                return Err(ConflictError(EMAIL_TAKEN_MESSAGE))

            hashed_password = await self._run_blocking(self._hasher.hash, password)

            user = User(email=email, hashed_password=hashed_password)
            self._db.add(user)
            try:
                # Flush assigns the id; nothing is committed until the token is signed
                self._db.flush()
                summary = UserSummary(id=user.id, email=user.email)
                token = await self._issue_token(summary.id, summary.email)
                self._db.commit()
            except IntegrityError:
                # Lost a race with a concurrent registration for the same email
                self._db.rollback()
                logger.info("Registration for existing email rejected by the database")
                return Err(ConflictError(EMAIL_TAKEN_MESSAGE))

            logger.info(f"Registered user {summary.id}")
            return Ok(LoginResponse(token=token, user=summary))
        except Exception as e:
            self._db.rollback()
            return self._unexpected("Failed to create user", e)

    async def login(self, email: str, password: str) -> Result[LoginResponse]:
        """Check credentials and return a fresh token"""
        try:
            user = self._db.query(User).options(
                load_only(User.id, User.email, User.hashed_password)
            ).filter(User.email == email).first()

            if user is None:
                # Burn the same time as a real check so response timing doesn't reveal the miss
                await self._run_blocking(self._hasher.dummy_verify)
                logger.info("Login failed: unknown email")
                return Err(UnauthorizedError(INVALID_CREDENTIALS_MESSAGE))

            password_valid = await self._run_blocking(
                self._hasher.verify, password, user.hashed_password
            )
            if not password_valid:
                logger.info(f"Login failed: wrong password for user {user.id}")
                return Err(UnauthorizedError(INVALID_CREDENTIALS_MESSAGE))

            token = await self._issue_token(user.id, user.email)
            return Ok(LoginResponse(token=token, user=UserSummary(id=user.id, email=user.email)))
        except Exception as e:
            return self._unexpected("Login failed", e)

    async def get_by_id(self, user_id: str) -> Result[UserRead]:
        """Fetch a user's public profile"""
        try:
            user = self._db.query(User).options(
                load_only(User.id, User.email, User.created_at, User.updated_at)
            ).filter(User.id == user_id).first()

            if user is None:
                return Err(NotFoundError(USER_NOT_FOUND_MESSAGE))

            return Ok(UserRead.model_validate(user))
        except Exception as e:
            return self._unexpected("Failed to get user", e)

    async def verify_token(self, token: str) -> Result[TokenPayload]:
        """Check a token's signature and expiry and return its claims"""
        try:
            payload = await self._run_blocking(
                decode_access_token, token, self._settings
            )
        except Exception as e:
            return self._unexpected("Token verification failed", e)

        if payload is None:
            return Err(UnauthorizedError(INVALID_TOKEN_MESSAGE))

        try:
            return Ok(TokenPayload(**payload))
        except ValidationError:
            # Signed by us but missing claims - treat like any other bad token
            return Err(UnauthorizedError(INVALID_TOKEN_MESSAGE))

    async def _issue_token(self, user_id: str, email: str) -> str:
        return await self._run_blocking(
            create_access_token, {"userId": user_id, "email": email}, self._settings
        )

    async def _run_blocking(self, func: Callable[..., Any], *args: Any) -> Any:
        """Run CPU-bound work on a worker thread, bounded by the configured timeout"""
        with anyio.fail_after(self._settings.AUTH_OPERATION_TIMEOUT_SECONDS):
            return await anyio.to_thread.run_sync(func, *args, abandon_on_cancel=True)

    @staticmethod
    def _unexpected(action: str, error: Exception) -> Err:
        # Logged with traceback by the HTTP layer; keep this one quiet
        logger.debug(f"{action}: {error!r}")
        return Err(ServiceError(f"{action}: {error}", cause=error))
