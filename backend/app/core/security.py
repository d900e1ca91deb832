from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.core.config import Settings


class PasswordHasher:
    """bcrypt hashing at a fixed cost factor"""

    def __init__(self, rounds: int):
        # CryptContext handles password hashing using bcrypt
        # bcrypt is slow by design to prevent brute-force attacks; rounds sets how slow
        # 'deprecated="auto"' lets passlib flag hashes made with older settings
        self._context = CryptContext(
            schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, password: str) -> str:
        """Hash a password using bcrypt"""
        # bcrypt generates a salt per hash and stores it inside the hash string
        # so equal passwords give different hashes and rainbow tables don't help
        return self._context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against a hash using constant-time comparison"""
        # Cost factor and salt are read back from the stored hash
        return self._context.verify(plain_password, hashed_password)

    def dummy_verify(self) -> None:
        """Spend the same time as a real verify, for lookups that found no user"""
        # Without this, a fast reply to an unknown email reveals which emails exist
        self._context.dummy_verify()


@lru_cache
def get_password_hasher(rounds: int) -> PasswordHasher:
    """Shared hasher per cost factor"""
    return PasswordHasher(rounds)


def create_access_token(
    data: dict,
    settings: Settings,
    expires_delta: Optional[timedelta] = None,
    now: Optional[datetime] = None,
) -> str:
    """Create a signed JWT carrying ``data`` plus iat/exp claims"""
    # Copy data to avoid mutating the original dict
    to_encode = data.copy()

    # Tokens are never stored server-side, so expiry is what limits a leaked token
    issued_at = now or datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)

    # Standard 'iat' and 'exp' claims; jose converts the datetimes to epoch seconds
    to_encode.update({"iat": issued_at, "exp": issued_at + expires_delta})

    # Algorithm must match in decode - changing it invalidates every issued token
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> Optional[dict]:
    """Decode and verify a JWT token"""
    try:
        # Verifies signature and expiration; None if invalid, expired, or tampered with
        # Pinning algorithms stops a token from choosing its own (e.g. "none")
        return jwt.decode(token, settings.SECRET_KEY,
                          algorithms=[settings.ALGORITHM])
    except JWTError:
        # Token is invalid - could be expired, tampered, or signed with another key
        return None
