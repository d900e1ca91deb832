from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.networks import validate_email


class UserCreate(BaseModel):
    email: str
    password: str = Field(min_length=1, max_length=72)  # bcrypt ignores bytes past 72

    @field_validator("email")
    @classmethod
    def email_well_formed(cls, value: str) -> str:
        # Same check as EmailStr, but the address is stored exactly as sent
        validate_email(value)
        return value


class LoginRequest(BaseModel):
    # Plain string: a malformed address is just another unknown email (401, not 422)
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UserSummary(BaseModel):
    id: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class UserRead(BaseModel):
    """Public user profile - never carries the password hash"""
    id: str
    email: str
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    model_config = ConfigDict(from_attributes=True)


class LoginResponse(BaseModel):
    token: str
    user: UserSummary


class TokenPayload(BaseModel):
    userId: str
    email: str
    iat: int
    exp: int
