from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_current_user, get_user_service
from app.api.errors import unwrap_or_raise
from app.schemas.auth import LoginRequest, LoginResponse, UserCreate, UserRead
from app.services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=LoginResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserCreate,
    user_service: UserService = Depends(get_user_service)
):
    """Register a new user and return a token for it"""
    result = await user_service.register(user_data.email, user_data.password)
    return unwrap_or_raise(result)


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: LoginRequest,
    user_service: UserService = Depends(get_user_service)
):
    """Login and get access token"""
    result = await user_service.login(credentials.email, credentials.password)
    return unwrap_or_raise(result)


@router.get("/me", response_model=UserRead)
async def get_current_user_info(current_user: UserRead = Depends(get_current_user)):
    """Get current user information"""
    return current_user
