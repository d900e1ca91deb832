from fastapi import APIRouter, Depends

from app.api.dependencies import get_current_user, get_user_service
from app.api.errors import unwrap_or_raise
from app.schemas.auth import UserRead
from app.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}", response_model=UserRead)
async def get_user(
    user_id: str,
    current_user: UserRead = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service)
):
    """Get a user's public profile"""
    result = await user_service.get_by_id(user_id)
    return unwrap_or_raise(result)
