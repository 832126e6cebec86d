"""Profile endpoints for the authenticated user."""

from uuid import UUID

from fastapi import APIRouter, Depends

from calorie_tracker.api.deps import get_container, require_user
from calorie_tracker.api.schemas import UserResponse, UserUpdateRequest
from calorie_tracker.containers import AppContainer

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/me")
async def get_me(
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> UserResponse:
    """Return the current user's profile."""
    return UserResponse.model_validate(container.user_service.get_profile(user_id))


@router.put("/me")
async def update_me(
    payload: UserUpdateRequest,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> UserResponse:
    """Update the current user's profile."""
    user = container.user_service.update_profile(
        user_id,
        username=payload.username,
        email=payload.email,
        password=payload.password,
        calorie_goal=payload.calorie_goal,
    )
    return UserResponse.model_validate(user)
