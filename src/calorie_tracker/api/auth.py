"""Registration and login endpoints."""

from fastapi import APIRouter, Depends, status

from calorie_tracker.api.deps import get_container
from calorie_tracker.api.schemas import AuthResponse, LoginRequest, RegisterRequest
from calorie_tracker.containers import AppContainer
from calorie_tracker.services.users import AuthResult

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    payload: RegisterRequest, container: AppContainer = Depends(get_container)
) -> AuthResponse:
    """Create an account and return a token."""
    result = container.user_service.register(
        username=payload.username,
        email=payload.email,
        password=payload.password,
    )
    return _auth_response(result)


@router.post("/login")
async def login(
    payload: LoginRequest, container: AppContainer = Depends(get_container)
) -> AuthResponse:
    """Exchange credentials for a token."""
    result = container.user_service.login(payload.email, payload.password)
    return _auth_response(result)


def _auth_response(result: AuthResult) -> AuthResponse:
    return AuthResponse.model_validate(
        {"token": result.token, "user": result.user}, from_attributes=True
    )
