"""Shared FastAPI dependencies."""

from uuid import UUID

from fastapi import Depends, Header, HTTPException, Request, status

from calorie_tracker.containers import AppContainer

BEARER_PREFIX = "bearer "


def get_container(request: Request) -> AppContainer:
    """Return the dependency container attached to the app."""
    return request.app.state.container


async def require_user(
    authorization: str | None = Header(default=None),
    container: AppContainer = Depends(get_container),
) -> UUID:
    """Resolve the bearer token to the requesting user's id."""
    token = ""
    if authorization and authorization.lower().startswith(BEARER_PREFIX):
        token = authorization[len(BEARER_PREFIX) :].strip()
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication token required",
        )
    return container.user_service.authenticate(token)
