"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from calorie_tracker.api.auth import router as auth_router
from calorie_tracker.api.calories import router as calories_router
from calorie_tracker.api.users import router as users_router
from calorie_tracker.app_logging import configure_logging
from calorie_tracker.config import parse_allowed_origins
from calorie_tracker.containers import AppContainer
from calorie_tracker.domain.errors import (
    AccessDeniedError,
    CalorieTrackerError,
    ConflictError,
    InvalidCredentialsError,
    InvalidTokenError,
    NotFoundError,
)

_ERROR_STATUS: dict[type[CalorieTrackerError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    AccessDeniedError: status.HTTP_403_FORBIDDEN,
    ConflictError: status.HTTP_409_CONFLICT,
    InvalidCredentialsError: status.HTTP_401_UNAUTHORIZED,
    InvalidTokenError: status.HTTP_403_FORBIDDEN,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Calorie Tracker", lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_allowed_origins(container.settings.cors_allowed_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(calories_router)

    @app.exception_handler(CalorieTrackerError)
    async def handle_domain_error(
        request: Request, exc: CalorieTrackerError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=_status_for(exc), content={"detail": exc.message}
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error", extra={"path": request.url.path})
        content: dict[str, str] = {"detail": "Server Error"}
        if container.settings.environment == "local":
            content["error"] = f"{type(exc).__name__}: {exc}"
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content
        )

    @app.get("/")
    async def root() -> dict[str, str]:
        """Service banner."""
        return {"message": "Calorie Tracker API is running"}

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _status_for(exc: CalorieTrackerError) -> int:
    for error_type in type(exc).__mro__:
        if error_type in _ERROR_STATUS:
            return _ERROR_STATUS[error_type]
    return status.HTTP_400_BAD_REQUEST
