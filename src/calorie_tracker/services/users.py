"""User registration, login and profile management."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.errors import (
    ConflictError,
    InvalidCredentialsError,
    NotFoundError,
)
from calorie_tracker.domain.models import UserCredentials, UserRecord

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""

    def get_by_email(self, email: str) -> UserCredentials | None:
        """Return the user and password hash for an email, if present."""

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user with the given username, if present."""

    def create_user(self, username: str, email: str, password_hash: str) -> UserRecord:
        """Create and return a new user record."""

    def update_user(self, user_id: UUID, changes: dict[str, object]) -> UserRecord:
        """Apply column changes to a user and return the updated record."""


class PasswordHasher(Protocol):
    """Interface for one-way password hashing."""

    def hash(self, password: str) -> str:
        """Return a salted hash for the password."""

    def verify(self, password: str, password_hash: str) -> bool:
        """Return True when the password matches the hash."""


class TokenService(Protocol):
    """Interface for issuing and verifying bearer tokens."""

    def issue(self, user_id: UUID) -> str:
        """Return a signed token for the user."""

    def verify(self, token: str) -> UUID:
        """Return the user id in a valid token or raise InvalidTokenError."""


@dataclass(frozen=True)
class AuthResult:
    """A signed token and the user it was issued for."""

    token: str
    user: UserRecord


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository
    password_hasher: PasswordHasher
    token_service: TokenService

    def register(self, username: str, email: str, password: str) -> AuthResult:
        """Create a new account and return a token for it."""
        email = _normalize_email(email)
        username = username.strip()
        if self.repository.get_by_email(email):
            raise ConflictError("User with this email already exists")
        if self.repository.get_by_username(username):
            raise ConflictError("Username is already taken")

        user = self.repository.create_user(
            username=username,
            email=email,
            password_hash=self.password_hasher.hash(password),
        )
        logger.info("User registered", extra={"user_id": str(user.id)})
        return AuthResult(token=self.token_service.issue(user.id), user=user)

    def login(self, email: str, password: str) -> AuthResult:
        """Check credentials and return a fresh token."""
        credentials = self.repository.get_by_email(_normalize_email(email))
        if credentials is None or not self.password_hasher.verify(
            password, credentials.password_hash
        ):
            raise InvalidCredentialsError("Invalid credentials")
        user = credentials.user
        logger.info("User logged in", extra={"user_id": str(user.id)})
        return AuthResult(token=self.token_service.issue(user.id), user=user)

    def authenticate(self, token: str) -> UUID:
        """Return the user id carried by a bearer token."""
        return self.token_service.verify(token)

    def get_profile(self, user_id: UUID) -> UserRecord:
        """Return the user's profile."""
        user = self.repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def update_profile(
        self,
        user_id: UUID,
        *,
        username: str | None = None,
        email: str | None = None,
        password: str | None = None,
        calorie_goal: int | None = None,
    ) -> UserRecord:
        """Update the provided profile fields."""
        user = self.get_profile(user_id)
        changes: dict[str, object] = {}

        if email:
            email = _normalize_email(email)
            if email != user.email:
                if self.repository.get_by_email(email):
                    raise ConflictError("Email already in use")
                changes["email"] = email
        if username:
            username = username.strip()
            if username != user.username:
                if self.repository.get_by_username(username):
                    raise ConflictError("Username already in use")
                changes["username"] = username
        if calorie_goal is not None:
            changes["calorie_goal"] = calorie_goal
        if password:
            changes["password_hash"] = self.password_hasher.hash(password)

        if not changes:
            return user
        updated = self.repository.update_user(user_id, changes)
        logger.info(
            "User profile updated",
            extra={"user_id": str(user_id), "fields": sorted(changes)},
        )
        return updated


def _normalize_email(email: str) -> str:
    return email.strip().lower()
