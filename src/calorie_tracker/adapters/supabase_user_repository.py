"""Supabase-backed user repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from calorie_tracker.domain.models import (
    DEFAULT_CALORIE_GOAL,
    UserCredentials,
    UserRecord,
)
from calorie_tracker.services.users import UserRepository

_USER_COLUMNS = "id, username, email, calorie_goal, created_at, updated_at"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""
        response = (
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_user(response.data[0])

    def get_by_email(self, email: str) -> UserCredentials | None:
        """Return the user and password hash for an email, if present."""
        response = (
            self.client.table("users")
            .select(f"{_USER_COLUMNS}, password_hash")
            .eq("email", email)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return UserCredentials(
            user=_parse_user(row), password_hash=str(row["password_hash"])
        )

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user for a username, if present."""
        response = (
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq("username", username)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_user(response.data[0])

    def create_user(self, username: str, email: str, password_hash: str) -> UserRecord:
        """Create a new user row and return it."""
        response = (
            self.client.table("users")
            .insert(
                {
                    "username": username,
                    "email": email,
                    "password_hash": password_hash,
                    "calorie_goal": DEFAULT_CALORIE_GOAL,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_user(response.data[0])

    def update_user(self, user_id: UUID, changes: dict[str, object]) -> UserRecord:
        """Update user columns and return the new row."""
        payload = dict(changes)
        payload["updated_at"] = datetime.now(tz=UTC).isoformat()
        response = (
            self.client.table("users").update(payload).eq("id", str(user_id)).execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update user in Supabase")
        return _parse_user(response.data[0])


def _parse_user(row: dict[str, object]) -> UserRecord:
    calorie_goal = row.get("calorie_goal")
    return UserRecord(
        id=UUID(str(row["id"])),
        username=str(row.get("username", "")),
        email=str(row.get("email", "")),
        calorie_goal=(
            int(calorie_goal) if calorie_goal is not None else DEFAULT_CALORIE_GOAL
        ),
        created_at=_parse_timestamp(row.get("created_at")),
        updated_at=_parse_timestamp(row.get("updated_at")),
    )


def _parse_timestamp(value: object) -> datetime | None:
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value)
    return None
