"""HTTP client for the calorie tracker API.

Auth state lives in an ``AuthSession`` returned by ``register``/``login``
and passed to every authenticated call.
"""

from dataclasses import dataclass
from datetime import date

import httpx


@dataclass(frozen=True)
class AuthSession:
    """Bearer token and user payload for an authenticated client."""

    token: str
    user: dict[str, object]

    @property
    def headers(self) -> dict[str, str]:
        """Authorization headers for this session."""
        return {"Authorization": f"Bearer {self.token}"}


@dataclass
class HttpxCalorieApiClient:
    """Calorie tracker API client implemented with httpx."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str) -> "HttpxCalorieApiClient":
        """Create a client with a managed httpx session."""
        return cls(base_url=base_url.rstrip("/"), http_client=httpx.AsyncClient())

    async def register(self, username: str, email: str, password: str) -> AuthSession:
        """Create an account and return its session."""
        data = await self._request(
            "POST",
            "/api/auth/register",
            json={"username": username, "email": email, "password": password},
        )
        return AuthSession(token=data["token"], user=data["user"])

    async def login(self, email: str, password: str) -> AuthSession:
        """Log in and return a session."""
        data = await self._request(
            "POST", "/api/auth/login", json={"email": email, "password": password}
        )
        return AuthSession(token=data["token"], user=data["user"])

    async def get_profile(self, session: AuthSession) -> dict[str, object]:
        """Return the current user's profile."""
        return await self._request("GET", "/api/users/me", session=session)

    async def update_profile(
        self, session: AuthSession, **fields: object
    ) -> dict[str, object]:
        """Update profile fields (username, email, password, calorieGoal)."""
        return await self._request(
            "PUT", "/api/users/me", session=session, json=fields
        )

    async def create_entry(
        self,
        session: AuthSession,
        entry_date: date,
        calories: int,
        notes: str | None = None,
    ) -> dict[str, object]:
        """Record calories for a day."""
        payload: dict[str, object] = {
            "date": entry_date.isoformat(),
            "calories": calories,
        }
        if notes is not None:
            payload["notes"] = notes
        return await self._request(
            "POST", "/api/calories", session=session, json=payload
        )

    async def list_entries(  # noqa: PLR0913
        self,
        session: AuthSession,
        start_date: date | None = None,
        end_date: date | None = None,
        limit: int = 30,
        page: int = 1,
    ) -> dict[str, object]:
        """Return a page of entries with pagination metadata."""
        params: dict[str, object] = {"limit": limit, "page": page}
        if start_date is not None:
            params["startDate"] = start_date.isoformat()
        if end_date is not None:
            params["endDate"] = end_date.isoformat()
        return await self._request(
            "GET", "/api/calories", session=session, params=params
        )

    async def get_entry(self, session: AuthSession, entry_id: str) -> dict[str, object]:
        """Return a single entry."""
        return await self._request(
            "GET", f"/api/calories/{entry_id}", session=session
        )

    async def update_entry(
        self, session: AuthSession, entry_id: str, **fields: object
    ) -> dict[str, object]:
        """Update entry fields (date, calories, notes)."""
        return await self._request(
            "PUT", f"/api/calories/{entry_id}", session=session, json=fields
        )

    async def delete_entry(self, session: AuthSession, entry_id: str) -> None:
        """Delete an entry."""
        await self._request("DELETE", f"/api/calories/{entry_id}", session=session)

    async def get_stats(
        self, session: AuthSession, period: str = "week"
    ) -> dict[str, object]:
        """Return statistics for a period."""
        return await self._request(
            "GET", "/api/calories/stats", session=session, params={"period": period}
        )

    async def get_chart(
        self,
        session: AuthSession,
        start_date: date | None = None,
        end_date: date | None = None,
        range_name: str | None = None,
    ) -> dict[str, object]:
        """Return a zero-filled daily series for a date range or named range."""
        params: dict[str, object] = {}
        if range_name is not None:
            params["range"] = range_name
        if start_date is not None:
            params["startDate"] = start_date.isoformat()
        if end_date is not None:
            params["endDate"] = end_date.isoformat()
        return await self._request(
            "GET", "/api/calories/chart", session=session, params=params
        )

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        session: AuthSession | None = None,
        json: dict[str, object] | None = None,
        params: dict[str, object] | None = None,
    ) -> dict[str, object]:
        response = await self.http_client.request(
            method,
            f"{self.base_url}{path}",
            headers=session.headers if session else None,
            json=json,
            params=params,
            timeout=10,
        )
        response.raise_for_status()
        if response.status_code == httpx.codes.NO_CONTENT:
            return {}
        return response.json()
