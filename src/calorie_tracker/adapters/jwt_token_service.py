"""JWT bearer tokens backed by PyJWT."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt

from calorie_tracker.domain.errors import InvalidTokenError
from calorie_tracker.services.users import TokenService


@dataclass
class JwtTokenService(TokenService):
    """Issue and verify signed JWTs carrying the user id as subject."""

    secret: str
    algorithm: str = "HS256"
    expires_in: timedelta = timedelta(days=30)

    def issue(self, user_id: UUID) -> str:
        """Return a signed token for the user."""
        now = datetime.now(tz=UTC)
        payload = {
            "sub": str(user_id),
            "iat": now,
            "exp": now + self.expires_in,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> UUID:
        """Return the user id from a valid token."""
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["sub", "exp"]},
            )
            return UUID(str(payload["sub"]))
        except (jwt.InvalidTokenError, ValueError) as exc:
            raise InvalidTokenError("Invalid or expired token") from exc
