"""Password hashing with bcrypt."""

from dataclasses import dataclass

import bcrypt

from calorie_tracker.services.users import PasswordHasher


@dataclass
class BcryptPasswordHasher(PasswordHasher):
    """bcrypt implementation of the password hasher."""

    rounds: int = 10

    def hash(self, password: str) -> str:
        """Return a salted bcrypt hash."""
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Return True when the password matches the stored hash."""
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except ValueError:
            return False
