"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import timedelta

from supabase import create_client

from calorie_tracker.adapters.bcrypt_password_hasher import BcryptPasswordHasher
from calorie_tracker.adapters.jwt_token_service import JwtTokenService
from calorie_tracker.adapters.supabase_entry_repository import SupabaseEntryRepository
from calorie_tracker.adapters.supabase_stats_repository import SupabaseStatsRepository
from calorie_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from calorie_tracker.config import Settings
from calorie_tracker.services.entries import EntryService
from calorie_tracker.services.stats import StatsService
from calorie_tracker.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    entry_service: EntryService
    stats_service: StatsService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_service = UserService(
        repository=SupabaseUserRepository(supabase_client),
        password_hasher=BcryptPasswordHasher(rounds=resolved_settings.bcrypt_rounds),
        token_service=JwtTokenService(
            secret=resolved_settings.jwt_secret,
            algorithm=resolved_settings.jwt_algorithm,
            expires_in=timedelta(days=resolved_settings.jwt_expires_days),
        ),
    )
    entry_service = EntryService(SupabaseEntryRepository(supabase_client))
    stats_service = StatsService(SupabaseStatsRepository(supabase_client))

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        entry_service=entry_service,
        stats_service=stats_service,
        close_resources=close_resources,
    )
