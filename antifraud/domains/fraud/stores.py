"""Profile and blacklist stores.

The decision service depends only on the ``ProfileStore`` and
``BlacklistStore`` protocols. The in-memory implementations below are the
reference backends; each guards its table with a single lock, and stored
models are frozen so a reader can never observe a half-written entry.
"""

import threading
from datetime import UTC, datetime
from typing import Protocol

import structlog

from .errors import ProfileNotFoundError
from .models import BlacklistEntry, UserProfile, as_utc

logger = structlog.get_logger()


class ProfileStore(Protocol):
    def get_user_profile(self, user_id: str) -> UserProfile:
        """Return the profile or raise ProfileNotFoundError."""
        ...

    def update_user_profile(self, profile: UserProfile) -> None: ...


class BlacklistStore(Protocol):
    def is_blacklisted(self, entity_type: str, value: str, now: datetime | None = None) -> bool:
        ...

    def add(self, entry: BlacklistEntry) -> None: ...


class InMemoryProfileStore:
    """User id -> profile table. Writes replace the whole profile."""

    def __init__(self) -> None:
        self._profiles: dict[str, UserProfile] = {}
        self._lock = threading.Lock()

    def get_user_profile(self, user_id: str) -> UserProfile:
        with self._lock:
            profile = self._profiles.get(user_id)
        if profile is None:
            raise ProfileNotFoundError(user_id)
        return profile

    def update_user_profile(self, profile: UserProfile) -> None:
        with self._lock:
            self._profiles[profile.user_id] = profile
        logger.debug("profile_updated", user_id=profile.user_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._profiles)


class InMemoryBlacklistStore:
    """(entity type -> value -> entry) table.

    Expiry is evaluated at query time; expired or inactive entries stay in
    the table until replaced.
    """

    def __init__(self) -> None:
        self._entries: dict[str, dict[str, BlacklistEntry]] = {}
        self._lock = threading.Lock()

    def is_blacklisted(self, entity_type: str, value: str, now: datetime | None = None) -> bool:
        with self._lock:
            entry = self._entries.get(str(entity_type), {}).get(value)
        if entry is None:
            return False
        return entry.is_effective(as_utc(now) if now else datetime.now(UTC))

    def add(self, entry: BlacklistEntry) -> None:
        with self._lock:
            self._entries.setdefault(str(entry.entity_type), {})[entry.value] = entry
        logger.info(
            "blacklist_entry_added",
            entry_id=entry.id,
            entity_type=entry.entity_type,
            is_active=entry.is_active,
            expires_at=entry.expires_at.isoformat() if entry.expires_at else None,
        )

    def get(self, entity_type: str, value: str) -> BlacklistEntry | None:
        with self._lock:
            return self._entries.get(str(entity_type), {}).get(value)
