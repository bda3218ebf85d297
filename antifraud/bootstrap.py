"""Demo data for local runs."""

from datetime import UTC, datetime, timedelta

import structlog

from antifraud.domains.fraud.models import BlacklistEntry, EntityType, Location, UserProfile
from antifraud.domains.fraud.stores import BlacklistStore, ProfileStore

logger = structlog.get_logger()

SAMPLE_USER_ID = "USER456"


def sample_profile(user_id: str = SAMPLE_USER_ID, now: datetime | None = None) -> UserProfile:
    now = now or datetime.now(UTC)
    return UserProfile(
        user_id=user_id,
        avg_transaction_value=500.0,
        total_transactions=150,
        first_transaction_at=now - timedelta(days=182),
        last_transaction_at=now - timedelta(hours=24),
        common_locations=(
            Location(country="BR", city="São Paulo", latitude=-23.5505, longitude=-46.6333),
        ),
        common_merchants=frozenset({"Amazon", "Mercado Livre", "Magazine Luiza"}),
        trusted_devices=frozenset({"device-123"}),
    )


def sample_blacklist(now: datetime | None = None) -> list[BlacklistEntry]:
    now = now or datetime.now(UTC)
    return [
        BlacklistEntry(
            id="bl-1",
            entity_type=EntityType.USER,
            value="BLOCKED_USER_123",
            reason="Multiple confirmed fraud attempts",
            added_at=now,
        ),
        BlacklistEntry(
            id="bl-2",
            entity_type=EntityType.CARD,
            value="4567",
            reason="Card reported stolen",
            added_at=now,
        ),
        BlacklistEntry(
            id="bl-3",
            entity_type=EntityType.IP,
            value="192.168.1.100",
            reason="IP associated with fraudulent activity",
            added_at=now,
        ),
    ]


def seed_sample_data(
    profile_store: ProfileStore,
    blacklist_store: BlacklistStore,
    now: datetime | None = None,
) -> None:
    profile_store.update_user_profile(sample_profile(now=now))
    entries = sample_blacklist(now=now)
    for entry in entries:
        blacklist_store.add(entry)
    logger.info("sample_data_seeded", profiles=1, blacklist_entries=len(entries))
