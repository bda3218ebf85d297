"""Shared test fixtures for the anti-fraud tests."""

import os
from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest

os.environ.setdefault("SEED_SAMPLE_DATA", "false")

from antifraud.domains.fraud.models import (  # noqa: E402
    DeviceInfo,
    Location,
    Transaction,
    UserProfile,
)
from antifraud.domains.fraud.service import FraudDecisionService  # noqa: E402
from antifraud.domains.fraud.stores import (  # noqa: E402
    InMemoryBlacklistStore,
    InMemoryProfileStore,
)

NOW = datetime(2026, 1, 15, 14, 0, 0, tzinfo=UTC)

SAO_PAULO = Location(country="BR", city="São Paulo", latitude=-23.5505, longitude=-46.6333)
LONDON = Location(country="GB", city="London", latitude=51.5074, longitude=-0.1278)


def make_transaction(**kwargs) -> Transaction:
    defaults = {
        "transaction_id": "txn-1",
        "user_id": "user-1",
        "amount": Decimal("100.00"),
        "currency": "BRL",
        "merchant": "Amazon",
        "location": SAO_PAULO,
        "timestamp": NOW,
    }
    defaults.update(kwargs)
    return Transaction(**defaults)


def make_profile(**kwargs) -> UserProfile:
    """An established user: six months old, last seen ten days ago in São Paulo."""
    defaults = {
        "user_id": "user-1",
        "avg_transaction_value": 500.0,
        "total_transactions": 150,
        "first_transaction_at": NOW - timedelta(days=180),
        "last_transaction_at": NOW - timedelta(days=10),
        "common_locations": (SAO_PAULO,),
        "common_merchants": frozenset({"Amazon", "Mercado Livre"}),
        "trusted_devices": frozenset({"device-123"}),
    }
    defaults.update(kwargs)
    return UserProfile(**defaults)


def make_device(device_id: str = "device-123") -> DeviceInfo:
    return DeviceInfo(device_id=device_id, device_type="mobile", os="android")


@pytest.fixture
def profile_store() -> InMemoryProfileStore:
    return InMemoryProfileStore()


@pytest.fixture
def blacklist_store() -> InMemoryBlacklistStore:
    return InMemoryBlacklistStore()


@pytest.fixture
def service(profile_store, blacklist_store) -> FraudDecisionService:
    return FraudDecisionService(profile_store, blacklist_store)
