"""Pydantic models for the fraud domain."""

from datetime import UTC, datetime
from decimal import Decimal
from enum import StrEnum
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field


def as_utc(value: datetime) -> datetime:
    # Naive timestamps are read as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class EntityType(StrEnum):
    USER = "user"
    CARD = "card"
    IP = "ip"
    DEVICE = "device"


class RiskLevel(StrEnum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class Decision(StrEnum):
    APPROVED = "APPROVED"
    REVIEW = "REVIEW"
    BLOCKED = "BLOCKED"


class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    country: str
    city: str
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    ip_address: str | None = None


class DeviceInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    device_id: str
    device_type: str = ""
    os: str = ""
    browser: str | None = None
    user_agent: str | None = None
    fingerprint: str | None = None


class Transaction(BaseModel):
    model_config = ConfigDict(frozen=True)

    transaction_id: str
    user_id: str
    amount: Decimal = Field(gt=0)
    currency: str
    merchant: str
    location: Location
    device_info: DeviceInfo | None = None
    timestamp: UtcDatetime | None = None
    card_last4: str | None = None
    card_type: str | None = None
    description: str | None = None

    @property
    def amount_float(self) -> float:
        return float(self.amount)


class FraudIncident(BaseModel):
    model_config = ConfigDict(frozen=True)

    incident_id: str
    transaction_id: str
    detected_at: UtcDatetime
    confirmed_fraud: bool = False
    amount: float = 0.0
    description: str = ""


class UserProfile(BaseModel):
    """Behavioral history for one user. Replaced whole, never edited in place."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    avg_transaction_value: float = 0.0
    total_transactions: int = Field(default=0, ge=0)
    first_transaction_at: UtcDatetime | None = None
    last_transaction_at: UtcDatetime | None = None
    # Most recent last
    common_locations: tuple[Location, ...] = ()
    common_merchants: frozenset[str] = frozenset()
    fraud_history: tuple[FraudIncident, ...] = ()
    trusted_devices: frozenset[str] = frozenset()


class BlacklistEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    entity_type: str
    value: str
    reason: str = ""
    added_at: UtcDatetime = Field(default_factory=lambda: datetime.now(UTC))
    expires_at: UtcDatetime | None = None
    is_active: bool = True

    def is_effective(self, at: datetime) -> bool:
        """Active and not expired at the given instant."""
        if not self.is_active:
            return False
        return self.expires_at is None or self.expires_at > at


class RuleResult(BaseModel):
    rule_id: str
    rule_name: str
    triggered: bool
    score: int = Field(default=0, ge=0)
    description: str = ""
    details: dict = Field(default_factory=dict)


class GeoVelocity(BaseModel):
    previous_location: Location
    current_location: Location
    distance_km: float
    hours: float
    speed_kmh: float
    is_possible: bool


class FraudAnalysisResult(BaseModel):
    transaction_id: str
    risk_score: int = Field(ge=0, le=100)
    risk_level: RiskLevel
    decision: Decision
    reasons: list[str] = []
    rules_triggered: list[str] = []
    details: dict = Field(default_factory=dict)
    analyzed_at: datetime
    processing_time_ms: float = 0.0


class TransactionAnalytics(BaseModel):
    user_id: str
    total_transactions: int = 0
    average_amount: float = 0.0
    fraud_count: int = 0
    fraud_rate: float = 0.0
    last_transaction_at: UtcDatetime | None = None
