"""Fraud decisioning domain."""

from .errors import FraudDomainError, ProfileNotFoundError, StoreUnavailableError
from .geo import haversine
from .models import (
    BlacklistEntry,
    Decision,
    DeviceInfo,
    EntityType,
    FraudAnalysisResult,
    FraudIncident,
    Location,
    RiskLevel,
    RuleResult,
    Transaction,
    TransactionAnalytics,
    UserProfile,
)
from .rules_engine import RuleEngine, get_decision, get_risk_level
from .service import FraudDecisionService
from .stores import BlacklistStore, InMemoryBlacklistStore, InMemoryProfileStore, ProfileStore

__all__ = [
    "BlacklistEntry",
    "BlacklistStore",
    "Decision",
    "DeviceInfo",
    "EntityType",
    "FraudAnalysisResult",
    "FraudDecisionService",
    "FraudDomainError",
    "FraudIncident",
    "InMemoryBlacklistStore",
    "InMemoryProfileStore",
    "Location",
    "ProfileNotFoundError",
    "ProfileStore",
    "RiskLevel",
    "RuleEngine",
    "RuleResult",
    "StoreUnavailableError",
    "Transaction",
    "TransactionAnalytics",
    "UserProfile",
    "get_decision",
    "get_risk_level",
    "haversine",
]
