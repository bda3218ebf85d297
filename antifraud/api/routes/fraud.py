"""Transaction analysis and analytics endpoints."""

import uuid
from datetime import UTC, datetime
from decimal import Decimal

import structlog
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from antifraud.domains.fraud.models import (
    DeviceInfo,
    FraudAnalysisResult,
    Location,
    Transaction,
    TransactionAnalytics,
)
from antifraud.domains.fraud.service import FraudDecisionService
from antifraud.domains.fraud.stores import InMemoryBlacklistStore, InMemoryProfileStore

logger = structlog.get_logger()
router = APIRouter(prefix="/api/v1", tags=["fraud"])

profile_store = InMemoryProfileStore()
blacklist_store = InMemoryBlacklistStore()
_service = FraudDecisionService(profile_store, blacklist_store)


def get_fraud_service() -> FraudDecisionService:
    return _service


class AnalyzeTransactionRequest(BaseModel):
    transaction_id: str | None = None
    user_id: str = Field(min_length=1)
    amount: Decimal = Field(gt=0)
    currency: str = Field(min_length=1)
    merchant: str = Field(min_length=1)
    location: Location
    device_info: DeviceInfo | None = None
    card_last4: str | None = None
    card_type: str | None = None
    description: str | None = None

    def to_transaction(self) -> Transaction:
        return Transaction(
            transaction_id=self.transaction_id or f"TXN-{uuid.uuid4()}",
            user_id=self.user_id,
            amount=self.amount,
            currency=self.currency,
            merchant=self.merchant,
            location=self.location,
            device_info=self.device_info,
            timestamp=datetime.now(UTC),
            card_last4=self.card_last4,
            card_type=self.card_type,
            description=self.description,
        )


@router.post("/transaction/analyze")
async def analyze_transaction(
    request: AnalyzeTransactionRequest,
    service: FraudDecisionService = Depends(get_fraud_service),  # noqa: B008
) -> FraudAnalysisResult:
    return service.analyze_transaction(request.to_transaction())


@router.get("/analytics/{user_id}")
async def get_analytics(
    user_id: str,
    service: FraudDecisionService = Depends(get_fraud_service),  # noqa: B008
) -> TransactionAnalytics:
    return service.get_transaction_analytics(user_id)


@router.get("/rules")
async def list_rules(
    service: FraudDecisionService = Depends(get_fraud_service),  # noqa: B008
) -> dict:
    """Return the registered rules in evaluation order with the risk thresholds."""
    rules_info = [
        {
            "rule_id": rule.rule_id,
            "name": rule.name,
            "weight": rule.weight,
            "enabled": rule.enabled,
        }
        for rule in service.rule_engine.rules
    ]
    risk = service.config.risk
    return {
        "rule_count": len(rules_info),
        "rules": rules_info,
        "risk_thresholds": {"low_max": risk.low_max, "medium_max": risk.medium_max},
    }
