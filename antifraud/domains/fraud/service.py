"""Fraud decisioning pipeline: blacklist -> profile -> rules -> decision."""

import time
from datetime import UTC, datetime

import structlog

from .config import FraudConfig, default_config
from .errors import ProfileNotFoundError
from .models import (
    Decision,
    EntityType,
    FraudAnalysisResult,
    RiskLevel,
    Transaction,
    TransactionAnalytics,
    UserProfile,
)
from .rules_engine import RuleEngine, get_decision, get_risk_level
from .stores import BlacklistStore, ProfileStore

logger = structlog.get_logger()

BLACKLIST_REASON = "Entity on blacklist"
BLACKLIST_RULE_NAME = "Blacklist Check"
BLACKLIST_SCORE = 100


class FraudDecisionService:
    """Orchestrates fraud analysis for single transactions.

    Stores are injected; the service never seeds or mutates them. Store
    errors other than a missing profile propagate to the caller.
    """

    def __init__(
        self,
        profile_store: ProfileStore,
        blacklist_store: BlacklistStore,
        rule_engine: RuleEngine | None = None,
        config: FraudConfig | None = None,
    ) -> None:
        self._config = config or (rule_engine.config if rule_engine else default_config)
        self._profiles = profile_store
        self._blacklist = blacklist_store
        self._rule_engine = rule_engine or RuleEngine(config=self._config)

    @property
    def rule_engine(self) -> RuleEngine:
        return self._rule_engine

    @property
    def config(self) -> FraudConfig:
        return self._config

    def analyze_transaction(self, transaction: Transaction) -> FraudAnalysisResult:
        """Score a transaction and decide whether to approve, review or block it."""
        start = time.perf_counter()

        if transaction.timestamp is None:
            transaction = transaction.model_copy(update={"timestamp": datetime.now(UTC)})

        # 1. Blacklist short-circuit
        blocked_by = self._check_blacklist(transaction)
        if blocked_by is not None:
            result = self._blocked_result(transaction, blocked_by, start)
            logger.warning(
                "transaction_blacklisted",
                transaction_id=transaction.transaction_id,
                user_id=transaction.user_id,
                entity_type=blocked_by.value,
            )
            return result

        # 2. Profile lookup; unknown users are scored without history
        profile = self._get_profile(transaction.user_id)

        # 3. Rules and score
        triggered = self._rule_engine.evaluate_all(transaction, profile)
        score = self._rule_engine.calculate_total_score(triggered)

        # 4. Risk level and decision
        risk_level = get_risk_level(score, self._config)
        decision = get_decision(risk_level)

        result = FraudAnalysisResult(
            transaction_id=transaction.transaction_id,
            risk_score=score,
            risk_level=risk_level,
            decision=decision,
            reasons=[r.description for r in triggered],
            rules_triggered=[r.rule_name for r in triggered],
            details={
                "user_id": transaction.user_id,
                "amount": transaction.amount_float,
                "merchant": transaction.merchant,
                "known_user": profile is not None,
            },
            analyzed_at=datetime.now(UTC),
            processing_time_ms=_elapsed_ms(start),
        )

        logger.info(
            "transaction_analyzed",
            transaction_id=transaction.transaction_id,
            risk_score=score,
            risk_level=risk_level.value,
            decision=decision.value,
            rules_triggered=result.rules_triggered,
            processing_time_ms=result.processing_time_ms,
        )
        return result

    def get_transaction_analytics(self, user_id: str) -> TransactionAnalytics:
        """Summarize a user's history. Unknown users get zeroed analytics."""
        profile = self._get_profile(user_id)
        if profile is None:
            return TransactionAnalytics(user_id=user_id)

        fraud_count = len(profile.fraud_history)
        fraud_rate = 0.0
        if profile.total_transactions > 0:
            fraud_rate = fraud_count / profile.total_transactions * 100

        return TransactionAnalytics(
            user_id=user_id,
            total_transactions=profile.total_transactions,
            average_amount=profile.avg_transaction_value,
            fraud_count=fraud_count,
            fraud_rate=fraud_rate,
            last_transaction_at=profile.last_transaction_at,
        )

    def _get_profile(self, user_id: str) -> UserProfile | None:
        try:
            return self._profiles.get_user_profile(user_id)
        except ProfileNotFoundError:
            logger.debug("profile_not_found", user_id=user_id)
            return None

    def _check_blacklist(self, transaction: Transaction) -> EntityType | None:
        """Return the first blacklisted entity type, checked user -> card -> ip -> device."""
        candidates = [
            (EntityType.USER, transaction.user_id),
            (EntityType.CARD, transaction.card_last4),
            (EntityType.IP, transaction.location.ip_address),
            (
                EntityType.DEVICE,
                transaction.device_info.device_id if transaction.device_info else None,
            ),
        ]
        for entity_type, value in candidates:
            if value and self._blacklist.is_blacklisted(entity_type.value, value):
                return entity_type
        return None

    def _blocked_result(
        self,
        transaction: Transaction,
        entity_type: EntityType,
        start: float,
    ) -> FraudAnalysisResult:
        return FraudAnalysisResult(
            transaction_id=transaction.transaction_id,
            risk_score=BLACKLIST_SCORE,
            risk_level=RiskLevel.HIGH,
            decision=Decision.BLOCKED,
            reasons=[BLACKLIST_REASON],
            rules_triggered=[BLACKLIST_RULE_NAME],
            details={
                "blocked_reason": BLACKLIST_REASON,
                "entity_type": entity_type.value,
            },
            analyzed_at=datetime.now(UTC),
            processing_time_ms=_elapsed_ms(start),
        )


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 3)
