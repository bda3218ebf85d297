"""Rule-based fraud detection engine with additive, capped scoring."""

from collections.abc import Iterable

import structlog

from .config import FraudConfig, default_config
from .models import Decision, RiskLevel, RuleResult, Transaction, UserProfile
from .rules import FraudRule, default_rules

logger = structlog.get_logger()


def get_risk_level(score: int, config: FraudConfig | None = None) -> RiskLevel:
    thresholds = (config or default_config).risk
    if score <= thresholds.low_max:
        return RiskLevel.LOW
    if score <= thresholds.medium_max:
        return RiskLevel.MEDIUM
    return RiskLevel.HIGH


_LEVEL_DECISIONS = {
    RiskLevel.LOW: Decision.APPROVED,
    RiskLevel.MEDIUM: Decision.REVIEW,
    RiskLevel.HIGH: Decision.BLOCKED,
}


def get_decision(risk_level: RiskLevel) -> Decision:
    return _LEVEL_DECISIONS.get(risk_level, Decision.REVIEW)


class RuleEngine:
    """Evaluates a transaction against an ordered set of fraud rules.

    Scoring is additive:
    1. Run every enabled rule in registration order
    2. Keep triggered results, preserving that order
    3. Total = sum of rule scores, capped at ``config.risk.max_score``
    """

    def __init__(
        self,
        rules: Iterable[FraudRule] | None = None,
        config: FraudConfig | None = None,
    ) -> None:
        self._rules = list(rules) if rules is not None else default_rules()
        self._config = config or default_config
        logger.info("rule_engine_initialized", rule_count=len(self._rules))

    @property
    def rules(self) -> list[FraudRule]:
        return list(self._rules)

    @property
    def config(self) -> FraudConfig:
        return self._config

    def evaluate_all(
        self,
        transaction: Transaction,
        profile: UserProfile | None,
    ) -> list[RuleResult]:
        """Evaluate all enabled rules. Returns triggered results in rule order."""
        triggered: list[RuleResult] = []
        for rule in self._rules:
            if not rule.enabled:
                continue
            result = rule.evaluate(transaction, profile, self._config)
            if result.triggered:
                triggered.append(result)

        logger.debug(
            "rules_evaluated",
            transaction_id=transaction.transaction_id,
            triggered=[r.rule_id for r in triggered],
        )
        return triggered

    def calculate_total_score(self, results: Iterable[RuleResult]) -> int:
        total = sum(r.score for r in results)
        return max(0, min(total, self._config.risk.max_score))
