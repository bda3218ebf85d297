"""Unit tests for the rule engine: ordering, aggregation and risk mapping."""

from datetime import timedelta
from decimal import Decimal

import pytest

from antifraud.domains.fraud.config import FraudConfig, RiskThresholds
from antifraud.domains.fraud.models import Decision, RiskLevel, RuleResult
from antifraud.domains.fraud.rules import (
    HighAmountRule,
    RoundAmountRule,
    UnusualHourRule,
    default_rules,
)
from antifraud.domains.fraud.rules_engine import RuleEngine, get_decision, get_risk_level
from tests.conftest import LONDON, NOW, make_profile, make_transaction

CONFIG = FraudConfig()


def _result(score: int, rule_id: str = "r") -> RuleResult:
    return RuleResult(rule_id=rule_id, rule_name=rule_id, triggered=True, score=score)


class TestRuleCatalog:
    def test_registration_order(self):
        assert [r.rule_id for r in default_rules()] == [
            "high_amount_rule",
            "velocity_rule",
            "geo_velocity_rule",
            "unusual_hour_rule",
            "new_user_rule",
            "round_amount_rule",
            "multiple_failed_attempts_rule",
        ]

    def test_weights(self):
        assert [r.weight for r in default_rules()] == [25, 20, 30, 10, 15, 5, 25]

    def test_default_rules_are_fresh_instances(self):
        first, second = default_rules(), default_rules()
        assert all(a is not b for a, b in zip(first, second, strict=True))


class TestEvaluateAll:
    def test_no_triggers(self):
        engine = RuleEngine(config=CONFIG)
        results = engine.evaluate_all(make_transaction(), make_profile())
        assert results == []

    def test_only_triggered_results_in_rule_order(self):
        engine = RuleEngine(config=CONFIG)
        txn = make_transaction(amount=Decimal("15000"), timestamp=NOW.replace(hour=2))
        results = engine.evaluate_all(txn, make_profile())
        assert [r.rule_id for r in results] == [
            "high_amount_rule",
            "unusual_hour_rule",
            "round_amount_rule",
        ]
        assert all(r.triggered for r in results)

    def test_order_follows_registration_not_score(self):
        rules = [RoundAmountRule(), UnusualHourRule(), HighAmountRule()]
        engine = RuleEngine(rules=rules, config=CONFIG)
        txn = make_transaction(amount=Decimal("15000"), timestamp=NOW.replace(hour=2))
        results = engine.evaluate_all(txn, None)
        assert [r.rule_id for r in results] == [
            "round_amount_rule",
            "unusual_hour_rule",
            "high_amount_rule",
        ]

    def test_disabled_rule_is_skipped(self):
        rules = [HighAmountRule(enabled=False), RoundAmountRule()]
        engine = RuleEngine(rules=rules, config=CONFIG)
        results = engine.evaluate_all(make_transaction(amount=Decimal("20000")), None)
        assert [r.rule_id for r in results] == ["round_amount_rule"]

    def test_deterministic(self):
        engine = RuleEngine(config=CONFIG)
        profile = make_profile(last_transaction_at=NOW - timedelta(hours=1))
        txn = make_transaction(location=LONDON, amount=Decimal("12000"))
        assert engine.evaluate_all(txn, profile) == engine.evaluate_all(txn, profile)

    def test_does_not_mutate_inputs(self):
        engine = RuleEngine(config=CONFIG)
        profile = make_profile()
        txn = make_transaction(amount=Decimal("15000"))
        before = (txn.model_dump(), profile.model_dump())
        engine.evaluate_all(txn, profile)
        assert (txn.model_dump(), profile.model_dump()) == before


class TestCalculateTotalScore:
    engine = RuleEngine(config=CONFIG)

    def test_empty(self):
        assert self.engine.calculate_total_score([]) == 0

    def test_sum(self):
        assert self.engine.calculate_total_score([_result(15), _result(10), _result(5)]) == 30

    def test_clamped_at_100(self):
        assert self.engine.calculate_total_score([_result(60), _result(70)]) == 100

    def test_clamp_idempotent(self):
        over = self.engine.calculate_total_score([_result(80), _result(45)])
        exact = self.engine.calculate_total_score([_result(80), _result(20)])
        assert over == exact == 100

    def test_monotonic(self):
        base = [_result(25), _result(10)]
        assert self.engine.calculate_total_score(base + [_result(5)]) >= (
            self.engine.calculate_total_score(base)
        )

    def test_all_rules_firing_stays_bounded(self):
        engine = RuleEngine(config=CONFIG)
        night = NOW.replace(hour=3)
        profile = make_profile(
            first_transaction_at=night - timedelta(days=1),
            last_transaction_at=night - timedelta(minutes=1),
        )
        txn = make_transaction(amount=Decimal("60000"), location=LONDON, timestamp=night)
        results = engine.evaluate_all(txn, profile)
        assert len(results) == 6
        assert sum(r.score for r in results) == 105
        assert engine.calculate_total_score(results) == 100


class TestRiskMapping:
    @pytest.mark.parametrize(
        ("score", "level", "decision"),
        [
            (0, RiskLevel.LOW, Decision.APPROVED),
            (30, RiskLevel.LOW, Decision.APPROVED),
            (31, RiskLevel.MEDIUM, Decision.REVIEW),
            (70, RiskLevel.MEDIUM, Decision.REVIEW),
            (71, RiskLevel.HIGH, Decision.BLOCKED),
            (100, RiskLevel.HIGH, Decision.BLOCKED),
        ],
    )
    def test_boundaries(self, score, level, decision):
        assert get_risk_level(score, CONFIG) == level
        assert get_decision(level) == decision

    def test_default_config(self):
        assert get_risk_level(45) == RiskLevel.MEDIUM

    def test_custom_thresholds(self):
        config = FraudConfig(risk=RiskThresholds(low_max=10, medium_max=20))
        assert get_risk_level(15, config) == RiskLevel.MEDIUM
        assert get_risk_level(21, config) == RiskLevel.HIGH
