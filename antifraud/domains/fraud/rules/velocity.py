"""Timing-based fraud detection rules."""

from datetime import timedelta

from ..config import FraudConfig
from ..models import RuleResult, Transaction, UserProfile
from .base import FraudRule


class VelocityRule(FraudRule):
    """Triggers when the previous transaction happened moments ago."""

    rule_id = "velocity_rule"
    name = "Transaction Velocity"
    description = "Multiple transactions in a short period"
    default_weight = 20

    def evaluate(
        self,
        transaction: Transaction,
        profile: UserProfile | None,
        config: FraudConfig,
    ) -> RuleResult:
        if profile is None or profile.last_transaction_at is None or transaction.timestamp is None:
            return self._not_triggered()

        window = timedelta(minutes=config.velocity.min_interval_minutes)
        elapsed = transaction.timestamp - profile.last_transaction_at
        if elapsed >= window:
            return self._not_triggered()

        return self._triggered(
            details={
                "seconds_since_last": elapsed.total_seconds(),
                "window_minutes": config.velocity.min_interval_minutes,
            }
        )


class UnusualHourRule(FraudRule):
    """Triggers for transactions during the night window (23:00-05:59)."""

    rule_id = "unusual_hour_rule"
    name = "Unusual Hour Transaction"
    description = "Transaction made at an unusual hour"
    default_weight = 10

    def evaluate(
        self,
        transaction: Transaction,
        profile: UserProfile | None,
        config: FraudConfig,
    ) -> RuleResult:
        if transaction.timestamp is None:
            return self._not_triggered()

        hour = transaction.timestamp.hour
        window = config.time
        if not (hour >= window.night_hour_start or hour <= window.night_hour_end):
            return self._not_triggered({"hour": hour})

        return self._triggered(details={"hour": hour})


class MultipleFailedAttemptsRule(FraudRule):
    """Placeholder for failed-attempt detection.

    No failed-attempt history is recorded anywhere, so this rule never
    triggers. It stays registered so its id and weight are visible in the
    rule catalog.
    """

    rule_id = "multiple_failed_attempts_rule"
    name = "Multiple Failed Attempts"
    description = "Multiple failed attempts detected"
    default_weight = 25

    def evaluate(
        self,
        transaction: Transaction,
        profile: UserProfile | None,
        config: FraudConfig,
    ) -> RuleResult:
        return self._not_triggered()
