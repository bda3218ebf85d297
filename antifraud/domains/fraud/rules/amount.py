"""Amount-based fraud detection rules."""

from datetime import timedelta

from ..config import FraudConfig
from ..models import RuleResult, Transaction, UserProfile
from .base import FraudRule


class HighAmountRule(FraudRule):
    """Triggers for single transactions above the high-amount threshold.

    Partial credit by how far the amount exceeds the threshold: the full
    weight above 5x, 80% above 3x, 60% otherwise. Fractions are truncated.
    """

    rule_id = "high_amount_rule"
    name = "High Amount Transaction"
    description = "Transaction amount above the normal limit"
    default_weight = 25

    def evaluate(
        self,
        transaction: Transaction,
        profile: UserProfile | None,
        config: FraudConfig,
    ) -> RuleResult:
        amount = transaction.amount_float
        thresholds = config.amount
        threshold = thresholds.high_amount_threshold
        details = {"amount": amount, "threshold": threshold}

        if amount <= threshold:
            return self._not_triggered(details)

        factor = amount / threshold
        if factor > thresholds.high_amount_full_factor:
            score = self.weight
        elif factor > thresholds.high_amount_partial_factor:
            score = int(self.weight * thresholds.high_amount_partial_multiplier)
        else:
            score = int(self.weight * thresholds.high_amount_base_multiplier)

        return self._triggered(score=score, details={**details, "factor": factor})


class NewUserRule(FraudRule):
    """Triggers for high-value transactions from unknown or young accounts."""

    rule_id = "new_user_rule"
    name = "New User High Transaction"
    description = "New user with a high-value transaction"
    default_weight = 15

    def evaluate(
        self,
        transaction: Transaction,
        profile: UserProfile | None,
        config: FraudConfig,
    ) -> RuleResult:
        limits = config.new_user
        amount = transaction.amount_float

        if profile is None:
            if amount > limits.unknown_user_amount:
                return self._triggered(details={"amount": amount, "known_user": False})
            return self._not_triggered()

        if profile.first_transaction_at is None or transaction.timestamp is None:
            return self._not_triggered()

        account_age = transaction.timestamp - profile.first_transaction_at
        if account_age < timedelta(days=limits.young_account_days) and (
            amount > limits.young_account_amount
        ):
            return self._triggered(
                details={
                    "amount": amount,
                    "known_user": True,
                    "account_age_days": account_age.total_seconds() / 86400,
                }
            )
        return self._not_triggered()
