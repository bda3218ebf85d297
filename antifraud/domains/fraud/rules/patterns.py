"""Pattern-based fraud detection rules."""

from ..config import FraudConfig
from ..models import RuleResult, Transaction, UserProfile
from .base import FraudRule


class RoundAmountRule(FraudRule):
    """Triggers for large amounts that are exact multiples of 1000."""

    rule_id = "round_amount_rule"
    name = "Suspicious Round Amount"
    description = "Suspicious round amount"
    default_weight = 5

    def evaluate(
        self,
        transaction: Transaction,
        profile: UserProfile | None,
        config: FraudConfig,
    ) -> RuleResult:
        amount = transaction.amount
        limits = config.amount
        details = {"amount": transaction.amount_float}

        # Integer modulus stays exact at any magnitude
        if (
            amount >= limits.round_amount_min
            and amount == amount.to_integral_value()
            and int(amount) % limits.round_amount_multiple == 0
        ):
            return self._triggered(details=details)
        return self._not_triggered(details)
