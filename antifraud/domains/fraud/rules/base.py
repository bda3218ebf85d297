"""Abstract base class for fraud detection rules."""

from abc import ABC, abstractmethod

from ..config import FraudConfig
from ..models import RuleResult, Transaction, UserProfile


class FraudRule(ABC):
    """Base class for all fraud rules.

    Rules are pure: they read the transaction, the user's profile (``None``
    for unknown users) and the config, and never raise. A condition that
    cannot be determined evaluates to not triggered.
    """

    rule_id: str
    name: str
    description: str
    default_weight: int

    def __init__(self, weight: int | None = None, enabled: bool = True) -> None:
        self.weight = self.default_weight if weight is None else weight
        self.enabled = enabled

    @abstractmethod
    def evaluate(
        self,
        transaction: Transaction,
        profile: UserProfile | None,
        config: FraudConfig,
    ) -> RuleResult:
        """Evaluate this rule and return a RuleResult."""
        ...

    def _not_triggered(self, details: dict | None = None) -> RuleResult:
        """Convenience: return a non-triggered result for this rule."""
        return RuleResult(
            rule_id=self.rule_id,
            rule_name=self.name,
            triggered=False,
            score=0,
            description=self.description,
            details=details or {},
        )

    def _triggered(self, score: int | None = None, details: dict | None = None) -> RuleResult:
        """Convenience: return a triggered result, scoring the full weight by default."""
        return RuleResult(
            rule_id=self.rule_id,
            rule_name=self.name,
            triggered=True,
            score=self.weight if score is None else score,
            description=self.description,
            details=details or {},
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(weight={self.weight}, enabled={self.enabled})"
