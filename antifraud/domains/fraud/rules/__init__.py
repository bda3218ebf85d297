"""Fraud detection rules package.

Exports default_rules() (fresh rule instances in registration order) and
the individual rule classes for direct use.
"""

from .amount import HighAmountRule, NewUserRule
from .base import FraudRule
from .geo import GeoVelocityRule
from .patterns import RoundAmountRule
from .velocity import MultipleFailedAttemptsRule, UnusualHourRule, VelocityRule


def default_rules() -> list[FraudRule]:
    """Fresh rule instances in evaluation order."""
    return [
        HighAmountRule(),
        VelocityRule(),
        GeoVelocityRule(),
        UnusualHourRule(),
        NewUserRule(),
        RoundAmountRule(),
        MultipleFailedAttemptsRule(),
    ]


__all__ = [
    "FraudRule",
    "default_rules",
    "HighAmountRule",
    "VelocityRule",
    "GeoVelocityRule",
    "UnusualHourRule",
    "NewUserRule",
    "RoundAmountRule",
    "MultipleFailedAttemptsRule",
]
