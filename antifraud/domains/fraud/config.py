"""Fraud detection configuration with sensible defaults."""

import os
from dataclasses import dataclass, field


@dataclass
class AmountThresholds:
    high_amount_threshold: float = 10_000.0
    high_amount_full_factor: float = 5.0
    high_amount_partial_factor: float = 3.0
    high_amount_partial_multiplier: float = 0.8
    high_amount_base_multiplier: float = 0.6
    round_amount_min: int = 5_000
    round_amount_multiple: int = 1_000


@dataclass
class VelocityThresholds:
    min_interval_minutes: int = 5


@dataclass
class GeoThresholds:
    impossible_travel_speed_kmh: float = 900.0
    min_distance_km: float = 100.0


@dataclass
class TimeThresholds:
    night_hour_start: int = 23
    night_hour_end: int = 5


@dataclass
class NewUserThresholds:
    unknown_user_amount: float = 3_000.0
    young_account_amount: float = 5_000.0
    young_account_days: int = 7


@dataclass
class RiskThresholds:
    low_max: int = 30
    medium_max: int = 70
    max_score: int = 100


@dataclass
class FraudConfig:
    amount: AmountThresholds = field(default_factory=AmountThresholds)
    velocity: VelocityThresholds = field(default_factory=VelocityThresholds)
    geo: GeoThresholds = field(default_factory=GeoThresholds)
    time: TimeThresholds = field(default_factory=TimeThresholds)
    new_user: NewUserThresholds = field(default_factory=NewUserThresholds)
    risk: RiskThresholds = field(default_factory=RiskThresholds)

    @classmethod
    def from_env(cls) -> "FraudConfig":
        """Load config with env var overrides. Env vars use FRAUD_ prefix."""
        config = cls()

        # Amount overrides
        if v := os.getenv("FRAUD_HIGH_AMOUNT_THRESHOLD"):
            config.amount.high_amount_threshold = float(v)
        if v := os.getenv("FRAUD_ROUND_AMOUNT_MIN"):
            config.amount.round_amount_min = int(v)

        # Velocity / geo overrides
        if v := os.getenv("FRAUD_VELOCITY_INTERVAL_MINUTES"):
            config.velocity.min_interval_minutes = int(v)
        if v := os.getenv("FRAUD_GEO_VELOCITY_LIMIT_KMH"):
            config.geo.impossible_travel_speed_kmh = float(v)

        # Night window overrides
        if v := os.getenv("FRAUD_NIGHT_HOUR_START"):
            config.time.night_hour_start = int(v)
        if v := os.getenv("FRAUD_NIGHT_HOUR_END"):
            config.time.night_hour_end = int(v)

        # Risk tier overrides
        if v := os.getenv("FRAUD_RISK_LOW_MAX"):
            config.risk.low_max = int(v)
        if v := os.getenv("FRAUD_RISK_MEDIUM_MAX"):
            config.risk.medium_max = int(v)

        return config


# Module-level default instance
default_config = FraudConfig()
