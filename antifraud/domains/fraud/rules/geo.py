"""Geography-based fraud detection rules."""

from ..config import FraudConfig
from ..geo import geo_velocity
from ..models import RuleResult, Transaction, UserProfile
from .base import FraudRule


class GeoVelocityRule(FraudRule):
    """Triggers when reaching the current location from the last one is impossible."""

    rule_id = "geo_velocity_rule"
    name = "Geographical Velocity"
    description = "Impossible geographic change detected"
    default_weight = 30

    def evaluate(
        self,
        transaction: Transaction,
        profile: UserProfile | None,
        config: FraudConfig,
    ) -> RuleResult:
        if (
            profile is None
            or not profile.common_locations
            or profile.last_transaction_at is None
            or transaction.timestamp is None
        ):
            return self._not_triggered()

        hours = (transaction.timestamp - profile.last_transaction_at).total_seconds() / 3600
        # Zero or negative elapsed time cannot be turned into a speed
        if hours <= 0:
            return self._not_triggered()

        velocity = geo_velocity(
            profile.common_locations[-1],
            transaction.location,
            hours,
            config.geo.impossible_travel_speed_kmh,
        )
        evidence = {
            "distance_km": velocity.distance_km,
            "hours": velocity.hours,
            "speed_kmh": velocity.speed_kmh,
            "max_speed_kmh": config.geo.impossible_travel_speed_kmh,
        }

        if velocity.is_possible or velocity.distance_km <= config.geo.min_distance_km:
            return self._not_triggered(evidence)

        return self._triggered(details=evidence)
