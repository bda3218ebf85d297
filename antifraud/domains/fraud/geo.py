"""Great-circle distance and travel-speed helpers."""

import math

from .models import GeoVelocity, Location

EARTH_RADIUS_KM = 6371.0


def haversine(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate distance in km between two lat/lon points."""
    lat1_r, lon1_r = math.radians(lat1), math.radians(lon1)
    lat2_r, lon2_r = math.radians(lat2), math.radians(lon2)
    dlat = lat2_r - lat1_r
    dlon = lon2_r - lon1_r
    a = math.sin(dlat / 2) ** 2 + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlon / 2) ** 2
    # Floating-point overshoot near antipodes can push a outside [0, 1]
    a = min(max(a, 0.0), 1.0)
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(a))


def geo_velocity(
    previous: Location,
    current: Location,
    hours: float,
    max_speed_kmh: float,
) -> GeoVelocity:
    """Speed needed to travel from ``previous`` to ``current`` in ``hours``.

    A non-positive elapsed time yields an infinite speed; callers decide
    whether that counts as impossible travel.
    """
    distance_km = haversine(
        previous.latitude, previous.longitude, current.latitude, current.longitude
    )
    speed_kmh = distance_km / hours if hours > 0 else math.inf
    return GeoVelocity(
        previous_location=previous,
        current_location=current,
        distance_km=distance_km,
        hours=hours,
        speed_kmh=speed_kmh,
        is_possible=speed_kmh <= max_speed_kmh,
    )
