"""Unit tests for great-circle distance and travel speed."""

import math

from antifraud.domains.fraud.geo import EARTH_RADIUS_KM, geo_velocity, haversine
from tests.conftest import LONDON, SAO_PAULO


class TestHaversine:
    def test_same_point(self):
        assert haversine(0, 0, 0, 0) == 0
        assert haversine(-23.5505, -46.6333, -23.5505, -46.6333) == 0

    def test_known_distance(self):
        # NYC to London ~5570 km
        d = haversine(40.7128, -74.0060, 51.5074, -0.1278)
        assert 5500 < d < 5650

    def test_sao_paulo_to_london(self):
        d = haversine(SAO_PAULO.latitude, SAO_PAULO.longitude, LONDON.latitude, LONDON.longitude)
        assert 9400 < d < 9600

    def test_symmetric(self):
        a = haversine(10.0, 20.0, -30.0, 140.0)
        b = haversine(-30.0, 140.0, 10.0, 20.0)
        assert math.isclose(a, b)

    def test_antipodal(self):
        d = haversine(0, 0, 0, 180)
        assert math.isclose(d, math.pi * EARTH_RADIUS_KM, rel_tol=1e-9)

    def test_pole_to_pole(self):
        d = haversine(90, 0, -90, 0)
        assert math.isclose(d, math.pi * EARTH_RADIUS_KM, rel_tol=1e-9)

    def test_near_zero_distance(self):
        d = haversine(10.0, 10.0, 10.0000001, 10.0)
        assert 0 < d < 0.001


class TestGeoVelocity:
    def test_impossible_travel(self):
        v = geo_velocity(SAO_PAULO, LONDON, hours=1.0, max_speed_kmh=900.0)
        assert v.speed_kmh > 9000
        assert not v.is_possible

    def test_possible_travel(self):
        v = geo_velocity(SAO_PAULO, LONDON, hours=12.0, max_speed_kmh=900.0)
        assert v.is_possible
        assert math.isclose(v.speed_kmh, v.distance_km / 12.0)

    def test_zero_elapsed_is_infinite(self):
        v = geo_velocity(SAO_PAULO, LONDON, hours=0.0, max_speed_kmh=900.0)
        assert v.speed_kmh == math.inf
        assert not v.is_possible
