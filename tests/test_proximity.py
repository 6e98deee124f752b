import math

import pytest

from destination_lookup.domain.models import Destination
from destination_lookup.ranking import (
    closest_destinations,
    distance_between,
    haversine_km,
)

# One degree of arc on a 6371 km sphere
ONE_DEGREE_KM = 2 * math.pi * 6371 / 360


def _at(id_, lat, lon, name=None):
    return Destination(id=id_, name=name or f"D{id_}", latitude=lat, longitude=lon)


class TestHaversine:
    def test_same_point_is_zero(self):
        assert haversine_km(48.8566, 2.3522, 48.8566, 2.3522) == 0.0

    def test_is_symmetric(self):
        paris_london = haversine_km(48.8566, 2.3522, 51.5074, -0.1278)
        london_paris = haversine_km(51.5074, -0.1278, 48.8566, 2.3522)

        assert paris_london == pytest.approx(london_paris)

    def test_paris_london(self):
        assert haversine_km(48.8566, 2.3522, 51.5074, -0.1278) == pytest.approx(
            343.5, abs=1.0
        )

    def test_one_degree_along_equator(self):
        assert haversine_km(0, 0, 0, 1) == pytest.approx(ONE_DEGREE_KM)

    def test_antipodes_are_half_circumference(self):
        assert haversine_km(0, 0, 0, 180) == pytest.approx(math.pi * 6371)

    def test_never_negative(self):
        points = [(0, 0), (-33.9, 151.2), (64.1, -21.9), (90, 0), (-90, 45)]
        for lat1, lon1 in points:
            for lat2, lon2 in points:
                assert haversine_km(lat1, lon1, lat2, lon2) >= 0

    def test_custom_radius(self):
        assert haversine_km(0, 0, 0, 1, radius_km=1.0) == pytest.approx(
            math.radians(1)
        )

    def test_distance_between_destinations(self):
        a = _at(1, 0, 0)
        b = _at(2, 0, 1)

        assert distance_between(a, b) == pytest.approx(ONE_DEGREE_KM)


class TestClosestDestinations:
    def test_excludes_reference_and_sorts_ascending(self):
        reference = _at(1, 0, 0)
        far = _at(2, 0, 100 / ONE_DEGREE_KM)  # ~100 km
        near = _at(3, 0, 50 / ONE_DEGREE_KM)  # ~50 km

        ranked = closest_destinations(reference, [reference, far, near])

        assert [r.destination.id for r in ranked] == [3, 2]
        assert ranked[0].distance_km == pytest.approx(50)
        assert ranked[1].distance_km == pytest.approx(100)

    def test_limits_to_five(self):
        reference = _at(0, 0, 0)
        options = [reference] + [_at(i, 0, i) for i in range(1, 9)]

        ranked = closest_destinations(reference, options)

        assert len(ranked) == 5
        assert [r.destination.id for r in ranked] == [1, 2, 3, 4, 5]

    def test_returns_all_when_fewer_than_limit(self):
        reference = _at(0, 0, 0)
        options = [_at(1, 0, 2), _at(2, 0, 1)]

        ranked = closest_destinations(reference, options)

        assert [r.destination.id for r in ranked] == [2, 1]

    def test_reference_absent_from_options(self):
        reference = _at(99, 0, 0)
        options = [_at(i, 0, i) for i in range(1, 4)]

        ranked = closest_destinations(reference, options)

        assert len(ranked) == 3

    def test_output_length_property(self):
        reference = _at(0, 10, 10)
        for size in range(0, 9):
            others = [_at(i, i, -i) for i in range(1, size + 1)]

            with_reference = closest_destinations(reference, [reference] + others)
            without_reference = closest_destinations(reference, others)

            assert len(with_reference) == min(5, size)
            assert len(without_reference) == min(5, size)
            assert all(r.destination.id != reference.id for r in with_reference)
            distances = [r.distance_km for r in with_reference]
            assert distances == sorted(distances)

    def test_ties_keep_option_order(self):
        reference = _at(0, 0, 0)
        east = _at(1, 0, 1)
        west = _at(2, 0, -1)
        north = _at(3, 1, 0)

        ranked = closest_destinations(reference, [west, north, east])

        assert [r.destination.id for r in ranked] == [2, 3, 1]

    def test_matches_on_id_not_equality(self):
        reference = _at(1, 0, 0, name="Paris")
        same_id_other_fields = _at(1, 5, 5, name="Paris (detail)")
        other = _at(2, 0, 1)

        ranked = closest_destinations(reference, [same_id_other_fields, other])

        assert [r.destination.id for r in ranked] == [2]

    def test_custom_limit(self):
        reference = _at(0, 0, 0)
        options = [_at(i, 0, i) for i in range(1, 5)]

        assert len(closest_destinations(reference, options, limit=2)) == 2
        assert len(closest_destinations(reference, options, limit=None)) == 4
        assert closest_destinations(reference, options, limit=0) == []

    def test_negative_limit_is_rejected(self):
        with pytest.raises(ValueError):
            closest_destinations(_at(0, 0, 0), [], limit=-1)
