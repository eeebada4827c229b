from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from hotel_search.schemas.search import SearchFilter
from hotel_search.services.hotel_service import HotelService


def test_empty_filter_has_no_bounds():
    f = SearchFilter()
    assert f.price.min is None and f.price.max is None
    assert f.surface.min is None and f.surface.max is None
    assert f.rooms is None and f.bath_rooms is None
    assert f.types == []
    assert not f.has_distance_bound


def test_legacy_request_keys_are_accepted():
    f = SearchFilter.model_validate({
        "search": "sea view",
        "lat": "46.2044",
        "lng": "6.1432",
        "distance": "20",
        "price": {"min": 50, "max": "150"},
        "surface": {"min": 20},
        "bedrooms": 2,
        "bathRooms": 1,
        "types": ["suite", "double"],
    })
    assert f.lat == pytest.approx(46.2044)
    assert f.distance == 20
    assert f.price.max == 150
    assert f.surface.min == 20 and f.surface.max is None
    assert f.rooms == 2
    assert f.bath_rooms == 1
    assert f.types == ["suite", "double"]
    assert f.has_distance_bound


def test_rooms_key_and_lowercase_bathrooms():
    f = SearchFilter.model_validate({"rooms": 3, "bathrooms": 2})
    assert f.rooms == 3
    assert f.bath_rooms == 2


def test_unknown_keys_are_ignored():
    f = SearchFilter.model_validate({"price": {"max": 100, "currency": "EUR"}, "sort": "price"})
    assert f.price.max == 100


def test_null_ranges_and_types_mean_unbounded():
    f = SearchFilter.model_validate({"price": None, "surface": None, "types": None})
    assert f.price.min is None
    assert f.types == []


def test_distance_bound_needs_all_three_fields():
    assert not SearchFilter(lat=1.0, lng=2.0).has_distance_bound
    assert not SearchFilter(lat=1.0, distance=5).has_distance_bound


def test_negative_distance_is_rejected():
    with pytest.raises(ValidationError):
        SearchFilter(lat=1.0, lng=2.0, distance=-1)


@pytest.mark.parametrize("payload", [
    {"price": {"max": "inf"}},
    {"price": {"min": "nan"}},
    {"surface": {"min": "-inf"}},
    {"lat": "nan", "lng": 2.35, "distance": 1},
    {"lat": 48.86, "lng": "inf", "distance": 1},
    {"lat": 48.86, "lng": 2.35, "distance": "inf"},
])
def test_non_finite_numbers_are_rejected(payload):
    with pytest.raises(ValidationError):
        SearchFilter.model_validate(payload)


@pytest.mark.parametrize("payload", [{"lat": 90.5}, {"lat": -91}, {"lng": 180.1}, {"lng": -200}])
def test_reference_point_out_of_range_is_rejected(payload):
    with pytest.raises(ValidationError):
        SearchFilter.model_validate(payload)


def test_non_finite_filter_fails_before_any_store_access():
    store = MagicMock()
    with pytest.raises(ValidationError):
        HotelService(store).list({"price": {"max": "inf"}})
    store.list_hotel_rows.assert_not_called()
