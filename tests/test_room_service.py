from hotel_search.schemas.room import Room
from hotel_search.services.room_service import RoomService


def test_get_projects_meta_rows(seed, store):
    seed.hotel(1, "Hotel A")
    room_id = seed.room(1, price="95.50", surface="31.5", bedrooms_count="2", bathrooms_count="1", type="double")

    room = RoomService(store).get(room_id)

    assert room.id == room_id
    assert room.hotel_id == 1
    assert room.price == 95.5
    assert room.surface == 31.5
    assert room.bedrooms_count == 2
    assert room.bathrooms_count == 1
    assert room.type == "double"


def test_get_tolerates_missing_and_garbage_values(seed, store):
    seed.hotel(1, "Hotel A")
    room_id = seed.room(1, price="n/a", surface="", bedrooms_count="nan")

    room = RoomService(store).get(room_id)

    assert room.price is None
    assert room.surface is None
    assert room.bedrooms_count is None
    assert room.bathrooms_count is None
    assert room.type is None


def test_get_unknown_room(store):
    assert RoomService(store).get(42) is None


def test_get_rejects_values_a_sql_cast_would_read_differently(seed, store):
    seed.hotel(1, "Hotel A")
    room_id = seed.room(1, price="1_000", surface=" 30", bedrooms_count="inf", bathrooms_count="2e0")

    room = RoomService(store).get(room_id)

    assert room.price is None
    assert room.surface is None
    assert room.bedrooms_count is None
    assert room.bathrooms_count == 2


def test_room_is_built_from_keyword_fields_only():
    assert "from_attributes" not in Room.model_config
