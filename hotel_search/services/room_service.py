# hotel_search/services/room_service.py
from __future__ import annotations

from hotel_search.db.store import HotelStore
from hotel_search.schemas.room import Room
from hotel_search.services.parsing import to_float, to_int


class RoomService:
    """Loads one room and projects its meta rows into a Room."""

    def __init__(self, store: HotelStore):
        self.store = store

    def get(self, room_id: int) -> Room | None:
        row = self.store.get_room_row(room_id)
        if row is None:
            return None
        metas = row.metas
        return Room(
            id=row.id,
            hotel_id=row.hotel_id,
            title=row.title,
            surface=to_float(metas.get("surface")),
            price=to_float(metas.get("price")),
            bedrooms_count=to_int(metas.get("bedrooms_count")),
            bathrooms_count=to_int(metas.get("bathrooms_count")),
            type=metas.get("type"),
        )
