# hotel_search/services/hotel_service.py
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Union

from hotel_search.db.store import HotelRow, HotelStore
from hotel_search.schemas.hotel import Address, Hotel, HotelMetadata, ReviewStats
from hotel_search.schemas.room import Room
from hotel_search.schemas.search import SearchFilter
from hotel_search.services.errors import NoMatchError, StoreError
from hotel_search.services.geo import compute_distance, parse_coordinate
from hotel_search.services.room_service import RoomService
from hotel_search.services.timers import NullTimers, Timers

logger = logging.getLogger(__name__)

# logical field -> wp_usermeta key
ADDRESS_KEYS = {
    "address_1": "address_1",
    "address_2": "address_2",
    "address_city": "address_city",
    "address_zip": "address_zip",
    "address_country": "address_country",
}
CONTACT_KEYS = {
    "geo_lat": "geo_lat",
    "geo_lng": "geo_lng",
    "image_url": "coverImage",
    "phone": "phone",
}
HOTEL_META_KEYS = tuple(ADDRESS_KEYS.values()) + tuple(CONTACT_KEYS.values())


# ---------- per-hotel outcome ----------

@dataclass(frozen=True)
class Match:
    hotel: Hotel


@dataclass(frozen=True)
class NoMatch:
    hotel_id: int
    reason: str


EnrichmentResult = Union[Match, NoMatch]


# ---------- room predicates ----------

def room_matches(room: Room, filters: SearchFilter) -> bool:
    """
    Check every filter predicate against the loaded room.
    A room missing a value that a predicate needs does not match.
    """
    if room.price is None:
        return False
    price = int(room.price)  # truncation toward zero, not rounding

    surface = filters.surface
    if surface.min is not None or surface.max is not None:
        if room.surface is None:
            return False
        if surface.min is not None and room.surface < surface.min:
            return False
        if surface.max is not None and room.surface > surface.max:
            return False

    if filters.price.min is not None and price < filters.price.min:
        return False
    if filters.price.max is not None and price > filters.price.max:
        return False

    if filters.rooms is not None:
        if room.bedrooms_count is None or room.bedrooms_count < filters.rooms:
            return False

    if filters.bath_rooms is not None:
        if room.bathrooms_count is None or room.bathrooms_count < filters.bath_rooms:
            return False

    if filters.types and room.type not in filters.types:
        return False

    return True


def pick_cheapest(rooms: Iterable[Room]) -> Optional[Room]:
    """Lowest truncated price; on a tie the first room seen wins."""
    cheapest: Optional[Room] = None
    for room in rooms:
        if cheapest is None or int(room.price) < int(cheapest.price):
            cheapest = room
    return cheapest


# ---------- service ----------

class HotelService:
    """
    Lists hotels matching a SearchFilter, each with its cheapest qualifying room,
    review score and (when asked for) distance to a reference point.
    """

    def __init__(
        self,
        store: HotelStore,
        room_service: RoomService | None = None,
        timers: Timers | None = None,
        max_workers: int = 1,
    ):
        if max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        self.store = store
        self.room_service = room_service or RoomService(store)
        self.timers = timers or NullTimers()
        self.max_workers = max_workers

    def get_metas(self, hotel_id: int) -> HotelMetadata:
        with self.timers.timer("get_metas"):
            raw = self.store.get_attributes(hotel_id, HOTEL_META_KEYS)
        return HotelMetadata(
            address=Address(**{field: raw.get(key) for field, key in ADDRESS_KEYS.items()}),
            **{field: raw.get(key) for field, key in CONTACT_KEYS.items()},
        )

    def get_reviews(self, hotel_id: int) -> ReviewStats:
        with self.timers.timer("get_reviews"):
            return self.store.get_review_stats(hotel_id)

    def get_cheapest_room(self, hotel_id: int, filters: SearchFilter) -> Room:
        """
        Cheapest room of one hotel satisfying the filter.
        Raises NoMatchError when no room qualifies.
        """
        with self.timers.timer("get_cheapest_room"):
            candidates = []
            for room_id in self.store.find_room_ids(hotel_id, filters):
                room = self.room_service.get(room_id)
                if room is not None and room_matches(room, filters):
                    candidates.append(room)

            cheapest = pick_cheapest(candidates)
        if cheapest is None:
            raise NoMatchError("No room matches the filter", hotel_id=hotel_id)
        return cheapest

    def build_hotel(self, row: HotelRow, filters: SearchFilter) -> Hotel:
        """
        Assemble one Hotel from its catalog row.
        Raises NoMatchError if it has no qualifying room or lies outside the search radius.
        """
        metas = self.get_metas(row.id)
        reviews = self.get_reviews(row.id)
        hotel = Hotel(
            id=row.id,
            name=row.display_name,
            address=metas.address,
            geo_lat=metas.geo_lat,
            geo_lng=metas.geo_lng,
            image_url=metas.image_url,
            phone=metas.phone,
            rating=reviews.rating,
            rating_count=reviews.count,
        )

        hotel.cheapest_room = self.get_cheapest_room(row.id, filters)

        if filters.has_distance_bound:
            lat = parse_coordinate(hotel.geo_lat)
            lng = parse_coordinate(hotel.geo_lng)
            if lat is None or lng is None:
                raise NoMatchError("Hotel has no coordinates", hotel_id=row.id)
            hotel.distance = compute_distance(filters.lat, filters.lng, lat, lng)
            if hotel.distance > filters.distance:
                raise NoMatchError("Hotel is outside the search radius", hotel_id=row.id)

        return hotel

    def enrich(self, row: HotelRow, filters: SearchFilter) -> EnrichmentResult:
        try:
            return Match(self.build_hotel(row, filters))
        except NoMatchError as e:
            return NoMatch(hotel_id=row.id, reason=str(e))

    def list(self, filters: SearchFilter | Mapping[str, Any] | None = None) -> list[Hotel]:
        """
        Hotels matching the filter, in catalog order.
        StoreError aborts the whole call; hotels that do not match are simply left out.
        """
        if filters is None:
            filters = SearchFilter()
        elif not isinstance(filters, SearchFilter):
            filters = SearchFilter.model_validate(filters)

        with self.timers.timer("list"):
            rows = self.store.list_hotel_rows()
            outcomes = self._enrich_all(rows, filters)

        results: list[Hotel] = []
        for outcome in outcomes:
            if isinstance(outcome, NoMatch):
                logger.debug("Hotel %s excluded: %s", outcome.hotel_id, outcome.reason)
                continue
            results.append(outcome.hotel)

        logger.info("Hotel search matched %d of %d hotels", len(results), len(rows))
        return results

    def _enrich_all(self, rows: list[HotelRow], filters: SearchFilter) -> list[EnrichmentResult]:
        if self.max_workers == 1 or len(rows) < 2:
            return [self.enrich(row, filters) for row in rows]

        with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="hotel-enrich") as pool:
            futures = [pool.submit(self.enrich, row, filters) for row in rows]
            try:
                # futures stay in catalog order
                return [f.result() for f in futures]
            except StoreError:
                for f in futures:
                    f.cancel()
                raise
