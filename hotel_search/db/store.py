# hotel_search/db/store.py
from __future__ import annotations

import logging
import math
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Protocol

from sqlalchemy import Float, and_, cast, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, aliased, sessionmaker

from hotel_search.db.models import POST_TYPE_REVIEW, POST_TYPE_ROOM, Post, PostMeta, User, UserMeta
from hotel_search.schemas.hotel import ReviewStats
from hotel_search.schemas.search import SearchFilter
from hotel_search.services.errors import StoreError

logger = logging.getLogger(__name__)

# Room attribute keys in wp_postmeta
ROOM_META_KEYS = ("surface", "price", "bedrooms_count", "bathrooms_count", "type")


@dataclass(frozen=True)
class HotelRow:
    id: int
    display_name: str


@dataclass(frozen=True)
class RoomRow:
    id: int
    hotel_id: int
    title: str
    metas: dict[str, str | None] = field(default_factory=dict)


class HotelStore(Protocol):
    """The read operations the search core needs from a store."""

    def list_hotel_rows(self) -> list[HotelRow]: ...

    def get_attribute(self, entity_id: int, key: str) -> str | None: ...

    def get_attributes(self, entity_id: int, keys: Iterable[str]) -> dict[str, str | None]: ...

    def get_review_stats(self, hotel_id: int) -> ReviewStats: ...

    def find_room_ids(self, hotel_id: int, filters: SearchFilter) -> list[int]: ...

    def get_room_row(self, room_id: int) -> RoomRow | None: ...


def _as_number(meta):
    return cast(meta.meta_value, Float)


def _slack(bound: float) -> float:
    # absorbs last-digit differences between the database's string-to-float and Python's
    return 1e-9 * max(1.0, abs(bound))


class SqlHotelStore:
    """
    HotelStore over the WordPress-shaped tables.
    Every call opens its own short-lived session, so one store can serve several threads.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    @contextmanager
    def _session(self, operation: str) -> Iterator[Session]:
        db: Session = self._session_factory()
        try:
            yield db
        except SQLAlchemyError as e:
            logger.error("Store query %s failed: %s", operation, e)
            raise StoreError(f"{operation} failed") from e
        finally:
            db.close()

    # ---------- (a) catalog ----------

    def list_hotel_rows(self) -> list[HotelRow]:
        with self._session("list_hotel_rows") as db:
            rows = db.execute(select(User.ID, User.display_name).order_by(User.ID)).all()
        return [HotelRow(id=r.ID, display_name=r.display_name) for r in rows]

    # ---------- (b) key/value attributes ----------

    def get_attribute(self, entity_id: int, key: str) -> str | None:
        with self._session("get_attribute") as db:
            return db.execute(
                select(UserMeta.meta_value)
                .where(UserMeta.user_id == entity_id, UserMeta.meta_key == key)
                .order_by(UserMeta.umeta_id)
                .limit(1)
            ).scalar_one_or_none()

    def get_attributes(self, entity_id: int, keys: Iterable[str]) -> dict[str, str | None]:
        """
        Batched version of get_attribute(). Every requested key is present in the
        result; missing ones map to None. Duplicate rows: the oldest wins.
        """
        keys = list(keys)
        values: dict[str, str | None] = {k: None for k in keys}
        if not keys:
            return values
        seen: set[str] = set()
        with self._session("get_attributes") as db:
            rows = db.execute(
                select(UserMeta.meta_key, UserMeta.meta_value)
                .where(UserMeta.user_id == entity_id, UserMeta.meta_key.in_(keys))
                .order_by(UserMeta.umeta_id)
            ).all()
        for key, value in rows:
            if key in seen:
                continue
            seen.add(key)
            values[key] = value
        return values

    # ---------- (c) reviews ----------

    def get_review_stats(self, hotel_id: int) -> ReviewStats:
        stmt = (
            select(
                func.round(func.avg(_as_number(PostMeta))).label("rating"),
                func.count(PostMeta.meta_value).label("count"),
            )
            .select_from(Post)
            .join(PostMeta, PostMeta.post_id == Post.ID)
            .where(
                Post.post_author == hotel_id,
                Post.post_type == POST_TYPE_REVIEW,
                PostMeta.meta_key == "rating",
            )
        )
        with self._session("get_review_stats") as db:
            row = db.execute(stmt).one()
        return ReviewStats(
            rating=int(row.rating) if row.rating is not None else None,
            count=int(row.count or 0),
        )

    # ---------- (d) room candidates ----------

    def find_room_ids(self, hotel_id: int, filters: SearchFilter) -> list[int]:
        """
        Ids of this hotel's rooms that may satisfy the filter, in id order.

        The SQL bounds are loose supersets of the in-memory predicates (counts and price
        are compared before truncation), so the caller must still check every predicate
        on the loaded room. Values the in-memory parser rejects never match there.
        """
        price = aliased(PostMeta, name="price_data")
        stmt = (
            select(Post.ID)
            .join(price, and_(price.post_id == Post.ID, price.meta_key == "price"))
            .where(Post.post_author == hotel_id, Post.post_type == POST_TYPE_ROOM)
        )

        # int(p) >= m  implies  p > ceil(m) - 1 ; int(p) <= M  implies  p < floor(M) + 1
        # (truncation toward zero, so this also holds for negative values)
        if filters.price.min is not None:
            stmt = stmt.where(_as_number(price) > math.ceil(filters.price.min) - 1)
        if filters.price.max is not None:
            stmt = stmt.where(_as_number(price) < math.floor(filters.price.max) + 1)

        if filters.surface.min is not None or filters.surface.max is not None:
            surface = aliased(PostMeta, name="surface_data")
            stmt = stmt.join(surface, and_(surface.post_id == Post.ID, surface.meta_key == "surface"))
            if filters.surface.min is not None:
                stmt = stmt.where(_as_number(surface) >= filters.surface.min - _slack(filters.surface.min))
            if filters.surface.max is not None:
                stmt = stmt.where(_as_number(surface) <= filters.surface.max + _slack(filters.surface.max))

        if filters.rooms is not None:
            bedrooms = aliased(PostMeta, name="rooms_data")
            stmt = stmt.join(
                bedrooms, and_(bedrooms.post_id == Post.ID, bedrooms.meta_key == "bedrooms_count")
            ).where(_as_number(bedrooms) > filters.rooms - 1)

        if filters.bath_rooms is not None:
            bathrooms = aliased(PostMeta, name="bath_rooms_data")
            stmt = stmt.join(
                bathrooms, and_(bathrooms.post_id == Post.ID, bathrooms.meta_key == "bathrooms_count")
            ).where(_as_number(bathrooms) > filters.bath_rooms - 1)

        if filters.types:
            room_type = aliased(PostMeta, name="type_data")
            stmt = stmt.join(
                room_type, and_(room_type.post_id == Post.ID, room_type.meta_key == "type")
            ).where(room_type.meta_value.in_(filters.types))

        # A room with duplicated meta rows would otherwise come back twice
        stmt = stmt.distinct().order_by(Post.ID)

        with self._session("find_room_ids") as db:
            return list(db.execute(stmt).scalars().all())

    # ---------- (e) full room ----------

    def get_room_row(self, room_id: int) -> RoomRow | None:
        with self._session("get_room_row") as db:
            post = db.execute(
                select(Post.ID, Post.post_author, Post.post_title)
                .where(Post.ID == room_id, Post.post_type == POST_TYPE_ROOM)
            ).one_or_none()
            if post is None:
                return None
            rows = db.execute(
                select(PostMeta.meta_key, PostMeta.meta_value)
                .where(PostMeta.post_id == room_id, PostMeta.meta_key.in_(ROOM_META_KEYS))
                .order_by(PostMeta.meta_id)
            ).all()

        metas: dict[str, str | None] = {}
        for key, value in rows:
            metas.setdefault(key, value)
        return RoomRow(id=post.ID, hotel_id=post.post_author, title=post.post_title or "", metas=metas)
