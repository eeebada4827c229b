from __future__ import annotations

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from hotel_search.db.base import Post, PostMeta, User, UserMeta, create_schema
from hotel_search.db.models import POST_TYPE_REVIEW, POST_TYPE_ROOM
from hotel_search.db.session import make_session_factory
from hotel_search.db.store import SqlHotelStore
from hotel_search.services.hotel_service import HotelService


class Seeder:
    """Writes fixture rows straight through the ORM models."""

    def __init__(self, session_factory):
        self._session_factory = session_factory
        self._next_post_id = 1000

    def _add(self, *objs):
        with self._session_factory() as db:
            db.add_all(objs)
            db.commit()

    def hotel(self, hotel_id: int, name: str, **metas) -> int:
        self._add(
            User(ID=hotel_id, user_login=f"hotel{hotel_id}", display_name=name),
            *[UserMeta(user_id=hotel_id, meta_key=k, meta_value=v) for k, v in metas.items()],
        )
        return hotel_id

    def room(self, hotel_id: int, room_id: int | None = None, **metas) -> int:
        if room_id is None:
            self._next_post_id += 1
            room_id = self._next_post_id
        self._add(
            Post(ID=room_id, post_author=hotel_id, post_type=POST_TYPE_ROOM, post_title=f"Room {room_id}"),
            *[PostMeta(post_id=room_id, meta_key=k, meta_value=str(v)) for k, v in metas.items()],
        )
        return room_id

    def review(self, hotel_id: int, rating) -> int:
        self._next_post_id += 1
        review_id = self._next_post_id
        self._add(
            Post(ID=review_id, post_author=hotel_id, post_type=POST_TYPE_REVIEW, post_title="Review"),
            PostMeta(post_id=review_id, meta_key="rating", meta_value=str(rating)),
        )
        return review_id


@pytest.fixture()
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_schema(eng)
    yield eng
    eng.dispose()


@pytest.fixture()
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture()
def seed(session_factory):
    return Seeder(session_factory)


@pytest.fixture()
def store(session_factory):
    return SqlHotelStore(session_factory)


@pytest.fixture()
def service(store):
    return HotelService(store)


@pytest.fixture()
def seeder_cls():
    return Seeder
