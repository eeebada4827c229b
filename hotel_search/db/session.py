# hotel_search/db/session.py
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from hotel_search.core.config import settings


def make_engine(url: str) -> Engine:
    url = url.strip()
    if url.startswith("sqlite"):
        # SQLite picks its own pool; sessions may hop threads when enrichment fans out
        return create_engine(url, connect_args={"check_same_thread": False}, future=True)
    return create_engine(
        url,
        pool_pre_ping=True,
        pool_recycle=300,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        future=True,
    )


def make_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(
        bind=bind,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
        future=True,
    )


engine = make_engine(settings.DATABASE_URL)

SessionLocal = make_session_factory(engine)
