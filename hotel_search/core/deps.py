# hotel_search/core/deps.py
from sqlalchemy.orm import sessionmaker

from hotel_search.core.config import settings
from hotel_search.db.store import SqlHotelStore
from hotel_search.services.hotel_service import HotelService
from hotel_search.services.timers import Timers


def get_hotel_service(session_factory: sessionmaker | None = None, timers: Timers | None = None) -> HotelService:
    """
    Wire a HotelService from settings. Pass a session factory to target another database.
    """
    if session_factory is None:
        from hotel_search.db.session import SessionLocal  # create_engine() only connects on the first query
        session_factory = SessionLocal

    if timers is None and settings.TIMERS_ENABLED:
        timers = Timers()

    return HotelService(
        SqlHotelStore(session_factory),
        timers=timers,
        max_workers=settings.SEARCH_MAX_WORKERS,
    )
