from hotel_search.db.mixins import Base

__all__ = ["Base"]
