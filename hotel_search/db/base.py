from sqlalchemy.engine import Engine

from hotel_search.db.mixins import Base

# Import all models so Base.metadata knows every table
from hotel_search.db.models.user import User
from hotel_search.db.models.user_meta import UserMeta
from hotel_search.db.models.post import Post
from hotel_search.db.models.post_meta import PostMeta


def create_schema(bind: Engine) -> list[str]:
    """
    Create any missing wp_* tables (local and test databases; production schemas
    are owned by the site that writes them). Returns the table names.
    """
    Base.metadata.create_all(bind=bind)
    return sorted(Base.metadata.tables.keys())
