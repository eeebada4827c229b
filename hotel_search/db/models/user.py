from __future__ import annotations
from typing import List, Optional
from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from hotel_search.db.mixins import Base, IdType


class User(Base):
    """One row per hotel. The schema is WordPress-shaped, hence the users table."""
    __tablename__ = "wp_users"

    ID: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)

    user_login: Mapped[str] = mapped_column(String(60), nullable=False, default="")
    user_email: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    display_name: Mapped[str] = mapped_column(String(250), nullable=False, default="")

    user_registered: Mapped[Optional[datetime]] = mapped_column(
        DateTime, server_default=func.now()
    )

    metas: Mapped[List["UserMeta"]] = relationship(
        "UserMeta",
        back_populates="user",
        cascade="all, delete-orphan",
    )
    posts: Mapped[List["Post"]] = relationship(
        "Post",
        back_populates="author",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<User id={self.ID!r} name={self.display_name!r}>"
