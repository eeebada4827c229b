from __future__ import annotations
from typing import List, Optional
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from hotel_search.db.mixins import Base, IdType

POST_TYPE_ROOM = "room"
POST_TYPE_REVIEW = "review"


class Post(Base):
    """Generic post row: rooms and reviews both live here, told apart by post_type."""
    __tablename__ = "wp_posts"

    ID: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)

    # Owning hotel (FK → wp_users.ID)
    post_author: Mapped[int] = mapped_column(
        IdType,
        ForeignKey("wp_users.ID", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )

    post_type: Mapped[str] = mapped_column(String(20), index=True, nullable=False, default="post")
    post_title: Mapped[str] = mapped_column(Text, nullable=False, default="")
    post_content: Mapped[Optional[str]] = mapped_column(Text)
    post_status: Mapped[str] = mapped_column(String(20), nullable=False, default="publish")

    post_date: Mapped[Optional[datetime]] = mapped_column(DateTime, server_default=func.now())

    author = relationship("User", back_populates="posts")
    metas: Mapped[List["PostMeta"]] = relationship(
        "PostMeta",
        back_populates="post",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Post id={self.ID!r} type={self.post_type!r} author={self.post_author!r}>"
