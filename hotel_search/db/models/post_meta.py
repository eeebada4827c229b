from __future__ import annotations

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hotel_search.db.mixins import Base, IdType, MetaRowMixin


class PostMeta(MetaRowMixin, Base):
    __tablename__ = "wp_postmeta"

    meta_id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)

    # FK → wp_posts.ID
    post_id: Mapped[int] = mapped_column(
        IdType,
        ForeignKey("wp_posts.ID", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )

    post = relationship("Post", back_populates="metas")
