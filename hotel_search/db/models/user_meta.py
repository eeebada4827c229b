from __future__ import annotations

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hotel_search.db.mixins import Base, IdType, MetaRowMixin


class UserMeta(MetaRowMixin, Base):
    __tablename__ = "wp_usermeta"

    umeta_id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)

    # FK → wp_users.ID
    user_id: Mapped[int] = mapped_column(
        IdType,
        ForeignKey("wp_users.ID", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )

    user = relationship("User", back_populates="metas")
