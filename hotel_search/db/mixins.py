# hotel_search/db/mixins.py
from sqlalchemy import BigInteger, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# BIGINT UNSIGNED on MySQL; SQLite only autoincrements a plain INTEGER primary key
IdType = BigInteger().with_variant(Integer(), "sqlite")


class Base(DeclarativeBase):
    """Global SQLAlchemy Base for all models."""
    pass


class MetaRowMixin:
    """
    Shared columns of the generic key/value attribute tables (wp_usermeta, wp_postmeta).
    """
    meta_key: Mapped[str | None] = mapped_column(String(255), index=True, nullable=True)
    meta_value: Mapped[str | None] = mapped_column(Text, nullable=True)
