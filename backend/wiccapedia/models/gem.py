"""Gem ORM — one entry of the crystal and mineral catalog.

Invariants:
    - id is an integer surrogate key assigned by the store
    - image is derived from name at creation (core.gems.image_path)
    - created_at/updated_at are timezone-aware UTC; rows are never updated here,
      so both hold the insert time
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from wiccapedia.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Gem(Base):
    """Gem entity — name, magical lore and mineralogy."""
    __tablename__ = "gems"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    image: Mapped[str] = mapped_column(String(300), nullable=False)
    magical_description: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    color: Mapped[str] = mapped_column(String(100), nullable=False)
    chemical_formula: Mapped[str] = mapped_column(String(100), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
