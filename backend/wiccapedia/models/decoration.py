"""Decoration ORM — typed free-form payload (color code, pattern name, ...).

Invariants:
    - type is a DecorationType, stored by member name (VARCHAR), never by ordinal
    - value is non-nullable free-form text

Design Decisions:
    - native_enum=False: plain VARCHAR column, adding a member needs no
      PostgreSQL ALTER TYPE migration
"""

from sqlalchemy import Enum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from wiccapedia.core.domain_types import DecorationType
from wiccapedia.db.base import Base


class Decoration(Base):
    """Decoration entity."""
    __tablename__ = "decorations"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    type: Mapped[DecorationType] = mapped_column(
        Enum(DecorationType, native_enum=False, length=20),
        nullable=False,
    )
    value: Mapped[str] = mapped_column(String(500), nullable=False)

    cover: Mapped["Cover"] = relationship(
        "Cover", back_populates="decoration", uselist=False,
    )
