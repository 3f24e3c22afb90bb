"""Notebook ORM — belongs to one User and wears exactly one Cover.

Invariants:
    - user_id references an existing users row (FK)
    - cover_id references an existing covers row and is unique: no two
      notebooks share a cover (one-to-one)
"""

from sqlalchemy import Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from wiccapedia.db.base import Base


class Notebook(Base):
    """Notebook entity."""
    __tablename__ = "notebooks"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True,
    )
    cover_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("covers.id"), nullable=False, unique=True,
    )

    user: Mapped["User"] = relationship("User", back_populates="notebooks")
    cover: Mapped["Cover"] = relationship("Cover", back_populates="notebook")
