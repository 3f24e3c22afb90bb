"""Cover ORM — titled cover carrying exactly one Decoration.

Invariants:
    - decoration_id references an existing decorations row and is unique
      (one-to-one)
    - At most one Notebook points back at a Cover (enforced on notebooks.cover_id)
"""

from sqlalchemy import Integer, String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from wiccapedia.db.base import Base


class Cover(Base):
    """Cover entity."""
    __tablename__ = "covers"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    decoration_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("decorations.id"), nullable=False, unique=True,
    )

    decoration: Mapped["Decoration"] = relationship(
        "Decoration", back_populates="cover",
    )
    notebook: Mapped["Notebook"] = relationship(
        "Notebook", back_populates="cover", uselist=False,
    )
