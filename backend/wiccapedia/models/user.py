"""User ORM — identity that owns zero or more Notebooks.

Invariants:
    - id is an integer surrogate key assigned by the store
    - username is non-nullable
    - Never mutated after creation; no delete path exists

Design Decisions:
    - No unique constraint on username: display names are unique-ish only
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from wiccapedia.db.base import Base


class User(Base):
    """User entity — owner of notebooks."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    username: Mapped[str] = mapped_column(String(100), nullable=False)

    notebooks: Mapped[list["Notebook"]] = relationship(
        "Notebook", back_populates="user",
    )
