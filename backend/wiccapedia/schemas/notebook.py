"""Notebook Schemas — owner and cover references.

Invariants:
    - userId and coverId lie in 1..MAX_ID; existence is checked by the store (FK),
      not here
"""

from pydantic import Field

from wiccapedia.core.domain_types import MAX_ID
from wiccapedia.schemas.common import CamelModel


class NotebookCreate(CamelModel):
    user_id: int = Field(ge=1, le=MAX_ID)
    cover_id: int = Field(ge=1, le=MAX_ID)


class NotebookResponse(CamelModel):
    id: int
    user_id: int
    cover_id: int
