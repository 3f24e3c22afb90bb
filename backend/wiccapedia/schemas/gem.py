"""Gem Schemas — catalog entry, paged list, search and facet payloads.

Invariants:
    - Gem payloads keep snake_case field names; the catalog frontend reads
      magical_description and chemical_formula verbatim
    - image is never accepted from the client; it is derived from name
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from wiccapedia.schemas.common import strip_non_empty


class GemCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    magical_description: str = Field(min_length=1, max_length=10_000)
    category: str = Field(min_length=1, max_length=100)
    color: str = Field(min_length=1, max_length=100)
    chemical_formula: str = Field(min_length=1, max_length=100)

    @field_validator(
        "name", "magical_description", "category", "color", "chemical_formula",
    )
    @classmethod
    def strip_fields(cls, v: str) -> str:
        return strip_non_empty(v)


class GemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    image: str
    magical_description: str
    category: str
    color: str
    chemical_formula: str
    created_at: datetime
    updated_at: datetime


class PaginationInfo(BaseModel):
    has_next: bool
    has_previous: bool
    next_cursor: str | None = None
    previous_cursor: str | None = None
    total_count: int
    page_size: int


class PaginatedGems(BaseModel):
    data: list[GemResponse]
    pagination: PaginationInfo


class GemSearchResponse(BaseModel):
    results: list[GemResponse]
    count: int
    query: str


class ColorsResponse(BaseModel):
    colors: list[str]


class CategoriesResponse(BaseModel):
    categories: list[str]


class FormulasResponse(BaseModel):
    formulas: list[str]
