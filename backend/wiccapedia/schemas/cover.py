"""Cover Schemas — cover creation, cover shape, and the static default cover."""

from pydantic import Field, field_validator

from wiccapedia.core.domain_types import MAX_ID
from wiccapedia.schemas.common import CamelModel, strip_non_empty


class CoverCreate(CamelModel):
    """Cover creation — decorationId must not already be used by another cover."""
    title: str = Field(min_length=1, max_length=200)
    decoration_id: int = Field(ge=1, le=MAX_ID)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return strip_non_empty(v)


class CoverResponse(CamelModel):
    id: int
    title: str
    decoration_id: int


class DefaultCoverResponse(CamelModel):
    """Static default cover: title plus the raw animation (Lottie JSON) document."""
    title: str
    animation_document: str
