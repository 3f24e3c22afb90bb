"""User Schemas — signup payload and public user shape."""

from pydantic import Field, field_validator

from wiccapedia.schemas.common import CamelModel, strip_non_empty


class UserCreate(CamelModel):
    """User creation — display name, stripped, non-empty."""
    username: str = Field(min_length=1, max_length=100)

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        return strip_non_empty(v)


class UserResponse(CamelModel):
    id: int
    username: str
