"""Common Schema Base — camelCase wire names for every contract."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base contract: accepts and emits camelCase, also accepts snake_case."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def strip_non_empty(v: str) -> str:
    """Shared body for the per-schema strip validators."""
    v = v.strip()
    if not v:
        raise ValueError("value cannot be empty or whitespace")
    return v
