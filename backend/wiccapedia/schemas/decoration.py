"""Decoration Schemas — wire enumeration and its mapping to the persisted one.

Invariants:
    - DecorationTypeContract (wire) and DecorationType (persisted) are declared
      independently; they are translated through explicit tables, never by
      ordinal position
    - The tables are a bijection covering every member of both enumerations;
      _check_mapping_exhaustive() runs at import and fails loudly on drift

Design Decisions:
    - Wire values are PascalCase ("Color") to match the clients' contract;
      persisted values stay lowercase
"""

from enum import Enum

from pydantic import Field, field_validator

from wiccapedia.core.domain_types import DecorationType
from wiccapedia.schemas.common import CamelModel, strip_non_empty


class DecorationTypeContract(str, Enum):
    """Decoration type as exchanged with API clients."""
    COLOR = "Color"
    PATTERN = "Pattern"
    TEXTURE = "Texture"


_TO_INTERNAL: dict[DecorationTypeContract, DecorationType] = {
    DecorationTypeContract.COLOR: DecorationType.COLOR,
    DecorationTypeContract.PATTERN: DecorationType.PATTERN,
    DecorationTypeContract.TEXTURE: DecorationType.TEXTURE,
}

_TO_EXTERNAL: dict[DecorationType, DecorationTypeContract] = {
    internal: external for external, internal in _TO_INTERNAL.items()
}


def _check_mapping_exhaustive() -> None:
    missing_wire = set(DecorationTypeContract) - set(_TO_INTERNAL)
    missing_internal = set(DecorationType) - set(_TO_EXTERNAL)
    if missing_wire or missing_internal or len(_TO_EXTERNAL) != len(_TO_INTERNAL):
        raise RuntimeError(
            "DecorationType mapping out of sync: "
            f"unmapped wire members {sorted(m.name for m in missing_wire)}, "
            f"unmapped internal members {sorted(m.name for m in missing_internal)}",
        )


_check_mapping_exhaustive()


def to_internal(value: DecorationTypeContract) -> DecorationType:
    return _TO_INTERNAL[value]


def to_external(value: DecorationType) -> DecorationTypeContract:
    return _TO_EXTERNAL[value]


class DecorationCreate(CamelModel):
    """Decoration creation — type from the closed set, free-form value."""
    type: DecorationTypeContract
    value: str = Field(min_length=1, max_length=500)

    @field_validator("value")
    @classmethod
    def strip_value(cls, v: str) -> str:
        return strip_non_empty(v)


class DecorationResponse(CamelModel):
    id: int
    type: DecorationTypeContract
    value: str
