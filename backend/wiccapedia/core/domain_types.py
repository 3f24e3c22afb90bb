"""Domain Types — enum and bound types shared across the codebase.

Invariants:
    - Valid ids lie in 1..MAX_ID (the int4 column range)
    - DecorationType is the persisted enumeration; it is stored by member name,
      never by ordinal position

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum


# ─── Enums ───────────────────────────────────────────────────────

class DecorationType(str, Enum):
    """Kind of payload a Decoration's value carries — maps to DB `type` column."""
    COLOR = "color"
    PATTERN = "pattern"
    TEXTURE = "texture"


# ─── Bounds ──────────────────────────────────────────────────────

# Surrogate keys are PostgreSQL int4; ids outside 1..MAX_ID can never exist.
MAX_ID = 2**31 - 1
