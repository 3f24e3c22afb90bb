"""Gem Catalog Rules — pure parsing of list queries and derivation of image names.

Invariants:
    - No IO, no DB: every function maps plain values to plain values
    - Sorting is restricted to SORTABLE_FIELDS; anything else falls back to name ASC
    - $filter only understands "<field> eq '<value>'" joined by " and ";
      unknown fields and malformed conditions are ignored, never rejected
    - A cursor is a stringified row offset; unparsable or negative cursors mean 0,
      and offsets are clamped to MAX_ID so they always fit the store's integer

Design Decisions:
    - Filter values from $filter override the individual query parameters,
      so a client can send either form
    - Cursors stay plain offsets so the frontend can show them and step back
"""

from dataclasses import dataclass, field

from wiccapedia.core.domain_types import MAX_ID

FILTERABLE_FIELDS = ("name", "color", "category", "chemical_formula")
SORTABLE_FIELDS = ("name", "color", "category", "chemical_formula", "created_at")
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
SEARCH_LIMIT = 50

_ACCENTS = str.maketrans("áéíóúñ", "aeioun")


@dataclass(frozen=True)
class SortKey:
    field: str = "name"
    descending: bool = False


@dataclass(frozen=True)
class GemFilters:
    """Substring filters for the gem list. None means "no constraint"."""
    search: str | None = None
    name: str | None = None
    color: str | None = None
    category: str | None = None
    chemical_formula: str | None = None
    order_by: tuple[SortKey, ...] = field(default_factory=lambda: (SortKey(),))

    def active(self) -> dict[str, str]:
        """Column filters that carry a value."""
        return {
            name: value for name in FILTERABLE_FIELDS
            if (value := getattr(self, name))
        }


@dataclass(frozen=True)
class PageWindow:
    offset: int
    limit: int
    total_count: int

    @property
    def has_next(self) -> bool:
        return self.offset + self.limit < self.total_count

    @property
    def has_previous(self) -> bool:
        return self.offset > 0

    @property
    def next_cursor(self) -> str | None:
        return str(self.offset + self.limit) if self.has_next else None

    @property
    def previous_cursor(self) -> str | None:
        if not self.has_previous:
            return None
        return str(max(0, self.offset - self.limit))


def normalize_text(text: str) -> str:
    """Lowercase and strip the Spanish accents used in gem names."""
    return text.lower().translate(_ACCENTS)


def image_path(name: str) -> str:
    """'Ágata Azul' -> 'images/agata-azul.jpg'."""
    slug = normalize_text(name).replace(" ", "-")
    return f"images/{slug}.jpg"


def parse_odata_filter(expression: str | None) -> dict[str, str]:
    """Parse "color eq 'Blue' and category eq 'Quartz'" into {field: value}."""
    if not expression:
        return {}
    parsed: dict[str, str] = {}
    for condition in expression.split(" and "):
        parts = condition.split()
        if len(parts) < 3 or parts[1] != "eq" or parts[0] not in FILTERABLE_FIELDS:
            continue
        value = " ".join(parts[2:]).strip("'\"")
        if value:
            parsed[parts[0]] = value
    return parsed


def parse_order_by(expression: str | None) -> tuple[SortKey, ...]:
    """Parse "color desc, name" into sort keys; unknown fields are dropped."""
    keys = []
    for clause in (expression or "").split(","):
        tokens = clause.split()
        if not tokens or tokens[0] not in SORTABLE_FIELDS:
            continue
        descending = len(tokens) > 1 and tokens[1].lower() == "desc"
        keys.append(SortKey(tokens[0], descending))
    return tuple(keys) or (SortKey(),)


def parse_cursor(cursor: str | None) -> int:
    if not cursor:
        return 0
    try:
        offset = int(cursor)
    except ValueError:
        return 0
    return min(max(offset, 0), MAX_ID)


def build_filters(
    *,
    search: str | None = None,
    odata_filter: str | None = None,
    order_by: str | None = None,
    **columns: str | None,
) -> GemFilters:
    """Merge individual parameters with a $filter expression ($filter wins)."""
    values = {
        name: (columns.get(name) or "").strip() or None
        for name in FILTERABLE_FIELDS
    }
    values.update(parse_odata_filter(odata_filter))
    return GemFilters(
        search=(search or "").strip() or None,
        order_by=parse_order_by(order_by),
        **values,
    )
