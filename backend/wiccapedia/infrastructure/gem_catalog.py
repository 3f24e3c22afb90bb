"""Gem Catalog Queries — filtered listing, free-text search and facet values.

Invariants:
    - Read-only: nothing here writes or commits
    - Every text match is a case-insensitive substring match with LIKE
      wildcards in user input escaped
    - Listing orders by the requested keys, then by id, so pages are stable
    - SQLAlchemy failures leave as StorageError via map_store_error()
"""

import logging
from typing import Sequence

from sqlalchemy import Select, distinct, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wiccapedia.core.gems import SEARCH_LIMIT, GemFilters
from wiccapedia.infrastructure.database import map_store_error
from wiccapedia.models import Gem

logger = logging.getLogger(__name__)

FACET_COLUMNS = {
    "colors": Gem.color,
    "categories": Gem.category,
    "formulas": Gem.chemical_formula,
}


def _text_match(term: str):
    return or_(
        Gem.name.icontains(term, autoescape=True),
        Gem.magical_description.icontains(term, autoescape=True),
        Gem.category.icontains(term, autoescape=True),
        Gem.color.icontains(term, autoescape=True),
    )


def _where(stmt: Select, filters: GemFilters) -> Select:
    for column, value in filters.active().items():
        stmt = stmt.where(getattr(Gem, column).icontains(value, autoescape=True))
    if filters.search:
        stmt = stmt.where(_text_match(filters.search))
    return stmt


class GemCatalog:
    """Query side of the gem catalog over one request's session."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def list_gems(
        self, filters: GemFilters, limit: int, offset: int,
    ) -> tuple[Sequence[Gem], int]:
        """One page of gems matching filters, plus the total match count."""
        order = [
            getattr(Gem, key.field).desc() if key.descending
            else getattr(Gem, key.field).asc()
            for key in filters.order_by
        ]
        page = _where(select(Gem), filters).order_by(*order, Gem.id)
        count = _where(select(func.count()).select_from(Gem), filters)
        try:
            total = (await self._session.execute(count)).scalar_one()
            result = await self._session.execute(page.limit(limit).offset(offset))
        except SQLAlchemyError as e:
            raise map_store_error(e, "select", "Gem")
        gems = result.scalars().all()
        logger.debug(
            f"Gem list returned {len(gems)} of {total}",
            extra={"entity": "Gem", "operation": "select"},
        )
        return gems, total

    async def search(self, term: str, limit: int = SEARCH_LIMIT) -> Sequence[Gem]:
        """Gems whose name, description, category or color contain term."""
        stmt = (
            select(Gem).where(_text_match(term))
            .order_by(Gem.name, Gem.id).limit(limit)
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise map_store_error(e, "search", "Gem")
        return result.scalars().all()

    async def distinct_values(self, facet: str) -> list[str]:
        """Sorted distinct non-empty values of one facet column."""
        column = FACET_COLUMNS[facet]
        stmt = select(distinct(column)).where(column != "").order_by(column)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise map_store_error(e, "select", "Gem")
        return list(result.scalars().all())
