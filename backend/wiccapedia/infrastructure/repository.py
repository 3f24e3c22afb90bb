"""Generic Repository — create and fetch-by-id for any ORM model.

Invariants:
    - Holds no state between requests: one instance per request-scoped session
    - create() is a single INSERT committed as its own unit of work; on failure
      the session is rolled back and nothing is visible to later reads
    - Failures translated by map_store_error(): ConstraintViolationError or StorageError
    - get_by_id() is a primary-key point lookup; absence is None, not an exception.
      Ids outside 1..MAX_ID cannot exist and return None without a query

Design Decisions:
    - One class parameterized by model instead of a copy per entity kind
    - Session injected through the constructor so tests can hand in any
      AsyncSession (in-memory SQLite, fakes)
"""

import logging
from typing import Any, Generic, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wiccapedia.core.domain_types import MAX_ID
from wiccapedia.db.base import Base
from wiccapedia.infrastructure.database import map_store_error

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """Create/fetch-by-id access to one entity table."""

    def __init__(self, session: AsyncSession, model: type[ModelT]):
        self._session = session
        self._model = model

    @property
    def entity_name(self) -> str:
        return self._model.__name__

    async def create(self, **fields: Any) -> ModelT:
        """Insert a row built from fields and return it with its assigned id."""
        entity = self._model(**fields)
        self._session.add(entity)
        try:
            await self._session.commit()
            await self._session.refresh(entity)
        except SQLAlchemyError as e:
            await self._session.rollback()
            raise map_store_error(e, "insert", self.entity_name)
        logger.info(
            f"{self.entity_name} created",
            extra={"entity": self.entity_name, "entity_id": entity.id},
        )
        return entity

    async def get_by_id(self, entity_id: int) -> ModelT | None:
        """Fetch one row by primary key, or None if it does not exist."""
        if not 1 <= entity_id <= MAX_ID:
            logger.debug(
                f"{self.entity_name} id {entity_id} outside key range",
                extra={"entity": self.entity_name},
            )
            return None
        try:
            entity = await self._session.get(self._model, entity_id)
        except SQLAlchemyError as e:
            raise map_store_error(e, "select", self.entity_name)
        if entity is None:
            logger.debug(
                f"{self.entity_name} {entity_id} not found",
                extra={"entity": self.entity_name, "entity_id": entity_id},
            )
        return entity
