"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Store access goes through the EntityRepository protocol
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - One generic protocol for all four entity kinds: they share an identical
      create / get-by-id contract and differ only in their field set
"""

from typing import Any, Protocol, TypeVar

EntityT = TypeVar("EntityT")


class EntityRepository(Protocol[EntityT]):
    """Contract for create and point-lookup persistence of one entity kind.

    create() returns the persisted entity with its assigned id and raises
    ConstraintViolationError / StorageError on failure. get_by_id() returns
    None when no row has the given id.
    """
    async def create(self, **fields: Any) -> EntityT: ...
    async def get_by_id(self, entity_id: int) -> EntityT | None: ...
