"""Decorations — create and fetch-by-id, translating the type enumeration.

Invariants:
    - Incoming DecorationTypeContract converted with to_internal() before persisting
    - Outgoing DecorationType converted with to_external() before responding
"""

from fastapi import APIRouter, Depends, Request, Response, status

from wiccapedia.api.dependencies import get_decoration_repository
from wiccapedia.core.errors import ResourceNotFoundError
from wiccapedia.core.repository_protocols import EntityRepository
from wiccapedia.models import Decoration
from wiccapedia.schemas.decoration import (
    DecorationCreate, DecorationResponse, to_external, to_internal,
)

router = APIRouter(prefix="/api/decorations", tags=["decorations"])


def _to_response(decoration: Decoration) -> DecorationResponse:
    return DecorationResponse(
        id=decoration.id,
        type=to_external(decoration.type),
        value=decoration.value,
    )


@router.post(
    "", response_model=DecorationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_decoration(
    body: DecorationCreate,
    request: Request,
    response: Response,
    repo: EntityRepository[Decoration] = Depends(get_decoration_repository),
):
    """Create a decoration."""
    decoration = await repo.create(type=to_internal(body.type), value=body.value)
    response.headers["Location"] = str(
        request.url_for("get_decoration", decoration_id=decoration.id),
    )
    return _to_response(decoration)


@router.get("/{decoration_id}", response_model=DecorationResponse)
async def get_decoration(
    decoration_id: int,
    repo: EntityRepository[Decoration] = Depends(get_decoration_repository),
):
    decoration = await repo.get_by_id(decoration_id)
    if decoration is None:
        raise ResourceNotFoundError("Decoration", str(decoration_id))
    return _to_response(decoration)
