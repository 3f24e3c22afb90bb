"""Covers — create, fetch-by-id, and the static default cover.

Invariants:
    - /default is registered before /{cover_id} so it is never parsed as an id
    - The default cover is read from settings.default_cover_path; a missing
      file or a directory is a 404 (ASSET_MISSING), an unreadable or non-UTF-8
      file is a 500 (ASSET_UNREADABLE)
    - A decorationId already used by another cover fails with 409

Design Decisions:
    - File read runs in a worker thread (asyncio.to_thread) to keep the event loop free
"""

import asyncio
import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Request, Response, status

from wiccapedia.api.dependencies import get_cover_repository
from wiccapedia.config import Settings, get_settings
from wiccapedia.core.errors import (
    AssetMissingError, AssetUnreadableError, ResourceNotFoundError,
)
from wiccapedia.core.repository_protocols import EntityRepository
from wiccapedia.models import Cover
from wiccapedia.schemas.cover import (
    CoverCreate, CoverResponse, DefaultCoverResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/covers", tags=["covers"])


def _to_response(cover: Cover) -> CoverResponse:
    return CoverResponse(
        id=cover.id, title=cover.title, decoration_id=cover.decoration_id,
    )


@router.post(
    "", response_model=CoverResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_cover(
    body: CoverCreate,
    request: Request,
    response: Response,
    repo: EntityRepository[Cover] = Depends(get_cover_repository),
):
    """Create a cover around an existing, not yet used decoration."""
    cover = await repo.create(title=body.title, decoration_id=body.decoration_id)
    response.headers["Location"] = str(
        request.url_for("get_cover", cover_id=cover.id),
    )
    return _to_response(cover)


@router.get("/default", response_model=DefaultCoverResponse)
async def get_default_cover(settings: Settings = Depends(get_settings)):
    """Serve the default cover title and its animation document."""
    path = Path(settings.default_cover_path)
    try:
        document = await asyncio.to_thread(path.read_text, encoding="utf-8")
    except (FileNotFoundError, IsADirectoryError):
        logger.warning(f"Default cover asset missing at {path}")
        raise AssetMissingError("Default cover animation", str(path))
    except (OSError, UnicodeDecodeError) as e:
        logger.error(
            f"Default cover asset at {path} unreadable: {e}",
            extra={"path": str(path)},
        )
        raise AssetUnreadableError("Default cover animation", str(path))
    return DefaultCoverResponse(
        title=settings.default_cover_title, animation_document=document,
    )


@router.get("/{cover_id}", response_model=CoverResponse)
async def get_cover(
    cover_id: int, repo: EntityRepository[Cover] = Depends(get_cover_repository),
):
    cover = await repo.get_by_id(cover_id)
    if cover is None:
        raise ResourceNotFoundError("Cover", str(cover_id))
    return _to_response(cover)
