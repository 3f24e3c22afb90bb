"""Gems — the crystal and mineral catalog: list, search, facets, create, fetch.

Invariants:
    - Fixed paths (/search, /metadata/*) are registered before /{gem_id}
    - GET list: limit 1..100 (default 20); cursor is an opaque offset string,
      and a cursor that does not parse starts from the first page
    - $search, $filter and $orderby are accepted under their OData names
    - GET /search with a missing or blank q is a 400
    - POST derives image from name and returns 201 with a Location header
"""

import logging

from fastapi import APIRouter, Depends, Query, Request, Response, status

from wiccapedia.api.dependencies import get_gem_catalog, get_gem_repository
from wiccapedia.core.errors import ResourceNotFoundError
from wiccapedia.core.gems import (
    DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, PageWindow, build_filters, image_path,
    parse_cursor,
)
from wiccapedia.core.repository_protocols import EntityRepository
from wiccapedia.infrastructure.gem_catalog import GemCatalog
from wiccapedia.models import Gem
from wiccapedia.schemas.gem import (
    CategoriesResponse, ColorsResponse, FormulasResponse, GemCreate,
    GemResponse, GemSearchResponse, PaginatedGems, PaginationInfo,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/gems", tags=["gems"])


@router.get("", response_model=PaginatedGems)
async def list_gems(
    search: str | None = Query(None, alias="$search"),
    odata_filter: str | None = Query(None, alias="$filter"),
    order_by: str | None = Query(None, alias="$orderby"),
    name: str | None = Query(None),
    color: str | None = Query(None),
    category: str | None = Query(None),
    chemical_formula: str | None = Query(None),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    cursor: str | None = Query(None),
    catalog: GemCatalog = Depends(get_gem_catalog),
):
    """List gems, filtered and sorted, one cursor page at a time."""
    filters = build_filters(
        search=search, odata_filter=odata_filter, order_by=order_by,
        name=name, color=color, category=category,
        chemical_formula=chemical_formula,
    )
    offset = parse_cursor(cursor)
    gems, total = await catalog.list_gems(filters, limit, offset)
    window = PageWindow(offset=offset, limit=limit, total_count=total)
    return PaginatedGems(
        data=[GemResponse.model_validate(g) for g in gems],
        pagination=PaginationInfo(
            has_next=window.has_next,
            has_previous=window.has_previous,
            next_cursor=window.next_cursor,
            previous_cursor=window.previous_cursor,
            total_count=total,
            page_size=limit,
        ),
    )


@router.post(
    "", response_model=GemResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_gem(
    body: GemCreate,
    request: Request,
    response: Response,
    repo: EntityRepository[Gem] = Depends(get_gem_repository),
):
    """Add a gem to the catalog."""
    gem = await repo.create(image=image_path(body.name), **body.model_dump())
    response.headers["Location"] = str(
        request.url_for("get_gem", gem_id=gem.id),
    )
    return GemResponse.model_validate(gem)


@router.get("/search", response_model=GemSearchResponse)
async def search_gems(
    q: str = Query(..., max_length=200, pattern=r"\S"),
    catalog: GemCatalog = Depends(get_gem_catalog),
):
    term = q.strip()
    gems = await catalog.search(term)
    logger.info(f"Gem search '{term}' matched {len(gems)}")
    return GemSearchResponse(
        results=[GemResponse.model_validate(g) for g in gems],
        count=len(gems),
        query=term,
    )


@router.get("/metadata/colors", response_model=ColorsResponse)
async def list_colors(catalog: GemCatalog = Depends(get_gem_catalog)):
    return ColorsResponse(colors=await catalog.distinct_values("colors"))


@router.get("/metadata/categories", response_model=CategoriesResponse)
async def list_categories(catalog: GemCatalog = Depends(get_gem_catalog)):
    return CategoriesResponse(
        categories=await catalog.distinct_values("categories"),
    )


@router.get("/metadata/formulas", response_model=FormulasResponse)
async def list_formulas(catalog: GemCatalog = Depends(get_gem_catalog)):
    return FormulasResponse(formulas=await catalog.distinct_values("formulas"))


@router.get("/{gem_id}", response_model=GemResponse)
async def get_gem(
    gem_id: int, repo: EntityRepository[Gem] = Depends(get_gem_repository),
):
    gem = await repo.get_by_id(gem_id)
    if gem is None:
        raise ResourceNotFoundError("Gem", str(gem_id))
    return GemResponse.model_validate(gem)
