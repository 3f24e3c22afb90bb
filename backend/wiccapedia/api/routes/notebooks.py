"""Notebooks — create (owner + cover) and fetch-by-id.

Invariants:
    - Unknown userId/coverId, or a coverId already used by another notebook,
      fails with 409 and writes nothing
"""

from fastapi import APIRouter, Depends, Request, Response, status

from wiccapedia.api.dependencies import get_notebook_repository
from wiccapedia.core.errors import ResourceNotFoundError
from wiccapedia.core.repository_protocols import EntityRepository
from wiccapedia.models import Notebook
from wiccapedia.schemas.notebook import NotebookCreate, NotebookResponse

router = APIRouter(prefix="/api/notebooks", tags=["notebooks"])


def _to_response(notebook: Notebook) -> NotebookResponse:
    return NotebookResponse(
        id=notebook.id, user_id=notebook.user_id, cover_id=notebook.cover_id,
    )


@router.post(
    "", response_model=NotebookResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_notebook(
    body: NotebookCreate,
    request: Request,
    response: Response,
    repo: EntityRepository[Notebook] = Depends(get_notebook_repository),
):
    """Create a notebook for an existing user with an unused cover."""
    notebook = await repo.create(user_id=body.user_id, cover_id=body.cover_id)
    response.headers["Location"] = str(
        request.url_for("get_notebook", notebook_id=notebook.id),
    )
    return _to_response(notebook)


@router.get("/{notebook_id}", response_model=NotebookResponse)
async def get_notebook(
    notebook_id: int,
    repo: EntityRepository[Notebook] = Depends(get_notebook_repository),
):
    notebook = await repo.get_by_id(notebook_id)
    if notebook is None:
        raise ResourceNotFoundError("Notebook", str(notebook_id))
    return _to_response(notebook)
