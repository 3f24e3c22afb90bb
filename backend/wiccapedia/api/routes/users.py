"""Users — signup (create) and fetch-by-id.

Invariants:
    - POST returns 201 with a Location header pointing at GET /api/users/{id}
    - GET of an unknown id returns 404
"""

from fastapi import APIRouter, Depends, Request, Response, status

from wiccapedia.api.dependencies import get_user_repository
from wiccapedia.core.errors import ResourceNotFoundError
from wiccapedia.core.repository_protocols import EntityRepository
from wiccapedia.models import User
from wiccapedia.schemas.user import UserCreate, UserResponse

router = APIRouter(prefix="/api/users", tags=["users"])


def _to_response(user: User) -> UserResponse:
    return UserResponse(id=user.id, username=user.username)


@router.post(
    "", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserCreate,
    request: Request,
    response: Response,
    repo: EntityRepository[User] = Depends(get_user_repository),
):
    """Create a user."""
    user = await repo.create(username=body.username)
    response.headers["Location"] = str(
        request.url_for("get_user", user_id=user.id),
    )
    return _to_response(user)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int, repo: EntityRepository[User] = Depends(get_user_repository),
):
    """Get a user by id."""
    user = await repo.get_by_id(user_id)
    if user is None:
        raise ResourceNotFoundError("User", str(user_id))
    return _to_response(user)
