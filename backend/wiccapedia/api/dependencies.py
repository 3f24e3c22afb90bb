"""Request Dependencies — one repository per request over the request's session.

Invariants:
    - Every repository shares the single AsyncSession yielded by get_db,
      so one HTTP call is one unit of work
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from wiccapedia.core.repository_protocols import EntityRepository
from wiccapedia.infrastructure.database import get_db
from wiccapedia.infrastructure.gem_catalog import GemCatalog
from wiccapedia.infrastructure.repository import Repository
from wiccapedia.models import Cover, Decoration, Gem, Notebook, User


def get_user_repository(db: AsyncSession = Depends(get_db)) -> EntityRepository[User]:
    return Repository(db, User)


def get_notebook_repository(
    db: AsyncSession = Depends(get_db),
) -> EntityRepository[Notebook]:
    return Repository(db, Notebook)


def get_cover_repository(db: AsyncSession = Depends(get_db)) -> EntityRepository[Cover]:
    return Repository(db, Cover)


def get_decoration_repository(
    db: AsyncSession = Depends(get_db),
) -> EntityRepository[Decoration]:
    return Repository(db, Decoration)


def get_gem_repository(db: AsyncSession = Depends(get_db)) -> EntityRepository[Gem]:
    return Repository(db, Gem)


def get_gem_catalog(db: AsyncSession = Depends(get_db)) -> GemCatalog:
    return GemCatalog(db)
