"""ORM Models — SQLAlchemy declarative models for the notebook entities and the gem catalog.

Invariants:
    - All models inherit from Base (db/base.py)
    - User owns Notebooks; Notebook <-> Cover and Cover <-> Decoration are one-to-one

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from wiccapedia.models.user import User  # noqa: F401
from wiccapedia.models.notebook import Notebook  # noqa: F401
from wiccapedia.models.cover import Cover  # noqa: F401
from wiccapedia.models.decoration import Decoration  # noqa: F401
from wiccapedia.models.gem import Gem  # noqa: F401
