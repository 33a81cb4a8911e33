"""Persistence package.

Importing this package registers every ORM mapper with Base.metadata
(required for Alembic autogenerate) and exports the repository
implementations and the wiring factory.
"""

from produto.infrastructure.persistence.models import *  # noqa: F401, F403
from produto.infrastructure.persistence.models import __all__ as _orm_all
from produto.infrastructure.persistence.repositories import (
    Repositories,
    SqlProdutoRepository,
    get_repositories,
)

__all__ = _orm_all + [
    "Repositories",
    "SqlProdutoRepository",
    "get_repositories",
]
