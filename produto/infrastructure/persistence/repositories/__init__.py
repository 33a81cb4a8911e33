"""Concrete SQLAlchemy repository implementations.

Exports the SqlRepository classes and the get_repositories() factory for
wiring at the application boundary.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from .produto import SqlProdutoRepository


@dataclass
class Repositories:
    """All repository instances bound to a single Session."""

    produtos: SqlProdutoRepository


def get_repositories(session: Session) -> Repositories:
    """Construct all repositories bound to the given session.

        with SessionLocal() as session, session.begin():
            repos = get_repositories(session)
            ProdutoService(repos.produtos).salvar_produto(produto)
    """
    return Repositories(produtos=SqlProdutoRepository(session))


__all__ = [
    "SqlProdutoRepository",
    "Repositories",
    "get_repositories",
]
