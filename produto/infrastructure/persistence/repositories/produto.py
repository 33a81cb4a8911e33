"""SQLAlchemy implementation of ProdutoRepository."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from produto.domain.models.produto import Produto as DomainProduto
from produto.domain.repositories.produto import ProdutoRepository
from produto.infrastructure.persistence.models.produto import Produto as OrmProduto

logger = logging.getLogger(__name__)


class SqlProdutoRepository(ProdutoRepository):
    def __init__(self, session: Session) -> None:
        self._session = session

    @staticmethod
    def _to_domain(row: OrmProduto) -> DomainProduto:
        return DomainProduto(id=row.id, nome=row.nome, preco=row.preco)

    def _row(self, id: int) -> OrmProduto | None:
        stmt = select(OrmProduto).where(OrmProduto.id == id)
        return self._session.execute(stmt).scalar_one_or_none()

    def get_by_id(self, id: int) -> DomainProduto | None:
        row = self._row(id)
        return self._to_domain(row) if row else None

    def get_all(self) -> list[DomainProduto]:
        stmt = select(OrmProduto).order_by(OrmProduto.id)
        result = self._session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars()]

    def save(self, entity: DomainProduto) -> None:
        row = OrmProduto(id=entity.id, nome=entity.nome, preco=entity.preco)
        self._session.add(row)

    def update(self, entity: DomainProduto) -> None:
        row = self._row(entity.id)
        if row is None:
            raise ValueError(f"Produto {entity.id} not found")
        row.nome = entity.nome
        row.preco = entity.preco

    def delete(self, id: int) -> None:
        row = self._row(id)
        if row is None:
            logger.debug("delete(%s): no row, nothing to do", id)
            return
        self._session.delete(row)
