"""Produto ORM model."""

from __future__ import annotations

from sqlalchemy import Double, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from produto.infrastructure.database import Base


class Produto(Base):
    """Stored product row.

    nome and preco are NOT NULL; blank names and non-positive prices are
    rejected at the application layer before a row is written.
    """

    __tablename__ = "produtos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    nome: Mapped[str] = mapped_column(Text, nullable=False)
    preco: Mapped[float] = mapped_column(Double, nullable=False)
