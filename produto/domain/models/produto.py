"""Produto domain model.

A pure domain object — no ORM or persistence concerns.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Produto(BaseModel):
    """A product offered for sale.

    The model deliberately accepts a missing or blank nome and any preco:
    business rules (non-blank nome, preco > 0) are enforced by
    ProdutoService so that callers receive its InvalidArgumentError rather
    than a pydantic ValidationError.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    nome: str | None = None
    preco: float
