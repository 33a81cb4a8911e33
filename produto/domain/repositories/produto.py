"""Produto repository interface."""

from __future__ import annotations

from abc import abstractmethod

from produto.domain.models.produto import Produto

from .base import Repository


class ProdutoRepository(Repository[Produto, int]):
    """Read/write interface for Produto entities.

    get_by_id returns None when no match exists.  Implementations do not
    validate business rules; ProdutoService does that before calling in.
    """

    @abstractmethod
    def get_by_id(self, id: int) -> Produto | None:
        """Return the produto with the given id, or None."""

    @abstractmethod
    def get_all(self) -> list[Produto]:
        """Return all produtos ordered by id."""
