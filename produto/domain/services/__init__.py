"""Domain services package."""

from .produto import ProdutoService

__all__ = ["ProdutoService"]
