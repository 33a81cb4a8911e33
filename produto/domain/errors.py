"""Domain exceptions raised by the service layer.

Messages are fixed Portuguese sentences; callers match on their prefixes.
"""

from __future__ import annotations


class ProdutoError(Exception):
    """Base class for every business-rule violation on a Produto."""


class InvalidArgumentError(ProdutoError, ValueError):
    """A Produto field breaks a business rule (blank nome, preco <= 0)."""


class NullArgumentError(InvalidArgumentError):
    """No Produto was supplied at all."""


class InvalidOperationError(ProdutoError):
    """The mutation target does not exist in the repository."""
