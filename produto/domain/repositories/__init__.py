"""Domain repository interfaces.

Abstractions are defined here with abc.ABC and @abstractmethod.
Concrete implementations live in produto/infrastructure/persistence/.

Import from this package rather than individual modules.
"""

from .base import Repository
from .produto import ProdutoRepository

__all__ = ["Repository", "ProdutoRepository"]
