"""Domain model package.

Domain objects are pure Pydantic models with no ORM or infrastructure
dependencies.
"""

from .produto import Produto

__all__ = ["Produto"]
