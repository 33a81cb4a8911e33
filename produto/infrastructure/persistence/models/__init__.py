"""ORM model registry — importing this package registers every mapper class
with Base.metadata before Alembic or SQLAlchemy runs.
"""

from produto.infrastructure.persistence.models.produto import Produto

__all__ = ["Produto"]
