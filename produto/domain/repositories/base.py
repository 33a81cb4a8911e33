"""Generic repository base interface.

Repository[T, K] is the root abstraction for data-access interfaces in this
domain layer.  Concrete implementations live in
produto/infrastructure/persistence/ and are wired at the application
boundary.

Design notes:
  - All methods are synchronous; each call blocks until the store answers.
  - T is the domain model type (never an ORM row or DTO); K is its key type.
  - save(), update() and delete() return None — the caller already holds
    the entity it passed in.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
K = TypeVar("K")


class Repository(ABC, Generic[T, K]):
    """Abstract CRUD interface for a domain entity."""

    @abstractmethod
    def get_by_id(self, id: K) -> T | None:
        """Return the entity with the given primary key, or None if not found."""

    @abstractmethod
    def get_all(self) -> list[T]:
        """Return every stored entity."""

    @abstractmethod
    def save(self, entity: T) -> None:
        """Persist a new entity."""

    @abstractmethod
    def update(self, entity: T) -> None:
        """Persist changes to an existing entity."""

    @abstractmethod
    def delete(self, id: K) -> None:
        """Remove the entity with the given primary key."""
