"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the unit-of-work contract that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.

Mutations are *staged* (``add`` / ``mark_updated`` / ``mark_deleted``)
and only reach durable storage when ``commit()`` is called, so a use
case performs exactly one persistence round-trip.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar
from uuid import UUID

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``).
    """

    @abstractmethod
    def get_by_id(self, id: UUID | str) -> Optional[T]:
        """Retrieve an entity by its primary key, ``None`` if absent."""

    @abstractmethod
    def list_all(self) -> List[T]:
        """Return a snapshot of every entity (storage-defined order)."""

    @abstractmethod
    def add(self, entity: T) -> None:
        """Stage a new entity for insertion."""

    @abstractmethod
    def mark_updated(self, entity: T) -> None:
        """Stage a loaded, mutated entity for persistence."""

    @abstractmethod
    def mark_deleted(self, entity: T) -> None:
        """Stage an entity for removal."""

    @abstractmethod
    def commit(self) -> int:
        """Flush staged changes as one unit and return affected rows.

        Raises:
            PersistenceError: if the storage engine rejects the write.
        """
