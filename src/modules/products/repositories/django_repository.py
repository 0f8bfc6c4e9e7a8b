"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Look-ups follow the Null Object pattern: methods return ``None``
instead of raising HTTP-level exceptions; the Service Layer decides
how to translate a missing entity into an API response.

Writes are staged in memory and flushed by ``commit()`` inside a single
``transaction.atomic()`` block; a failed flush rolls back every staged
change.
"""

from __future__ import annotations

from typing import List, Optional, Tuple
from uuid import UUID

import structlog

from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction

from modules.core.exceptions import PersistenceError
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

_ADD = "add"
_UPDATE = "update"
_DELETE = "delete"


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def __init__(self) -> None:
        self._pending: List[Tuple[str, Product]] = []

    def get_by_id(self, id: UUID | str) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list_all(self) -> List[Product]:
        return list(Product.objects.all())

    def add(self, entity: Product) -> None:
        self._pending.append((_ADD, entity))

    def mark_updated(self, entity: Product) -> None:
        self._pending.append((_UPDATE, entity))

    def mark_deleted(self, entity: Product) -> None:
        self._pending.append((_DELETE, entity))

    def commit(self) -> int:
        """Flush every staged change in one transaction.

        Raises:
            PersistenceError: if the database rejects any write.  Nothing
                staged in this unit is persisted in that case.
        """
        pending, self._pending = self._pending, []
        if not pending:
            return 0

        affected = 0
        try:
            with transaction.atomic():
                for operation, entity in pending:
                    affected += self._apply(operation, entity)
        except DatabaseError as exc:
            logger.error(
                "product_repository.commit_failed",
                staged=len(pending),
                error=str(exc),
            )
            raise PersistenceError(str(exc)) from exc

        logger.info("product_repository.committed", affected=affected)
        return affected

    @staticmethod
    def _apply(operation: str, entity: Product) -> int:
        if operation == _ADD:
            entity.save(force_insert=True)
            return 1
        if operation == _UPDATE:
            # Raises DatabaseError when the row no longer exists.
            entity.save(force_update=True)
            return 1
        deleted, _ = entity.delete()
        return deleted
