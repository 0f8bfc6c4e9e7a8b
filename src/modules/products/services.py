"""Product service layer (Use Cases).

Orchestrates the Product lifecycle, delegating persistence to the
injected ``IProductRepository``.  Each mutating use case stages its
change and commits exactly once; repository failures propagate
unchanged to the caller.

Updating or deleting an unknown id is a silent no-op: nothing is staged,
nothing is committed and no error is reported.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional
from uuid import UUID

import structlog

from modules.products.mappers import to_product_dto
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, ProductDTO, UpdateProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, dto: CreateProductDTO) -> ProductDTO:
        """Create a new product; id and ``created_at`` are generated here.

        Raises:
            PersistenceError: if the commit is rejected.
        """
        product = Product(
            name=dto.name,
            description=dto.description,
            price=dto.price,
            stock=dto.stock,
        )
        self._repo.add(product)
        self._repo.commit()
        logger.info("product.created", product_id=str(product.id))
        return to_product_dto(product)

    def update(self, id: UUID | str, dto: UpdateProductDTO) -> None:
        """Replace all mutable fields of an existing product."""
        product = self._repo.get_by_id(id)
        if product is None:
            logger.info("product.update_skipped", product_id=str(id))
            return

        product.update(
            name=dto.name,
            description=dto.description,
            price=dto.price,
            stock=dto.stock,
        )
        self._repo.mark_updated(product)
        self._repo.commit()
        logger.info("product.updated", product_id=str(id))

    def delete(self, id: UUID | str) -> None:
        """Remove an existing product permanently."""
        product = self._repo.get_by_id(id)
        if product is None:
            logger.info("product.delete_skipped", product_id=str(id))
            return

        self._repo.mark_deleted(product)
        self._repo.commit()
        logger.info("product.deleted", product_id=str(id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_by_id(self, id: UUID | str) -> Optional[ProductDTO]:
        product = self._repo.get_by_id(id)
        if product is None:
            return None
        return to_product_dto(product)

    def get_all(self) -> List[ProductDTO]:
        return [to_product_dto(product) for product in self._repo.list_all()]
