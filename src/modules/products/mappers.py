"""Entity → DTO mapping for the Product aggregate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.products.dtos import ProductDTO

if TYPE_CHECKING:
    from modules.products.models import Product


def to_product_dto(product: Product) -> ProductDTO:
    """Build a read view from a Product instance."""
    return ProductDTO(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.price,
        stock=product.stock,
        created_at=product.created_at,
    )
