"""Product entity.

Identity (``id``) and ``created_at`` are generated when the instance is
constructed and never change afterwards.  The four mutable attributes
change only through :meth:`Product.update`, which replaces them together.

Range rules (positive price, non-negative stock, name length) are enforced
at the input boundary by ``modules.products.validators``, not here.
"""

from __future__ import annotations

from decimal import Decimal

from django.db import models

from modules.core.models import BaseModel


class Product(BaseModel):
    """Product aggregate root."""

    name = models.CharField(max_length=100)
    description = models.TextField(blank=True, default="")
    price = models.DecimalField(max_digits=18, decimal_places=2)
    stock = models.IntegerField(default=0)

    class Meta:
        db_table = "products"

    def update(
        self,
        name: str,
        description: str,
        price: Decimal,
        stock: int,
    ) -> None:
        """Replace all mutable attributes in one step."""
        self.name = name
        self.description = description
        self.price = price
        self.stock = stock

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"
