"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the
Service layer.  DTOs are immutable (``frozen=True``) and only coerce
types; business rules live in ``validators.py``.

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for full product replacement.
- ``ProductDTO``: read view with all product fields.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    price: Decimal = Field(max_digits=18, decimal_places=2)
    stock: int


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    Every field is required: an update replaces all mutable attributes.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    price: Decimal = Field(max_digits=18, decimal_places=2)
    stock: int


class ProductDTO(BaseModel):
    """Immutable DTO for product API responses."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    description: str
    price: Decimal
    stock: int
    created_at: datetime
