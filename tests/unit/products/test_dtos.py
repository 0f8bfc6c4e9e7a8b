"""Unit tests for Product DTOs and the entity → DTO mapper.

Covers:
- Type coercion and required fields on input DTOs.
- Frozen immutability.
- ``to_product_dto`` copies every field.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.products.dtos import CreateProductDTO, ProductDTO, UpdateProductDTO
from modules.products.mappers import to_product_dto
from modules.products.models import Product

pytestmark = pytest.mark.unit


class TestCreateProductDTO:
    def test_coerces_types(self):
        dto = CreateProductDTO(name="Widget", price="9.99", stock="5")
        assert dto.price == Decimal("9.99")
        assert dto.stock == 5

    def test_description_defaults_to_empty(self):
        dto = CreateProductDTO(name="Widget", price=Decimal("1.00"), stock=0)
        assert dto.description == ""

    def test_rejects_non_numeric_price(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(name="Widget", price="cheap", stock=1)

    def test_does_not_enforce_business_rules(self):
        dto = CreateProductDTO(name="", price=Decimal("-1"), stock=-1)
        assert dto.price == Decimal("-1")

    def test_is_immutable(self):
        dto = CreateProductDTO(name="Widget", price=Decimal("1.00"), stock=0)
        with pytest.raises(ValidationError):
            dto.name = "Changed"

    @pytest.mark.parametrize("price", ["9.999", "1e20", "12345678901234567.00"])
    def test_rejects_price_outside_column_shape(self, price):
        with pytest.raises(ValidationError) as exc_info:
            CreateProductDTO(name="Widget", price=price, stock=1)
        assert exc_info.value.errors()[0]["loc"] == ("price",)

    def test_accepts_largest_column_price(self):
        dto = CreateProductDTO(name="Widget", price="9999999999999999.99", stock=1)
        assert dto.price == Decimal("9999999999999999.99")


class TestUpdateProductDTO:
    def test_requires_name_price_and_stock(self):
        with pytest.raises(ValidationError):
            UpdateProductDTO(name="Widget")

    @pytest.mark.parametrize("price", ["9.999", "1e20"])
    def test_rejects_price_outside_column_shape(self, price):
        with pytest.raises(ValidationError):
            UpdateProductDTO(name="Widget", price=price, stock=1)

    def test_is_immutable(self):
        dto = UpdateProductDTO(name="Widget", price=Decimal("1.00"), stock=0)
        with pytest.raises(ValidationError):
            dto.stock = 10


class TestToProductDTO:
    def test_copies_all_fields(self):
        product = Product(
            name="Output Widget",
            description="A widget",
            price=Decimal("19.99"),
            stock=10,
        )
        dto = to_product_dto(product)

        assert isinstance(dto, ProductDTO)
        assert dto.id == product.id
        assert dto.name == "Output Widget"
        assert dto.description == "A widget"
        assert dto.price == Decimal("19.99")
        assert dto.stock == 10
        assert dto.created_at == product.created_at

    def test_view_has_no_mutation_methods(self):
        product = Product(name="W", price=Decimal("1.00"), stock=1)
        dto = to_product_dto(product)
        assert not hasattr(dto, "update")
        with pytest.raises(ValidationError):
            dto.name = "Changed"
