"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Input failures are translated into 400 responses and a missing product
on retrieve into 404; every other exception is left to propagate to
``ErrorHandlingMiddleware``.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

import structlog
from drf_spectacular.utils import extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import ProductValidationError
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductInputSerializer, ProductSerializer
from modules.products.services import ProductService
from modules.products.validators import ensure_valid_create_product

logger = structlog.get_logger(__name__)


def _validation_response(errors: Iterable[Dict[str, Any]]) -> Response:
    return Response(
        {"type": "validation_error", "errors": list(errors)},
        status=status.HTTP_400_BAD_REQUEST,
    )


def _pydantic_errors(exc: PydanticValidationError) -> List[Dict[str, Any]]:
    return [
        {
            "code": error["type"],
            "detail": error["msg"],
            "attr": ".".join(str(part) for part in error["loc"]) or None,
        }
        for error in exc.errors()
    ]


def _rule_errors(exc: ProductValidationError) -> List[Dict[str, Any]]:
    return [
        {"code": "invalid", "detail": v.message, "attr": v.field}
        for v in exc.violations
    ]


class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).  DRF
    builds a new viewset per request, so each request gets its own
    unit of work.
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(responses=ProductSerializer(many=True))
    def list(self, request: Request) -> Response:
        """GET /api/v1/products/"""
        products = self._service.get_all()
        return Response(ProductSerializer(products, many=True).data)

    @extend_schema(responses={200: ProductSerializer, 404: None})
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}/"""
        product = self._service.get_by_id(pk) if pk is not None else None
        if product is None:
            return Response(
                {"detail": "Product not found."},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(request=ProductInputSerializer, responses={201: ProductSerializer})
    def create(self, request: Request) -> Response:
        """POST /api/v1/products/"""
        data = request.data
        if not hasattr(data, "get"):
            return _validation_response(
                [{"code": "invalid", "detail": "Expected a JSON object.", "attr": None}]
            )

        try:
            dto = CreateProductDTO(
                name=data.get("name", ""),
                description=data.get("description", ""),
                price=data.get("price", 0),
                stock=data.get("stock", 0),
            )
        except PydanticValidationError as exc:
            return _validation_response(_pydantic_errors(exc))

        try:
            ensure_valid_create_product(dto)
        except ProductValidationError as exc:
            logger.warning("product.validation_failed", errors=str(exc))
            return _validation_response(_rule_errors(exc))

        product = self._service.create(dto)
        out = ProductSerializer(product)
        return Response(out.data, status=status.HTTP_201_CREATED)

    @extend_schema(request=ProductInputSerializer, responses={204: None})
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/products/{pk}/

        Answers 204 whether or not the product exists.
        """
        data = request.data
        if not hasattr(data, "get"):
            return _validation_response(
                [{"code": "invalid", "detail": "Expected a JSON object.", "attr": None}]
            )

        try:
            dto = UpdateProductDTO(
                name=data.get("name", ""),
                description=data.get("description", ""),
                price=data.get("price", 0),
                stock=data.get("stock", 0),
            )
        except PydanticValidationError as exc:
            return _validation_response(_pydantic_errors(exc))

        if pk is not None:
            self._service.update(pk, dto)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses={204: None})
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}/

        Answers 204 whether or not the product exists.
        """
        if pk is not None:
            self._service.delete(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
