"""Product DRF serializers for API output and schema generation.

The serializer operates at the Interface layer (API Views) and renders
``ProductDTO`` instances.  Business logic lives in the Service Layer,
which receives Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers


class ProductSerializer(serializers.Serializer):
    """Read serializer for the Product resource."""

    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField()
    description = serializers.CharField(allow_blank=True)
    price = serializers.DecimalField(max_digits=18, decimal_places=2)
    stock = serializers.IntegerField()
    created_at = serializers.DateTimeField(read_only=True)


class ProductInputSerializer(serializers.Serializer):
    """Request body shape for create and update (documentation only)."""

    name = serializers.CharField()
    description = serializers.CharField(allow_blank=True, required=False)
    price = serializers.DecimalField(max_digits=18, decimal_places=2)
    stock = serializers.IntegerField()
