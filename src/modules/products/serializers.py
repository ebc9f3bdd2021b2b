"""Product DRF serializers for API output.

The serializer operates at the Interface layer (API Views) and only
renders responses.  Input is validated by the Pydantic DTOs in
``dtos.py`` before reaching the Service Layer.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    class Meta:
        model = Product
        fields = ["id", "name", "description", "price", "stock"]
        read_only_fields = fields
