"""Unit tests for the Product DRF serializer.

Covers:
- Field presence and read-only constraints.
- Serialization of a Product instance.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.models import Product
from modules.products.serializers import ProductSerializer

pytestmark = pytest.mark.unit


def _make_product(**overrides) -> Product:
    defaults = {
        "name": "Widget",
        "price": Decimal("19.99"),
        "stock": 10,
    }
    defaults.update(overrides)
    product = Product(**defaults)
    product.save()
    return product


class TestSerializerFields:
    def test_expected_fields(self):
        serializer = ProductSerializer()
        assert set(serializer.fields.keys()) == {
            "id",
            "name",
            "description",
            "price",
            "stock",
        }

    def test_all_fields_read_only(self):
        serializer = ProductSerializer()
        for field in serializer.fields.values():
            assert field.read_only is True


class TestSerialization:
    def test_serializes_product(self):
        product = _make_product(description="A fine widget")
        data = ProductSerializer(product).data
        assert data["id"] == product.id
        assert data["name"] == "Widget"
        assert data["description"] == "A fine widget"
        assert data["stock"] == 10

    def test_price_is_rendered_as_fixed_point_string(self):
        product = _make_product(price=Decimal("9.90"))
        data = ProductSerializer(product).data
        assert data["price"] == "9.90"

    def test_serializes_many(self):
        _make_product(name="A")
        _make_product(name="B")
        data = ProductSerializer(Product.objects.all(), many=True).data
        assert [item["name"] for item in data] == ["A", "B"]
