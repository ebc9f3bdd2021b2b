"""Product URL configuration.

Routes are bound explicitly rather than through a router because the
public paths (``/products/create``, ``/products/update/{id}``, ...) do
not follow DRF's default list/detail layout.
"""

from __future__ import annotations

from django.urls import path, register_converter

from modules.products.converters import DecimalConverter
from modules.products.views import ProductViewSet

register_converter(DecimalConverter, "decimal")

product_list = ProductViewSet.as_view({"get": "list"})
product_create = ProductViewSet.as_view({"post": "create"})
product_detail = ProductViewSet.as_view({"get": "retrieve", "delete": "destroy"})
product_update = ProductViewSet.as_view({"put": "update", "patch": "partial_update"})
product_by_name = ProductViewSet.as_view({"get": "retrieve_by_name"})
product_by_price = ProductViewSet.as_view({"get": "retrieve_by_price"})
product_by_stock = ProductViewSet.as_view({"get": "retrieve_by_stock"})

urlpatterns = [
    path("products", product_list, name="product-list"),
    path("products/create", product_create, name="product-create"),
    path("products/<int:pk>", product_detail, name="product-detail"),
    path("products/update/<int:pk>", product_update, name="product-update"),
    path("products/name/<str:name>", product_by_name, name="product-by-name"),
    path("products/price/<decimal:price>", product_by_price, name="product-by-price"),
    path("products/stock/<int:stock>", product_by_stock, name="product-by-stock"),
]
