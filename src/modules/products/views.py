"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Domain and validation exceptions are *not* caught here: they propagate
to ``modules.core.exception_handler``, the single place that maps an
error kind to an HTTP status code.
"""

from __future__ import annotations

from decimal import Decimal

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.products.dtos import PartialProductInputDTO, ProductInputDTO
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService


class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /products"""
        products = self._service.list_products()
        return Response(ProductSerializer(products, many=True).data)

    def retrieve(self, request: Request, pk: int) -> Response:
        """GET /products/{pk}"""
        product = self._service.get_product(pk)
        return Response(ProductSerializer(product).data)

    def retrieve_by_name(self, request: Request, name: str) -> Response:
        """GET /products/name/{name}"""
        product = self._service.get_product_by_name(name)
        return Response(ProductSerializer(product).data)

    def retrieve_by_price(self, request: Request, price: Decimal) -> Response:
        """GET /products/price/{price}"""
        product = self._service.get_product_by_price(price)
        return Response(ProductSerializer(product).data)

    def retrieve_by_stock(self, request: Request, stock: int) -> Response:
        """GET /products/stock/{stock}"""
        product = self._service.get_product_by_stock(stock)
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /products/create"""
        dto = ProductInputDTO.model_validate(request.data)
        product = self._service.create_product(dto)
        return Response(
            ProductSerializer(product).data, status=status.HTTP_201_CREATED
        )

    def update(self, request: Request, pk: int) -> Response:
        """PUT /products/update/{pk}"""
        dto = ProductInputDTO.model_validate(request.data)
        product = self._service.update_product(pk, dto)
        return Response(ProductSerializer(product).data)

    def partial_update(self, request: Request, pk: int) -> Response:
        """PATCH /products/update/{pk}"""
        dto = PartialProductInputDTO.model_validate(request.data)
        product = self._service.update_product_partial(pk, dto)
        return Response(ProductSerializer(product).data)

    def destroy(self, request: Request, pk: int) -> Response:
        """DELETE /products/{pk}"""
        self._service.delete_product(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
