"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into appropriate
HTTP status codes; the view never swallows generic exceptions.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.products.dtos import ProductRequestDTO
from modules.products.exceptions import ProductAlreadyExists, ProductNotFound
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService


def _detail(message: str, status_code: int) -> Response:
    return Response({"detail": message}, status=status_code)


def _build_request_dto(data: Any) -> ProductRequestDTO:
    """Build the request DTO from a parsed body.

    Raises:
        ValueError: if the body is not a JSON object, or if pydantic
            rejects a field (``ValidationError`` subclasses ``ValueError``).
    """
    if not isinstance(data, Mapping):
        raise ValueError("Request body must be a JSON object.")
    return ProductRequestDTO(
        name=data.get("name", ""),
        brand=data.get("brand", ""),
        price=data.get("price"),
        stock=data.get("stock"),
    )


class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer.
    """

    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/products/"""
        try:
            products = self._service.get_all_products()
        except ProductNotFound as exc:
            return _detail(str(exc), status.HTTP_404_NOT_FOUND)
        return Response([p.model_dump(mode="json") for p in products])

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}/"""
        try:
            product = self._service.get_product_by_id(int(pk))
        except ProductNotFound as exc:
            return _detail(str(exc), status.HTTP_404_NOT_FOUND)
        return Response(product.model_dump(mode="json"))

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/products/"""
        try:
            dto = _build_request_dto(request.data)
        except (PydanticValidationError, ValueError) as exc:
            return _detail(str(exc), status.HTTP_400_BAD_REQUEST)

        try:
            product = self._service.create_new_product(dto)
        except ProductAlreadyExists as exc:
            return _detail(str(exc), status.HTTP_409_CONFLICT)

        return Response(product.model_dump(mode="json"), status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/products/{pk}/"""
        try:
            dto = _build_request_dto(request.data)
        except (PydanticValidationError, ValueError) as exc:
            return _detail(str(exc), status.HTTP_400_BAD_REQUEST)

        try:
            product = self._service.update_product(int(pk), dto)
        except ProductNotFound as exc:
            return _detail(str(exc), status.HTTP_404_NOT_FOUND)
        except ProductAlreadyExists as exc:
            return _detail(str(exc), status.HTTP_409_CONFLICT)

        return Response(product.model_dump(mode="json"))

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}/"""
        try:
            self._service.delete_product(int(pk))
        except ProductNotFound as exc:
            return _detail(str(exc), status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)
