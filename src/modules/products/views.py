"""Product API views.

Exposes the ``ProductService`` via HTTP using DRF ViewSets.
Domain exceptions are caught and translated into appropriate
HTTP status codes — the view never swallows generic exceptions.

Create and edit accept ``multipart/form-data`` (the image travels in the
``file`` field) as well as plain JSON without an image.
"""

from __future__ import annotations

from collections.abc import Mapping

from django.http import HttpResponse
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.mixins import ListModelMixin
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.products.dtos import ProductInputDTO
from modules.products.exceptions import (
    InvalidFileException,
    ProductImageNotFound,
    ProductNotFound,
    ProductValidationError,
)
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService

UPLOAD_FIELD = "file"


def _error(exc: Exception, http_status: int) -> Response:
    return Response(
        {"code": type(exc).__name__, "detail": str(exc)},
        status=http_status,
    )


def _not_found() -> Response:
    return Response(
        {"code": ProductNotFound.__name__, "detail": "Product not found."},
        status=status.HTTP_404_NOT_FOUND,
    )


class ProductViewSet(ListModelMixin, GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    Does **not** extend ``ModelViewSet`` — all ORM access goes through
    the service/repository layer.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def get_queryset(self):
        return self._service.list_products()

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}/"""
        if pk is None:
            return _not_found()
        try:
            product = self._service.get_product(pk)
        except ProductNotFound:
            return _not_found()
        serializer = ProductSerializer(product, context={"request": request})
        return Response(serializer.data)

    @action(detail=True, methods=["get"], url_path="image")
    def image(self, request: Request, pk: str | None = None) -> HttpResponse:
        """GET /api/v1/products/{pk}/image/"""
        if pk is None:
            return _not_found()
        try:
            image = self._service.get_product_image(pk)
        except ProductNotFound:
            return _not_found()
        except ProductImageNotFound as exc:
            return _error(exc, status.HTTP_404_NOT_FOUND)

        response = HttpResponse(image.data, content_type=image.content_type)
        response["Content-Disposition"] = f'inline; filename="{image.file_name}"'
        response["Content-Length"] = str(image.size)
        return response

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def _read_input(self, request: Request) -> ProductInputDTO:
        data = request.data
        if not isinstance(data, Mapping):
            raise ValueError("Request body must be a JSON object.")
        return ProductInputDTO(
            name=data.get("name"),
            description=data.get("description"),
            price=data.get("price"),
        )

    def create(self, request: Request) -> Response:
        """POST /api/v1/products/"""
        try:
            dto = self._read_input(request)
        except (PydanticValidationError, ValueError) as exc:
            return Response(
                {"code": "BadRequest", "detail": str(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            product = self._service.create_product(
                dto, request.FILES.get(UPLOAD_FIELD)
            )
        except (ProductValidationError, InvalidFileException) as exc:
            return _error(exc, status.HTTP_400_BAD_REQUEST)

        out = ProductSerializer(product, context={"request": request})
        return Response(out.data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT/PATCH /api/v1/products/{pk}/

        Name, description and price are always overwritten; send all three.
        """
        try:
            dto = self._read_input(request)
        except (PydanticValidationError, ValueError) as exc:
            return Response(
                {"code": "BadRequest", "detail": str(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        if pk is None:
            return _not_found()
        try:
            product = self._service.edit_product(
                pk, dto, request.FILES.get(UPLOAD_FIELD)
            )
        except ProductNotFound:
            return _not_found()
        except (ProductValidationError, InvalidFileException) as exc:
            return _error(exc, status.HTTP_400_BAD_REQUEST)

        out = ProductSerializer(product, context={"request": request})
        return Response(out.data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/products/{pk}/"""
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}/"""
        if pk is None:
            return _not_found()
        try:
            self._service.delete_product(pk)
        except ProductNotFound:
            return _not_found()
        return Response(status=status.HTTP_204_NO_CONTENT)
