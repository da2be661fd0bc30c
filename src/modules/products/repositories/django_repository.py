"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: ``get_by_id`` returns
``None`` instead of raising HTTP-level exceptions — the Service Layer
decides how to translate a missing entity into an API response.
"""

from __future__ import annotations

from typing import List, Optional

import structlog

from django.core.exceptions import ValidationError
from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self) -> List[Product]:
        return list(Product.objects.all())

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        logger.info(
            "product.saved",
            product_id=str(entity.id),
            has_image=entity.has_image,
        )
        return entity

    @transaction.atomic
    def delete(self, id: str) -> None:
        """Permanently delete a product by ID; unknown IDs are a no-op."""
        deleted, _ = Product.objects.filter(id=id).delete()
        logger.info("product.removed", product_id=str(id), rows=deleted)
