"""Product model with price normalisation and an optional image.

Invariants:
- ``name`` and ``description`` are never empty on a stored product.
- ``price`` is strictly positive and always stored with two decimals,
  rounded up (see ``validation.normalize_price``).
- The image is one composite value: file name, content type and bytes
  are either all set or all null.  Code reads and writes them only through
  ``Product.image``; a CHECK constraint guards the table as well.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel
from modules.products.validation import (
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
    normalize_price,
)

FILE_NAME_MAX_LENGTH = 255


@dataclass(frozen=True)
class ProductImage:
    """An uploaded image absorbed into a product."""

    file_name: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


_IMAGE_ABSENT = (
    models.Q(image_file_name__isnull=True)
    & models.Q(image_content_type__isnull=True)
    & models.Q(image_data__isnull=True)
)
_IMAGE_PRESENT = (
    models.Q(image_file_name__isnull=False)
    & models.Q(image_content_type__isnull=False)
    & models.Q(image_data__isnull=False)
)


class Product(BaseModel):
    """Product aggregate root."""

    name = models.TextField()
    description = models.TextField()
    price = models.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    image_file_name = models.CharField(  # noqa: DJ01
        max_length=FILE_NAME_MAX_LENGTH, null=True, blank=True, default=None
    )
    image_content_type = models.CharField(  # noqa: DJ01
        max_length=255, null=True, blank=True, default=None
    )
    image_data = models.BinaryField(null=True, blank=True, default=None)

    class Meta:
        db_table = "products"
        ordering = ["created_at", "id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="products_price_positive",
            ),
            models.CheckConstraint(
                condition=_IMAGE_ABSENT | _IMAGE_PRESENT,
                name="products_image_all_or_nothing",
            ),
        ]

    # ------------------------------------------------------------------
    # Image
    # ------------------------------------------------------------------

    @property
    def image(self) -> Optional[ProductImage]:
        if self.image_data is None:
            return None
        # PostgreSQL hands back a memoryview, SQLite hands back bytes
        return ProductImage(
            file_name=self.image_file_name,
            content_type=self.image_content_type,
            data=bytes(self.image_data),
        )

    @image.setter
    def image(self, value: Optional[ProductImage]) -> None:
        if value is None:
            self.image_file_name = None
            self.image_content_type = None
            self.image_data = None
            return
        self.image_file_name = value.file_name
        self.image_content_type = value.content_type
        self.image_data = value.data

    @property
    def has_image(self) -> bool:
        return self.image_data is not None

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, *args, **kwargs) -> None:
        if self.price is not None:
            self.price = normalize_price(Decimal(str(self.price)))
        super().save(*args, **kwargs)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.name} ({self.price})"
