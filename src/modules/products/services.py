"""Product service layer (Use Cases).

Orchestrates the product workflow, delegating persistence to the
injected ``IProductRepository``.

Every command validates first and writes once: a request that breaks a
rule, or carries an unusable file, never reaches ``repository.save``.

Business rules enforced here:
- Name and description must be non-empty; price must be greater than zero
  (checked in that order, see ``validation.validate_product``).
- Price is stored with two decimals, rounded up.
- An uploaded file must have a safe name and readable bytes.
- Edit replaces name, description and price, and replaces the image only
  when a new file is supplied.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog
from django.db import transaction

from modules.products.exceptions import ProductImageNotFound, ProductNotFound
from modules.products.models import Product, ProductImage
from modules.products.uploads import read_image
from modules.products.validation import validate_product

if TYPE_CHECKING:
    from modules.products.dtos import ProductInputDTO
    from modules.products.repositories.interfaces import IProductRepository
    from modules.products.uploads import Upload

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    Holds no state between calls.
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(
        self, dto: ProductInputDTO, file: Optional[Upload] = None
    ) -> Product:
        """Create a product, absorbing ``file`` as its image when given.

        Raises:
            BadProductName, BadProductDescription, BadProductPrice:
                the fields break a rule.
            InvalidFileException: the file name is unsafe or unreadable.
        """
        fields = validate_product(dto.name, dto.description, dto.price)
        image = read_image(file)

        product = Product(
            name=fields.name,
            description=fields.description,
            price=fields.price,
        )
        product.image = image

        product = self._repo.save(product)
        logger.info(
            "product.created",
            product_id=str(product.id),
            has_image=image is not None,
        )
        return product

    @transaction.atomic
    def edit_product(
        self, id: str, dto: ProductInputDTO, file: Optional[Upload] = None
    ) -> Product:
        """Overwrite name, description and price of product ``id``.

        The existing image is kept unless ``file`` is supplied, in which
        case it is replaced as a whole.

        Raises:
            ProductNotFound: if the product does not exist.
            BadProductName, BadProductDescription, BadProductPrice:
                the merged product breaks a rule.
            InvalidFileException: the file name is unsafe or unreadable.
        """
        existing = self._repo.get_by_id(id)
        if not existing:
            raise ProductNotFound(f"Product {id} not found.")

        log = logger.bind(product_id=str(id))

        fields = validate_product(dto.name, dto.description, dto.price)
        image = read_image(file)

        existing.name = fields.name
        existing.description = fields.description
        existing.price = fields.price
        if image is not None:
            existing.image = image

        product = self._repo.save(existing)
        log.info("product.updated", image_replaced=image is not None)
        return product

    @transaction.atomic
    def delete_product(self, id: str) -> None:
        """Delete a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        self._repo.delete(id)
        logger.info("product.deleted", product_id=str(id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        """Return every product, in repository order."""
        return self._repo.list()

    def get_product(self, id: str) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        logger.info("product.retrieved", product_id=str(id))
        return product

    def get_product_image(self, id: str) -> ProductImage:
        """Return the image attached to product ``id``.

        Raises:
            ProductNotFound: if the product does not exist.
            ProductImageNotFound: if the product has no image.
        """
        image = self.get_product(id).image
        if image is None:
            raise ProductImageNotFound(f"Product {id} has no image.")
        return image
