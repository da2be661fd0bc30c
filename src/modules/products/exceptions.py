"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations


class ProductValidationError(Exception):
    """Base class for the create/edit field rules."""


class BadProductName(ProductValidationError):
    """Name is missing or empty."""


class BadProductDescription(ProductValidationError):
    """Description is missing or empty."""


class BadProductPrice(ProductValidationError):
    """Price is missing, zero or negative."""


class InvalidFileException(Exception):
    """The uploaded file has an unsafe name or its bytes could not be read."""


class ProductNotFound(Exception):
    """The requested product does not exist."""


class ProductImageNotFound(Exception):
    """The product exists but has no image attached."""
