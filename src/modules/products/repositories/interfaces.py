"""Product repository interface.

Extends ``IRepository[Product]``; the service layer only ever sees this
contract.  ``get_by_id`` returns ``None`` for unknown ids, which is how
the service tells "not found" apart from storage failures.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def list(self) -> List["Product"]:
        """Return all products in storage order."""
