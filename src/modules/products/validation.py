"""Field rules shared by product creation and edition.

``validate_product`` is a pure function: it either returns a
``ValidatedProduct`` whose price is already normalised, or raises the
exception for the first rule that fails.  Rules are checked in a fixed
order (name, description, price) so callers always see the same error
for the same input.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_CEILING, Decimal, InvalidOperation
from typing import Any, Optional

from modules.products.exceptions import (
    BadProductDescription,
    BadProductName,
    BadProductPrice,
)

PRICE_MAX_DIGITS = 12
PRICE_DECIMAL_PLACES = 2
PRICE_QUANTUM = Decimal(1).scaleb(-PRICE_DECIMAL_PLACES)
# smallest price that no longer fits the stored column
PRICE_LIMIT = Decimal(10) ** (PRICE_MAX_DIGITS - PRICE_DECIMAL_PLACES)


@dataclass(frozen=True)
class ValidatedProduct:
    name: str
    description: str
    price: Decimal


def normalize_price(price: Decimal) -> Decimal:
    """Round ``price`` to two decimal places, always towards +infinity.

    ``9.991`` and ``9.995`` both become ``10.00``; values that already have
    two or fewer decimals only gain trailing zeros.
    """
    return price.quantize(PRICE_QUANTUM, rounding=ROUND_CEILING)


def _as_decimal(price: Any) -> Decimal:
    if isinstance(price, Decimal):
        return price
    try:
        # str() first so floats keep their printed value, not the binary one
        return Decimal(str(price))
    except InvalidOperation as exc:
        raise BadProductPrice(f"Price '{price}' is not a number.") from exc


def validate_product(
    name: Optional[str],
    description: Optional[str],
    price: Any,
) -> ValidatedProduct:
    """Check the product fields and return them with a normalised price.

    Raises:
        BadProductName: name is ``None`` or ``""``.
        BadProductDescription: description is ``None`` or ``""``.
        BadProductPrice: price is ``None``, not a finite number, <= 0, or
            rounds up to ``PRICE_LIMIT`` or more.
    """
    if name is None or name == "":
        raise BadProductName("Product name must not be empty.")
    if description is None or description == "":
        raise BadProductDescription("Product description must not be empty.")
    if price is None:
        raise BadProductPrice("Product price is required.")

    amount = _as_decimal(price)
    if not amount.is_finite() or amount <= 0:
        raise BadProductPrice("Product price must be greater than zero.")
    if amount >= PRICE_LIMIT:
        raise BadProductPrice(f"Product price must be lower than {PRICE_LIMIT}.")

    normalized = normalize_price(amount)
    if normalized >= PRICE_LIMIT:
        raise BadProductPrice(f"Product price must be lower than {PRICE_LIMIT}.")

    return ValidatedProduct(
        name=name,
        description=description,
        price=normalized,
    )
