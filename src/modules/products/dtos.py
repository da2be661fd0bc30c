"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views) and the
Service layer.  DTOs are immutable (``frozen=True``).

The DTO only coerces types (e.g. ``"9.995"`` -> ``Decimal``).  Business
rules are *not* checked here: an edit is validated against the merged
product, so the service owns every rule and its error kind.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class ProductInputDTO(BaseModel):
    """Immutable DTO carrying the caller's name, description and price.

    Used for both creation and edition.  Missing fields stay ``None`` and
    are rejected by the service with the matching domain error.
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = None

    @field_validator("price", mode="before")
    @classmethod
    def blank_price_is_missing(cls, v: Any) -> Any:
        # multipart forms send an empty string for an untouched field
        if isinstance(v, str) and v.strip() == "":
            return None
        return v
