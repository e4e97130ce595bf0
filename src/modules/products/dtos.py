"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the transport layers (Celery message
patterns, DRF views) and the Service layer.  DTOs are immutable
(``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for partial product updates
  (``UpdateProductMessageDTO`` when the id travels in the payload).
- ``PaginationDTO``: page/limit window for listings.
- ``ProductIdDTO`` / ``ValidateProductsDTO``: id-based look-ups.
- ``PageMetaDTO``: output metadata of a listing.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, List, Optional

from django.conf import settings
from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator


def _default_limit() -> int:
    return getattr(settings, "DEFAULT_PAGE_LIMIT", 10)


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Unknown keys are ignored, so a caller-supplied ``available`` never
    reaches the store; new products always start available.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    price: Decimal = Field(ge=0, max_digits=12, decimal_places=4)

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Name must not be empty.")
        return v.strip()


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    All fields are optional; only supplied fields are written.  ``id`` may
    travel with the payload but is never applied as a field.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: Optional[PositiveInt] = None
    name: Optional[str] = None
    price: Optional[Annotated[Decimal, Field(ge=0, max_digits=12, decimal_places=4)]] = None

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Name must not be empty.")
        return v.strip() if v is not None else v

    def changes(self) -> dict:
        """Fields explicitly supplied by the caller, minus ``id``."""
        return self.model_dump(exclude_unset=True, exclude={"id"})


class UpdateProductMessageDTO(UpdateProductDTO):
    """Update request arriving as a message: the ``id`` is mandatory."""

    id: PositiveInt


class PaginationDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: PositiveInt = 1
    limit: PositiveInt = Field(default_factory=_default_limit)


class ProductIdDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: PositiveInt


class ValidateProductsDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    ids: List[PositiveInt]


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class PageMetaDTO(BaseModel):
    """Listing metadata; ``last_page`` is exposed as ``lastPage`` on the wire."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    page: int
    total: int
    last_page: int = Field(alias="lastPage")

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)
