"""Product Schemas — Pydantic models for products entering the cart and history.

Invariants:
    - id: 1-128 chars, stripped, non-empty
    - price >= 0; discount within 0-100 (percent)
    - Unknown fields are kept (entries carry arbitrary product data)
    - to_entry() emits camelCase keys, the persisted snapshot shape

Design Decisions:
    - extra="allow" over a closed model: the storefront sends whatever product
      snapshot its card renders, and the stores copy it through untouched
    - quantity is never accepted from the client: the cart reducer owns it
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _ProductSnapshot(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(min_length=1, max_length=128)
    name: str = Field(min_length=1, max_length=500)
    price: float = Field(ge=0)
    image_url: str | None = Field(None, alias="imageUrl")
    discount: float | None = Field(0, ge=0, le=100)

    @field_validator("id")
    @classmethod
    def strip_id(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("id cannot be empty or whitespace")
        return v

    @field_validator("discount")
    @classmethod
    def default_discount(cls, v: float | None) -> float:
        return v or 0

    def to_entry(self) -> dict:
        entry = self.model_dump(by_alias=True)
        entry.pop("quantity", None)
        return entry


class CartProduct(_ProductSnapshot):
    """Product brief added to the cart."""


class ViewedProduct(_ProductSnapshot):
    """Product snapshot recorded in recently-viewed history."""
    slug: str | None = Field(None, max_length=500)
