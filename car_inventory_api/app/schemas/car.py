"""
Pydantic models for car listings.

A car record carries no identifier of its own; identifiers are minted
by the store and only appear in URLs.  Fields missing from a request
body take their zero value and unknown fields are ignored.  Keys are
matched to fields case‑insensitively (``"Brand"`` sets ``brand``).
Types are checked strictly, so ``"15000"`` is not accepted as a price,
and ``price``/``mileage`` must fit an unsigned 64‑bit integer.

``status`` is free‑form text.  ``CarStatus`` lists the labels the
inventory uses, but any string is stored as given.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator

UINT64_MAX = 2**64 - 1


class CarStatus(str, Enum):
    """Known availability labels for a car listing."""

    ON_THE_WAY = "on the way"
    IN_STOCK = "in stock"
    SOLD_OUT = "sold out"
    WITHDRAWN_FROM_SALE = "withdrawn from sale"


class CarModel(BaseModel):
    """A single car listing."""

    brand: str = Field("", examples=["nissan"])
    model: str = Field("", examples=["almera"])
    price: int = Field(0, ge=0, le=UINT64_MAX, examples=[20000])
    status: str = Field("", examples=[CarStatus.IN_STOCK.value])
    mileage: int = Field(0, ge=0, le=UINT64_MAX, examples=[30000])

    model_config = {
        "strict": True,
        "extra": "ignore",
    }

    @model_validator(mode="before")
    @classmethod
    def match_keys_case_insensitively(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        fields = {name.lower(): name for name in cls.model_fields}
        matched = {}
        # Later keys win when several spell the same field.
        for key, value in data.items():
            name = fields.get(key.lower()) if isinstance(key, str) else None
            matched[name or key] = value
        return matched
