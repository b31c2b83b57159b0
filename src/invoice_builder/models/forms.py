"""
Form schemas for the create-invoice screen.

Pydantic models validate raw form values coming from Dash inputs before
anything is sent to a service.

Invariants:
    - CustomerForm.name: at least 2 characters after stripping
    - Optional text fields: empty strings become None
    - CustomerForm.country: defaults to New Zealand when left blank
    - ItemForm.sale_price: non-negative, required when sale pricing is on
    - CategoryForm.name: required after stripping
"""

import re
from typing import Literal

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from invoice_builder.models.customer import DEFAULT_COUNTRY

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


class CustomerForm(BaseModel):
    """New customer form values."""

    name: str
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = DEFAULT_COUNTRY
    is_vip: bool = False

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        v = (v or "").strip()
        if len(v) < 2:
            raise ValueError("Name must be at least 2 characters")
        return v

    @field_validator("email", "phone", "address", "city", "state", "zip", mode="before")
    @classmethod
    def strip_optional(cls, v: str | None) -> str | None:
        return _blank_to_none(v)

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str | None) -> str | None:
        if v is not None and not _EMAIL_PATTERN.match(v):
            raise ValueError("Invalid email address")
        return v

    @field_validator("country", mode="before")
    @classmethod
    def default_country(cls, v: str | None) -> str:
        return _blank_to_none(v) or DEFAULT_COUNTRY


class ItemForm(BaseModel):
    """New catalog item form values."""

    name: str = Field(min_length=1)
    description: str | None = None
    type: Literal["product", "service"] = "product"
    category_id: str | None = None
    sale_price_enabled: bool = False
    sale_price: float | None = Field(None, ge=0)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name is required")
        return v

    @field_validator("description", "category_id", mode="before")
    @classmethod
    def strip_optional(cls, v: str | None) -> str | None:
        return _blank_to_none(v)

    @model_validator(mode="after")
    def check_sale_price(self) -> "ItemForm":
        if self.sale_price_enabled and self.sale_price is None:
            raise ValueError("Sale price is required when sale pricing is enabled")
        return self


class CategoryForm(BaseModel):
    """Inline new category form value."""

    name: str

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("Category name is required")
        return v


def form_errors(exc: ValidationError) -> dict[str, str]:
    """
    Flatten a ValidationError into a field -> message mapping.

    Model level errors are reported under the "form" key.
    """
    errors: dict[str, str] = {}
    for error in exc.errors():
        location = error.get("loc") or ()
        key = str(location[0]) if location else "form"
        message = error.get("msg", "Invalid value")
        errors.setdefault(key, message.removeprefix("Value error, "))
    return errors
