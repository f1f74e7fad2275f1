"""
Inquiry schemas.

Dependencies: pydantic, elham.models.fields
System role: Public inquiry API contract
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from elham.core.localization import Locale, normalize_locale
from elham.models.fields import LooseText, Text


class InquiryRequest(BaseModel):
    """
    Inquiry submitted from a public detail page.

    name, email and message are required by the notifier; they are
    optional here so a missing field yields the notifier's 400 message.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    type: str = Field(default="general", description="Kind of item: hotel, package, visa, ...")
    reference_id: LooseText = None
    reference_name: LooseText = None
    reference_summary: Text = None
    meta: dict[str, Any] = Field(default_factory=dict)
    name: Text = None
    email: Text = None
    nationality: Text = None
    country_code: LooseText = None
    phone: LooseText = None
    travelers: LooseText = None
    message: Text = None
    locale: Locale = "en"

    @field_validator("type", mode="before")
    @classmethod
    def default_type(cls, value):
        if isinstance(value, str) and value.strip():
            return value.strip()
        return "general"

    @field_validator("meta", mode="before")
    @classmethod
    def meta_mapping(cls, value):
        return value if isinstance(value, dict) else {}

    @field_validator("locale", mode="before")
    @classmethod
    def supported_locale(cls, value):
        return normalize_locale(value)

    @property
    def full_phone(self) -> str | None:
        if self.phone and self.country_code:
            return f"{self.country_code} {self.phone}"
        return self.phone
