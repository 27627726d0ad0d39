"""
Company settings I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from webeze.core.database.entities.company_settings import Theme

from .validation import ValidationText, check_hex_color


class CompanySettingsRead(BaseModel):
    """Schema for reading company settings."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    timezone: str
    language: str
    theme: Theme
    primary_color: str
    logo_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class CompanySettingsUpdate(BaseModel):
    """Schema for partially updating company settings."""

    timezone: Optional[str] = Field(default=None, min_length=1, max_length=64)
    language: Optional[str] = Field(default=None, min_length=2, max_length=16)
    theme: Optional[Theme] = None
    primary_color: Optional[str] = None
    logo_url: Optional[str] = Field(default=None, max_length=512)

    @field_validator("theme", mode="before")
    @classmethod
    def _theme(cls, value: object) -> Optional[Theme]:
        if value is None or isinstance(value, Theme):
            return value
        try:
            return Theme(str(value).lower())
        except ValueError:
            raise ValueError(ValidationText.THEME_INVALID)

    @field_validator("primary_color")
    @classmethod
    def _primary_color(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else check_hex_color(value)
