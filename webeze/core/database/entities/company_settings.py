"""
Company settings entity models.

Every company has exactly one settings row. It is created together with the
company and removed together with it.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from sqlmodel import Field

from ..base import TimestampedEntity

DEFAULT_PRIMARY_COLOR = "#6366f1"


class Theme(str, Enum):
    """Color scheme used by the company's workspace."""

    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


class CompanySettings(TimestampedEntity, table=True):
    """Persistent per-company settings.

    Table: company_settings
    """

    __tablename__ = "company_settings"
    __table_args__ = ({"extend_existing": True},)

    timezone: str = Field(default="UTC", max_length=64)
    language: str = Field(default="en", max_length=16)
    theme: Theme = Field(default=Theme.SYSTEM)
    primary_color: str = Field(default=DEFAULT_PRIMARY_COLOR, max_length=7)
    logo_url: Optional[str] = Field(default=None, max_length=512)

    def __repr__(self) -> str:
        return f"CompanySettings(id={self.id}, theme={self.theme}, timezone={self.timezone})"
