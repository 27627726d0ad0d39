"""
Company I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from .company_settings import CompanySettingsRead
from .validation import check_company_name


class CompanyRead(BaseModel):
    """Schema for reading a company."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    sub_domain: str
    url: str
    is_domain_mapped: bool
    agency: bool
    marketing_popups: bool
    hipaa: bool
    user_id: int
    settings_id: int
    created_at: datetime
    updated_at: datetime


class CompanyDetail(CompanyRead):
    """Company with its settings embedded."""

    settings: CompanySettingsRead


class CompanyCreate(BaseModel):
    """Schema for creating an additional company for the current user."""

    name: str
    agency: bool = False
    marketing_popups: bool = False
    hipaa: bool = False

    @field_validator("name")
    @classmethod
    def _name(cls, value: str) -> str:
        return check_company_name(value)


class CompanyUpdate(BaseModel):
    """Schema for partially updating a company. The sub-domain never changes."""

    name: Optional[str] = None
    is_domain_mapped: Optional[bool] = None
    agency: Optional[bool] = None
    marketing_popups: Optional[bool] = None
    hipaa: Optional[bool] = None

    @field_validator("name")
    @classmethod
    def _name(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else check_company_name(value)


class SubDomainAvailability(BaseModel):
    """Whether a sub-domain can still be claimed."""

    sub_domain: str
    available: bool
