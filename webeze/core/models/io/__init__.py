"""
I/O models for API requests and responses.

This package contains Pydantic-based I/O schemas that define the contract
between API endpoints and clients. These models are separate from database
entities to allow independent evolution of API contracts.

Modules:
- auth: Registration and login payloads and token envelopes
- users: User profile I/O models
- companies: Company I/O models
- company_settings: Company settings I/O models
- validation: Shared field rules and user-facing messages
"""

from .auth import LoginRequest, RegisterRequest, RegisterResponse, TokenResponse
from .companies import (
    CompanyCreate,
    CompanyDetail,
    CompanyRead,
    CompanyUpdate,
    SubDomainAvailability,
)
from .company_settings import CompanySettingsRead, CompanySettingsUpdate
from .users import UserRead, UserUpdate
from .validation import ValidationText

__all__ = [
    "CompanyCreate",
    "CompanyDetail",
    "CompanyRead",
    "CompanySettingsRead",
    "CompanySettingsUpdate",
    "CompanyUpdate",
    "LoginRequest",
    "RegisterRequest",
    "RegisterResponse",
    "SubDomainAvailability",
    "TokenResponse",
    "UserRead",
    "UserUpdate",
    "ValidationText",
]
