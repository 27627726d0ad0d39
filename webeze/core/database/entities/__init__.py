"""
Database entity models.

This package contains all database entity models. Each module represents a
single table:

- users: Account owners who sign in to Webeze
- companies: Tenants, each owned by one user and served on its own sub-domain
- company_settings: One-to-one presentation and locale settings per company
"""

from . import companies, company_settings, users
from .companies import Company
from .company_settings import CompanySettings, Theme
from .users import User

__all__ = [
    "Company",
    "CompanySettings",
    "Theme",
    "User",
    "companies",
    "company_settings",
    "users",
]
