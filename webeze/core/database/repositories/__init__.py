"""
Database repository layer using SQLModel.

This package contains one repository per entity plus a bundle for
dependency injection. All repositories share the async CRUD interface of
``AsyncBaseRepository``.

Modules:
- base: AsyncBaseRepository interface and QueryBuilder utilities
- users: User account operations
- companies: Company (tenant) operations, including cascaded settings
- company_settings: Company settings operations
- bundle: SqlRepoBundle for dependency injection
"""

from .bundle import SqlRepoBundle, build_sql_repos_from_session
from .companies import CompanyRepository
from .company_settings import CompanySettingsRepository
from .users import UserRepository

__all__ = [
    "CompanyRepository",
    "CompanySettingsRepository",
    "SqlRepoBundle",
    "UserRepository",
    "build_sql_repos_from_session",
]
