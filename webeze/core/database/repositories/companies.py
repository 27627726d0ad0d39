"""
Company repository implementation.

This module provides data access operations for companies (tenants).
Owner-scoped lookups (``get_for_user``/``list_for_user``) are what the API
uses, so one tenant never sees another tenant's rows.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..base import utc_now
from ..entities.companies import Company
from ..entities.company_settings import CompanySettings
from .base import AsyncBaseRepository, QueryBuilder


class CompanyRepository(AsyncBaseRepository[Company]):
    """Repository for company data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Company)

    async def create(self, company: Company, *, commit: bool = True) -> Company:
        company.sub_domain = company.sub_domain.lower()
        return await self._persist(company, commit)

    async def create_with_settings(self, company: Company, settings: CompanySettings) -> Company:
        """Create a company and its settings record in one transaction.

        The settings row is flushed first so its id can be referenced by
        ``company.settings_id``. Anything the caller added to the session
        without committing is committed together with the company.

        Args:
            company: Company instance (``settings_id`` is filled in here)
            settings: CompanySettings instance

        Returns:
            Persisted Company
        """
        self.session.add(settings)
        await self.session.flush()
        company.settings_id = settings.id
        company.sub_domain = company.sub_domain.lower()
        self.session.add(company)
        await self.session.commit()
        await self.session.refresh(company)
        await self.session.refresh(settings)
        return company

    async def get_by_id(self, company_id: int) -> Optional[Company]:
        stmt = select(Company).where(Company.id == company_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_for_user(self, company_id: int, user_id: int) -> Optional[Company]:
        """Get a company only if it is owned by the given user."""
        stmt = select(Company).where((Company.id == company_id) & (Company.user_id == user_id))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_sub_domain(self, sub_domain: str) -> Optional[Company]:
        stmt = select(Company).where(Company.sub_domain == sub_domain.lower())
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def sub_domain_exists(self, sub_domain: str) -> bool:
        return await self.get_by_sub_domain(sub_domain) is not None

    async def list_for_user(self, user_id: int, limit: Optional[int] = None, offset: Optional[int] = None) -> List[Company]:
        """List the companies owned by a user, oldest first."""
        return await self.list(limit=limit, offset=offset, filters={"user_id": user_id})

    async def update(self, company: Company) -> Company:
        company.updated_at = utc_now()
        return await self._persist(company, commit=True)

    async def delete(self, company_id: int) -> bool:
        company = await self.get_by_id(company_id)
        if company:
            await self.delete_with_settings(company)
            return True
        return False

    async def delete_with_settings(self, company: Company) -> None:
        """Delete a company together with its settings record."""
        settings = await self.session.get(CompanySettings, company.settings_id)
        await self.session.delete(company)
        await self.session.flush()
        if settings is not None:
            await self.session.delete(settings)
        await self.session.commit()

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[Company]:
        """List companies with optional pagination and filtering.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Field filters (user_id, agency, hipaa, ...)

        Returns:
            List of Company instances ordered by id
        """
        stmt = select(Company).order_by(Company.id)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, Company, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())
