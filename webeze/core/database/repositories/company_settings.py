"""
Company settings repository implementation.

Settings rows are normally created and removed through
``CompanyRepository.create_with_settings`` and ``delete_with_settings``;
this repository covers reads and partial updates.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..base import utc_now
from ..entities.companies import Company
from ..entities.company_settings import CompanySettings
from .base import AsyncBaseRepository, QueryBuilder


class CompanySettingsRepository(AsyncBaseRepository[CompanySettings]):
    """Repository for company settings data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, CompanySettings)

    async def create(self, settings: CompanySettings, *, commit: bool = True) -> CompanySettings:
        return await self._persist(settings, commit)

    async def get_by_id(self, settings_id: int) -> Optional[CompanySettings]:
        stmt = select(CompanySettings).where(CompanySettings.id == settings_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_for_company(self, company: Company) -> Optional[CompanySettings]:
        """Get the settings record belonging to a company."""
        return await self.get_by_id(company.settings_id)

    async def update(self, settings: CompanySettings) -> CompanySettings:
        settings.updated_at = utc_now()
        return await self._persist(settings, commit=True)

    async def delete(self, settings_id: int) -> bool:
        settings = await self.get_by_id(settings_id)
        if settings:
            await self.session.delete(settings)
            await self.session.commit()
            return True
        return False

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[CompanySettings]:
        stmt = select(CompanySettings).order_by(CompanySettings.id)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, CompanySettings, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())
