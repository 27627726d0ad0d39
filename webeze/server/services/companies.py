"""
Service for company (tenant) and company settings management.

Every operation is scoped to the calling user: a company owned by someone
else is reported as not found rather than forbidden, so ids of other tenants
are not disclosed.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from webeze.core.database.entities.companies import Company, sub_domain_for
from webeze.core.database.entities.company_settings import CompanySettings
from webeze.core.database.entities.users import User
from webeze.core.database.repositories.bundle import SqlRepoBundle
from webeze.core.errors import NotFoundError, SubDomainTakenError
from webeze.core.logging_config import get_logger
from webeze.core.models.io.companies import (
    CompanyCreate,
    CompanyDetail,
    CompanyRead,
    CompanyUpdate,
    SubDomainAvailability,
)
from webeze.core.models.io.company_settings import CompanySettingsRead, CompanySettingsUpdate
from webeze.core.models.io.validation import is_company_name

logger = get_logger(__name__)


def to_company_read(company: Company, root_domain: str) -> CompanyRead:
    """Convert a Company entity into its API representation."""
    return CompanyRead.model_validate({**company.model_dump(), "url": company.url(root_domain)})


class CompanyService:
    """Owner-scoped operations on companies and their settings."""

    def __init__(self, repos: SqlRepoBundle, root_domain: str) -> None:
        self.repos = repos
        self.root_domain = root_domain

    async def _owned(self, company_id: int, user: User) -> Company:
        company = await self.repos.companies.get_for_user(company_id, user.id)
        if company is None:
            raise NotFoundError("Company", company_id)
        return company

    async def _settings_of(self, company: Company) -> CompanySettings:
        settings = await self.repos.company_settings.get_for_company(company)
        if settings is None:
            # Settings are created with the company, so this means the row was removed out of band
            logger.error(f"Company {company.id} has no settings row (settings_id={company.settings_id})")
            raise NotFoundError("Settings for company", company.id)
        return settings

    async def list_companies(self, user: User, limit: Optional[int] = None, offset: Optional[int] = None) -> List[CompanyRead]:
        companies = await self.repos.companies.list_for_user(user.id, limit=limit, offset=offset)
        return [to_company_read(company, self.root_domain) for company in companies]

    async def get_company(self, company_id: int, user: User) -> CompanyDetail:
        company = await self._owned(company_id, user)
        settings = await self._settings_of(company)
        return CompanyDetail(
            **to_company_read(company, self.root_domain).model_dump(),
            settings=CompanySettingsRead.model_validate(settings),
        )

    async def create_company(self, payload: CompanyCreate, user: User) -> CompanyDetail:
        """
        Create another company for the user, with default settings.

        Raises:
            SubDomainTakenError: If the derived sub-domain is in use
        """
        sub_domain = sub_domain_for(payload.name)
        if await self.repos.companies.sub_domain_exists(sub_domain):
            raise SubDomainTakenError(sub_domain)

        try:
            company = await self.repos.companies.create_with_settings(
                Company(
                    name=payload.name,
                    sub_domain=sub_domain,
                    agency=payload.agency,
                    marketing_popups=payload.marketing_popups,
                    hipaa=payload.hipaa,
                    user_id=user.id,
                    settings_id=0,
                ),
                CompanySettings(),
            )
        except IntegrityError:
            await self.repos.session.rollback()
            raise SubDomainTakenError(sub_domain)

        logger.info(f"User {user.id} created company {company.id} ({company.sub_domain})")
        return await self.get_company(company.id, user)

    async def update_company(self, company_id: int, payload: CompanyUpdate, user: User) -> CompanyRead:
        company = await self._owned(company_id, user)
        for key, value in payload.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(company, key, value)
        company = await self.repos.companies.update(company)
        return to_company_read(company, self.root_domain)

    async def delete_company(self, company_id: int, user: User) -> None:
        company = await self._owned(company_id, user)
        await self.repos.companies.delete_with_settings(company)
        logger.info(f"User {user.id} deleted company {company_id}")

    async def get_settings(self, company_id: int, user: User) -> CompanySettingsRead:
        company = await self._owned(company_id, user)
        return CompanySettingsRead.model_validate(await self._settings_of(company))

    async def update_settings(self, company_id: int, payload: CompanySettingsUpdate, user: User) -> CompanySettingsRead:
        company = await self._owned(company_id, user)
        settings = await self._settings_of(company)
        for key, value in payload.model_dump(exclude_unset=True).items():
            if key == "logo_url" or value is not None:
                setattr(settings, key, value)
        settings = await self.repos.company_settings.update(settings)
        return CompanySettingsRead.model_validate(settings)

    async def sub_domain_availability(self, sub_domain: str) -> SubDomainAvailability:
        normalized = sub_domain_for(sub_domain)
        if not is_company_name(normalized):
            return SubDomainAvailability(sub_domain=normalized, available=False)
        taken = await self.repos.companies.sub_domain_exists(normalized)
        return SubDomainAvailability(sub_domain=normalized, available=not taken)
