"""
API endpoints for managing companies (tenants).

Every route except the sub-domain availability check requires an access token,
and only companies owned by the caller are visible. Another user's company
answers 404.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Query, Response, status

from webeze.core.logging_config import get_logger
from webeze.core.models.io.companies import (
    CompanyCreate,
    CompanyDetail,
    CompanyRead,
    CompanyUpdate,
    SubDomainAvailability,
)
from webeze.server.services.deps import CompanyServiceDep, CurrentUserDep

logger = get_logger(__name__)

router = APIRouter(tags=["companies"])


@router.get(
    "",
    response_model=List[CompanyRead],
    summary="List Companies",
    description="List the companies owned by the current user.",
    response_description="A list of companies ordered by creation.",
)
async def list_companies(
    user: CurrentUserDep,
    service: CompanyServiceDep,
    limit: int = Query(50, ge=1, le=100, description="Maximum number of companies to return"),
    offset: int = Query(0, ge=0, description="Number of companies to skip"),
) -> List[CompanyRead]:
    return await service.list_companies(user, limit=limit, offset=offset)


@router.post(
    "",
    response_model=CompanyDetail,
    status_code=status.HTTP_201_CREATED,
    summary="Create Company",
    description="Create another company for the current user. Its settings are created with defaults.",
    response_description="The created company with its settings.",
    responses={
        201: {"description": "Company created"},
        409: {"description": "Sub-domain already taken"},
        422: {"description": "Invalid company name"},
    },
)
async def create_company(payload: CompanyCreate, user: CurrentUserDep, service: CompanyServiceDep) -> CompanyDetail:
    """
    Create a company.

    The sub-domain is derived from the name in lower case.

    - **name**: Company name, letters and numbers only, at least 3 characters.
    - **agency**: Whether the company is an agency.
    - **marketing_popups**: Whether marketing popups are enabled.
    - **hipaa**: Whether the company needs HIPAA compliant handling.
    """
    return await service.create_company(payload, user)


@router.get(
    "/sub-domains/{sub_domain}/availability",
    response_model=SubDomainAvailability,
    summary="Check Sub-domain Availability",
    description="Check whether a sub-domain is still free. Does not require authentication.",
)
async def sub_domain_availability(sub_domain: str, service: CompanyServiceDep) -> SubDomainAvailability:
    return await service.sub_domain_availability(sub_domain)


@router.get(
    "/{company_id}",
    response_model=CompanyDetail,
    summary="Get Company",
    description="Retrieve one of the current user's companies with its settings.",
    responses={404: {"description": "Company not found"}},
)
async def get_company(company_id: int, user: CurrentUserDep, service: CompanyServiceDep) -> CompanyDetail:
    return await service.get_company(company_id, user)


@router.patch(
    "/{company_id}",
    response_model=CompanyRead,
    summary="Update Company",
    description="Partially update a company. The sub-domain is never changed by a rename.",
    responses={
        404: {"description": "Company not found"},
        422: {"description": "Invalid company name"},
    },
)
async def update_company(
    company_id: int,
    payload: CompanyUpdate,
    user: CurrentUserDep,
    service: CompanyServiceDep,
) -> CompanyRead:
    """
    Update a company.

    Only fields present in the request body are changed.

    - **name**: New display name.
    - **is_domain_mapped**: Whether a custom domain points at the company.
    - **agency**, **marketing_popups**, **hipaa**: Feature flags.
    """
    return await service.update_company(company_id, payload, user)


@router.delete(
    "/{company_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Company",
    description="Delete a company and its settings.",
    responses={
        204: {"description": "Company deleted"},
        404: {"description": "Company not found"},
    },
)
async def delete_company(company_id: int, user: CurrentUserDep, service: CompanyServiceDep) -> Response:
    await service.delete_company(company_id, user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
