"""
API endpoints for a company's settings.

Mounted under the companies prefix, so paths read ``/companies/{id}/settings``.
"""

from __future__ import annotations

from fastapi import APIRouter

from webeze.core.models.io.company_settings import CompanySettingsRead, CompanySettingsUpdate
from webeze.server.services.deps import CompanyServiceDep, CurrentUserDep

router = APIRouter(tags=["company-settings"])


@router.get(
    "/{company_id}/settings",
    response_model=CompanySettingsRead,
    summary="Get Company Settings",
    description="Retrieve the settings of one of the current user's companies.",
    responses={404: {"description": "Company not found"}},
)
async def get_company_settings(
    company_id: int,
    user: CurrentUserDep,
    service: CompanyServiceDep,
) -> CompanySettingsRead:
    return await service.get_settings(company_id, user)


@router.patch(
    "/{company_id}/settings",
    response_model=CompanySettingsRead,
    summary="Update Company Settings",
    description="Partially update a company's settings.",
    responses={
        404: {"description": "Company not found"},
        422: {"description": "Invalid theme or color"},
    },
)
async def update_company_settings(
    company_id: int,
    payload: CompanySettingsUpdate,
    user: CurrentUserDep,
    service: CompanyServiceDep,
) -> CompanySettingsRead:
    """
    Update company settings.

    Only fields present in the request body are changed. Send `logo_url: null` to remove the logo.

    - **timezone**: IANA timezone name, e.g. `Europe/Berlin`.
    - **language**: Language code, e.g. `en`.
    - **theme**: One of `light`, `dark`, `system`.
    - **primary_color**: Hex color, `#rgb` or `#rrggbb`.
    - **logo_url**: URL of the company logo.
    """
    return await service.update_settings(company_id, payload, user)
