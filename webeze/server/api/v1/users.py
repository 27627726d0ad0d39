"""
API endpoints for the authenticated user's own profile.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from webeze.core.database.repositories.bundle import SqlRepoBundle
from webeze.core.models.io.users import UserRead, UserUpdate
from webeze.server.services.deps import CurrentUserDep, get_repos

router = APIRouter(tags=["users"])


@router.get(
    "/me",
    response_model=UserRead,
    summary="Get Current User",
    description="Return the user the access token belongs to.",
    responses={401: {"description": "Missing, invalid or expired access token"}},
)
async def read_me(user: CurrentUserDep) -> UserRead:
    return UserRead.model_validate(user)


@router.patch(
    "/me",
    response_model=UserRead,
    summary="Update Current User",
    description="Partially update the current user's profile.",
    responses={401: {"description": "Missing, invalid or expired access token"}},
)
async def update_me(
    payload: UserUpdate,
    user: CurrentUserDep,
    repos: SqlRepoBundle = Depends(get_repos),
) -> UserRead:
    """
    Update the current user's profile.

    Only fields present in the request body are changed.

    - **first_name**: Given name.
    - **last_name**: Family name.
    """
    for key, value in payload.model_dump(exclude_unset=True).items():
        setattr(user, key, value)
    user = await repos.users.update(user)
    return UserRead.model_validate(user)
