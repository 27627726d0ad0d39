"""
Service Dependencies.

FastAPI dependencies that build request-scoped services on top of the
database session, and resolve the authenticated user from the
``Authorization: Bearer`` header.
"""

from functools import lru_cache
from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from webeze.core.database import get_session
from webeze.core.database.entities.users import User
from webeze.core.database.repositories.bundle import SqlRepoBundle, build_sql_repos_from_session
from webeze.core.errors import AuthenticationError
from webeze.core.security import AccessTokenService, PasswordHasher
from webeze.server.core.config import settings
from webeze.server.services.auth import AuthService
from webeze.server.services.companies import CompanyService

bearer_scheme = HTTPBearer(auto_error=False, description="Access token returned by register or login")


@lru_cache
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(iterations=settings.security.password_hash_iterations)


@lru_cache
def get_token_service() -> AccessTokenService:
    security = settings.security
    return AccessTokenService(security.secret_key, expire_minutes=security.access_token_expire_minutes)


def get_repos(session: AsyncSession = Depends(get_session)) -> SqlRepoBundle:
    return build_sql_repos_from_session(session=session)


def get_auth_service(
    repos: SqlRepoBundle = Depends(get_repos),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: AccessTokenService = Depends(get_token_service),
) -> AuthService:
    return AuthService(repos, hasher, tokens)


def get_company_service(repos: SqlRepoBundle = Depends(get_repos)) -> CompanyService:
    return CompanyService(repos, root_domain=settings.root_domain)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
CompanyServiceDep = Annotated[CompanyService, Depends(get_company_service)]


async def get_current_user(
    auth: AuthServiceDep,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> User:
    """Resolve the authenticated user or raise ``AuthenticationError``."""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthenticationError("Not authenticated")
    return await auth.resolve_user(credentials.credentials)


CurrentUserDep = Annotated[User, Depends(get_current_user)]
