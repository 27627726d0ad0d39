"""
Service for account registration, login and token resolution.

Registration creates the user, the user's first company and that company's
default settings in a single transaction, then issues an access token so the
client can continue straight to onboarding.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError

from webeze.core.database.entities.companies import Company, sub_domain_for
from webeze.core.database.entities.company_settings import CompanySettings
from webeze.core.database.entities.users import User
from webeze.core.database.repositories.bundle import SqlRepoBundle
from webeze.core.errors import (
    AuthenticationError,
    ConflictError,
    EmailAlreadyRegisteredError,
    SubDomainTakenError,
)
from webeze.core.logging_config import get_logger
from webeze.core.models.io.auth import RegisterRequest
from webeze.core.monitoring import log_login_attempt, log_user_registered
from webeze.core.security import AccessTokenService, PasswordHasher

logger = get_logger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a successful register or login."""

    user: User
    access_token: str
    expires_in: int
    company: Company | None = None


class AuthService:
    """Registers accounts, checks credentials and resolves access tokens."""

    def __init__(self, repos: SqlRepoBundle, hasher: PasswordHasher, tokens: AccessTokenService) -> None:
        self.repos = repos
        self.hasher = hasher
        self.tokens = tokens

    def _issue(self, user: User, company: Company | None = None) -> AuthResult:
        token = self.tokens.issue(user.id, user.email)
        return AuthResult(user=user, access_token=token, expires_in=self.tokens.expire_seconds, company=company)

    async def register(self, payload: RegisterRequest) -> AuthResult:
        """
        Create an account with its first company.

        Args:
            payload: Validated signup form

        Returns:
            AuthResult with the new user, company and an access token

        Raises:
            EmailAlreadyRegisteredError: If the email already has an account
            SubDomainTakenError: If the company's sub-domain is in use
        """
        sub_domain = sub_domain_for(payload.company)

        if await self.repos.users.email_exists(payload.email):
            raise EmailAlreadyRegisteredError()
        if await self.repos.companies.sub_domain_exists(sub_domain):
            raise SubDomainTakenError(sub_domain)

        try:
            user = await self.repos.users.create(
                User(email=payload.email, password_hash=self.hasher.hash(payload.password)),
                commit=False,
            )
            company = await self.repos.companies.create_with_settings(
                Company(name=payload.company, sub_domain=sub_domain, user_id=user.id, settings_id=0),
                CompanySettings(),
            )
        except IntegrityError:
            # Lost a race against a concurrent signup for the same email or sub-domain
            await self.repos.session.rollback()
            logger.warning(f"Registration conflict for sub-domain '{sub_domain}'")
            raise ConflictError("Email or sub-domain was registered concurrently, please retry")

        logger.info(f"Registered user {user.id} with company {company.id} ({company.sub_domain})")
        log_user_registered(user_id=user.id, company_id=company.id, sub_domain=company.sub_domain)
        return self._issue(user, company)

    async def login(self, email: str, password: str) -> AuthResult:
        """
        Check credentials and issue an access token.

        Unknown emails, wrong passwords and inactive accounts fail identically.

        Raises:
            AuthenticationError: If the credentials are not accepted
        """
        email_domain = email.rsplit("@", 1)[-1].lower()
        user = await self.repos.users.get_by_email(email.strip())

        if user is None or not user.is_active or not self.hasher.verify(password, user.password_hash):
            logger.info(f"Rejected login attempt for domain '{email_domain}'")
            log_login_attempt(email_domain=email_domain, succeeded=False)
            raise AuthenticationError(INVALID_CREDENTIALS)

        if self.hasher.needs_rehash(user.password_hash):
            user.password_hash = self.hasher.hash(password)
        user = await self.repos.users.touch_last_login(user)

        log_login_attempt(email_domain=email_domain, succeeded=True)
        logger.debug(f"User {user.id} logged in")
        return self._issue(user)

    async def resolve_user(self, token: str) -> User:
        """
        Return the active user an access token belongs to.

        Raises:
            AuthenticationError: If the token is invalid or its user is gone or inactive
        """
        payload = self.tokens.verify(token)
        user = await self.repos.users.get_by_id(payload.user_id)
        if user is None or not user.is_active:
            raise AuthenticationError("Invalid or expired access token")
        return user
