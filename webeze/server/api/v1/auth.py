"""
API endpoints for account registration and login.

Both endpoints answer with an access token envelope. Clients send the token back
as ``Authorization: Bearer <token>`` on every authenticated request.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from webeze.core.logging_config import get_logger
from webeze.core.models.io.auth import LoginRequest, RegisterRequest, RegisterResponse, TokenResponse
from webeze.core.models.io.users import UserRead
from webeze.server.core.config import settings
from webeze.server.services.companies import to_company_read
from webeze.server.services.deps import AuthServiceDep

logger = get_logger(__name__)

router = APIRouter(tags=["auth"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register Account",
    description="Create a user account together with its first company and that company's default settings.",
    response_description="Access token, the created user and the created company.",
    responses={
        201: {"description": "Account created"},
        409: {"description": "Email already registered or sub-domain already taken"},
        422: {"description": "Signup form failed validation"},
    },
)
async def register(payload: RegisterRequest, auth: AuthServiceDep) -> RegisterResponse:
    """
    Register a new account.

    The company's sub-domain is its name in lower case and must not be in use yet.
    The user, company and settings are written in one transaction.

    - **company**: Company name, letters and numbers only, at least 3 characters.
    - **email**: Email address of the account owner.
    - **password**: At least 8 characters and must not contain the email.
    - **confirmPassword**: Must equal `password`.
    """
    result = await auth.register(payload)
    return RegisterResponse(
        access_token=result.access_token,
        expires_in=result.expires_in,
        user=UserRead.model_validate(result.user),
        company=to_company_read(result.company, settings.root_domain),
    )


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login",
    description="Exchange email and password for an access token.",
    response_description="Access token and the authenticated user.",
    responses={
        200: {"description": "Credentials accepted"},
        401: {"description": "Invalid email or password"},
    },
)
async def login(payload: LoginRequest, auth: AuthServiceDep) -> TokenResponse:
    """
    Log in with email and password.

    Unknown emails, wrong passwords and deactivated accounts all answer with the same 401.

    - **email**: Account email address (case-insensitive).
    - **password**: Account password.
    """
    result = await auth.login(payload.email, payload.password)
    return TokenResponse(
        access_token=result.access_token,
        expires_in=result.expires_in,
        user=UserRead.model_validate(result.user),
    )
