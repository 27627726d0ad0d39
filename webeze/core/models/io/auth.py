"""
Authentication I/O models.

``RegisterRequest`` carries the signup form as the frontend submits it
(``company``, ``email``, ``password``, ``confirmPassword``) and applies the same
rules the form applies client side.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .companies import CompanyRead
from .users import UserRead
from .validation import ValidationText, check_company_name, check_email, check_password


class RegisterRequest(BaseModel):
    """Signup payload."""

    model_config = ConfigDict(populate_by_name=True)

    company: str
    email: str
    password: str
    confirm_password: str = Field(alias="confirmPassword")

    @field_validator("company")
    @classmethod
    def _company(cls, value: str) -> str:
        return check_company_name(value)

    @field_validator("email")
    @classmethod
    def _email(cls, value: str) -> str:
        return check_email(value)

    @field_validator("password")
    @classmethod
    def _password(cls, value: str, info: ValidationInfo) -> str:
        return check_password(value, info.data.get("email"))

    @field_validator("confirm_password")
    @classmethod
    def _confirm_password(cls, value: str, info: ValidationInfo) -> str:
        password = info.data.get("password")
        if password is not None and value != password:
            raise ValueError(ValidationText.PASSWORD_MATCH)
        return value


class LoginRequest(BaseModel):
    """Login payload. Only presence is checked so failures never hint at which part was wrong."""

    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class TokenResponse(BaseModel):
    """Access token envelope returned by login."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserRead


class RegisterResponse(TokenResponse):
    """Access token envelope returned by registration, with the created company."""

    company: Optional[CompanyRead] = None
