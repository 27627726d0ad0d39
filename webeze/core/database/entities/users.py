"""
User entity models.

This module contains the database entity for Webeze accounts. A user signs in
with email and password and owns any number of companies.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import TimestampedEntity


class User(TimestampedEntity, table=True):
    """Persistent user account.

    The password is only ever stored as a PBKDF2 hash produced by
    ``webeze.core.security.PasswordHasher``. Emails are stored lower-cased.

    Table: users
    """

    __tablename__ = "users"
    __table_args__ = ({"extend_existing": True},)

    email: str = Field(max_length=255, unique=True, index=True, description="Lower-cased login email")
    password_hash: str = Field(max_length=255, description="Encoded PBKDF2 password hash")
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    is_active: bool = Field(default=True, description="Inactive users cannot log in")
    last_login_at: Optional[datetime] = Field(
        default=None, sa_type=DateTime(timezone=True), description="Time of the last successful login"
    )

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email})"
