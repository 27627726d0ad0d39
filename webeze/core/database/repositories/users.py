"""
User repository implementation.

This module provides data access operations for user accounts, including
lookups by email used by the registration and login flows.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..base import utc_now
from ..entities.users import User
from .base import AsyncBaseRepository, QueryBuilder


class UserRepository(AsyncBaseRepository[User]):
    """Repository for user data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)

    async def create(self, user: User, *, commit: bool = True) -> User:
        """Create a new user.

        Args:
            user: User SQLModel instance
            commit: Commit immediately, or only flush

        Returns:
            Persisted User with generated fields
        """
        user.email = user.email.lower()
        return await self._persist(user, commit)

    async def get_by_id(self, user_id: int) -> Optional[User]:
        stmt = select(User).where(User.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by email, ignoring case.

        Args:
            email: Email address

        Returns:
            User instance or None
        """
        stmt = select(User).where(func.lower(User.email) == email.lower())
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def email_exists(self, email: str) -> bool:
        """Check whether an account already uses this email."""
        return await self.get_by_email(email) is not None

    async def update(self, user: User) -> User:
        user.updated_at = utc_now()
        return await self._persist(user, commit=True)

    async def touch_last_login(self, user: User) -> User:
        """Record a successful login."""
        user.last_login_at = utc_now()
        return await self.update(user)

    async def delete(self, user_id: int) -> bool:
        user = await self.get_by_id(user_id)
        if user:
            await self.session.delete(user)
            await self.session.commit()
            return True
        return False

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[User]:
        """List users with optional pagination and filtering.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Field filters (is_active)

        Returns:
            List of User instances ordered by id
        """
        stmt = select(User).order_by(User.id)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, User, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())
