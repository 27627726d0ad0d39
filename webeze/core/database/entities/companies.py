"""
Company entity models.

A company is a Webeze tenant. It belongs to one user, is reachable on its own
sub-domain and has a one-to-one settings record referenced by ``settings_id``.
"""

from __future__ import annotations

from sqlmodel import Field

from ..base import TimestampedEntity


def sub_domain_for(name: str) -> str:
    """Derive the sub-domain a company name maps to."""
    return name.strip().lower()


class Company(TimestampedEntity, table=True):
    """Persistent company (tenant).

    Table: company
    """

    __tablename__ = "company"
    __table_args__ = ({"extend_existing": True},)

    name: str = Field(max_length=100)
    sub_domain: str = Field(max_length=100, unique=True, index=True)
    is_domain_mapped: bool = Field(default=False, description="Whether a custom domain points at the company")
    agency: bool = Field(default=False)
    marketing_popups: bool = Field(default=False)
    hipaa: bool = Field(default=False)

    settings_id: int = Field(foreign_key="company_settings.id", unique=True)
    user_id: int = Field(foreign_key="users.id", index=True)

    def url(self, root_domain: str) -> str:
        """Public URL of the company's workspace."""
        return f"https://{self.sub_domain}.{root_domain}"

    def __repr__(self) -> str:
        return f"Company(id={self.id}, sub_domain={self.sub_domain}, user_id={self.user_id})"
