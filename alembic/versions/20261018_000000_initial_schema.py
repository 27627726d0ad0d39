"""Initial schema for Webeze

Revision ID: 20261018_000000
Revises: None
Create Date: 2026-10-18 00:00:00.000000

Creates the account and tenant tables:
- users
- company_settings
- company (references users and company_settings)

Revision format: YYYYMMDD_HHMMSS_description

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20261018_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all tables."""

    # Create users table
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=True),
        sa.Column("last_name", sa.String(100), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("last_login_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_users_email", "email", unique=True),
    )

    # Create company_settings table
    op.create_table(
        "company_settings",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("timezone", sa.String(64), nullable=False, server_default="UTC"),
        sa.Column("language", sa.String(16), nullable=False, server_default="en"),
        sa.Column(
            "theme",
            sa.Enum("LIGHT", "DARK", "SYSTEM", name="theme"),
            nullable=False,
            server_default="SYSTEM",
        ),
        sa.Column("primary_color", sa.String(7), nullable=False, server_default="#6366f1"),
        sa.Column("logo_url", sa.String(512), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    # Create company table
    op.create_table(
        "company",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("sub_domain", sa.String(100), nullable=False),
        sa.Column("is_domain_mapped", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("agency", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("marketing_popups", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("hipaa", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("settings_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["settings_id"], ["company_settings.id"]),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.UniqueConstraint("settings_id"),
        sa.Index("ix_company_sub_domain", "sub_domain", unique=True),
        sa.Index("ix_company_user_id", "user_id"),
    )


def downgrade() -> None:
    """Drop all tables created in upgrade."""
    op.drop_table("company")
    op.drop_table("company_settings")
    op.drop_table("users")

    # Drop the enum type
    op.execute("DROP TYPE IF EXISTS theme")
