"""initial_schema_tenant_participants_business_categories

Revision ID: 3f1c9a2b7d40
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

from collections.abc import Sequence
from typing import Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "3f1c9a2b7d40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "tenant",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("code", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("status", sa.String(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.CheckConstraint(
            "status IN ('active', 'suspended', 'archived')",
            name="tenant_status_check",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_tenant_code"), "tenant", ["code"], unique=True)
    op.create_index(op.f("ix_tenant_status"), "tenant", ["status"], unique=False)

    op.create_table(
        "business_categories",
        sa.Column("category_code", sa.String(length=20), nullable=False),
        sa.Column("name_th", sa.String(length=255), nullable=False),
        sa.Column("name_en", sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint("category_code"),
    )

    op.create_table(
        "participants",
        sa.Column("participant_id", sa.String(), nullable=False),
        sa.Column("tenant_id", sa.String(), nullable=False),
        sa.Column("status", sa.String(), nullable=False),
        sa.Column("full_name_th", sa.String(length=255), nullable=True),
        sa.Column("full_name_en", sa.String(length=255), nullable=True),
        sa.Column("nickname_th", sa.String(length=100), nullable=True),
        sa.Column("nickname_en", sa.String(length=100), nullable=True),
        sa.Column("position", sa.String(length=255), nullable=True),
        sa.Column("company", sa.String(length=255), nullable=True),
        sa.Column("tagline", sa.String(length=500), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("business_address", sa.Text(), nullable=True),
        sa.Column("business_type_code", sa.String(), nullable=True),
        sa.Column("tags", postgresql.ARRAY(sa.String()), nullable=True),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("line_id", sa.String(length=100), nullable=True),
        sa.Column("website_url", sa.String(length=500), nullable=True),
        sa.Column("facebook_url", sa.String(length=500), nullable=True),
        sa.Column("instagram_url", sa.String(length=500), nullable=True),
        sa.Column("linkedin_url", sa.String(length=500), nullable=True),
        sa.Column("onepage_url", sa.String(length=500), nullable=True),
        sa.Column("photo_url", sa.String(length=500), nullable=True),
        sa.Column("company_logo_url", sa.String(length=500), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.CheckConstraint(
            "status IN ('prospect', 'visitor', 'member', 'alumni', 'declined')",
            name="participants_status_check",
        ),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenant.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["business_type_code"],
            ["business_categories.category_code"],
            ondelete="SET NULL",
        ),
        sa.PrimaryKeyConstraint("participant_id"),
    )
    op.create_index(
        op.f("ix_participants_tenant_id"), "participants", ["tenant_id"], unique=False
    )
    op.create_index(
        op.f("ix_participants_business_type_code"),
        "participants",
        ["business_type_code"],
        unique=False,
    )
    op.create_index(
        "ix_participants_tenant_status",
        "participants",
        ["tenant_id", "status"],
        unique=False,
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_participants_tenant_status", table_name="participants")
    op.drop_index(
        op.f("ix_participants_business_type_code"), table_name="participants"
    )
    op.drop_index(op.f("ix_participants_tenant_id"), table_name="participants")
    op.drop_table("participants")
    op.drop_table("business_categories")
    op.drop_index(op.f("ix_tenant_status"), table_name="tenant")
    op.drop_index(op.f("ix_tenant_code"), table_name="tenant")
    op.drop_table("tenant")
