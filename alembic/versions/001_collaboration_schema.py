"""Collaboration schema - tenants, activity logs, notifications, shares.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "tenants",
        sa.Column("tenant_id", sa.String(36), primary_key=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("api_key_hash", sa.String(255), unique=True, nullable=False),
        sa.Column("created_at", sa.String(50), nullable=False),
    )

    op.create_table(
        "prompt_activity_log",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("prompt_id", sa.Text(), nullable=False),
        sa.Column(
            "tenant_id",
            sa.String(36),
            sa.ForeignKey("tenants.tenant_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("actor", sa.Text(), nullable=True),
        sa.Column("action", sa.Text(), nullable=False),
        sa.Column("metadata", sa.Text(), nullable=True),
        sa.Column("created_at", sa.String(50), nullable=False),
    )
    op.create_index(
        "idx_prompt_activity_prompt",
        "prompt_activity_log",
        ["prompt_id", sa.text("created_at DESC")],
    )

    op.create_table(
        "prompt_comment_activity",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("comment_id", sa.Text(), nullable=False),
        sa.Column("prompt_id", sa.Text(), nullable=False),
        sa.Column(
            "tenant_id",
            sa.String(36),
            sa.ForeignKey("tenants.tenant_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("action", sa.Text(), nullable=False),
        sa.Column("actor", sa.Text(), nullable=False),
        sa.Column("metadata", sa.Text(), nullable=True),
        sa.Column("created_at", sa.String(50), nullable=False),
    )
    op.create_index(
        "idx_prompt_comment_activity_comment",
        "prompt_comment_activity",
        ["comment_id", sa.text("created_at DESC")],
    )

    # tenant_id is nullable: global notifications have no tenant
    op.create_table(
        "notifications",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("tenant_id", sa.String(36), nullable=True),
        sa.Column("recipient", sa.Text(), nullable=False),
        sa.Column("type", sa.Text(), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("metadata", sa.Text(), nullable=True),
        sa.Column("read_at", sa.String(50), nullable=True),
        sa.Column("created_at", sa.String(50), nullable=False),
    )
    op.create_index(
        "idx_notifications_recipient",
        "notifications",
        ["recipient", sa.text("created_at DESC")],
    )

    op.create_table(
        "prompt_shares",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("prompt_id", sa.Text(), nullable=False),
        sa.Column(
            "tenant_id",
            sa.String(36),
            sa.ForeignKey("tenants.tenant_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("target_type", sa.String(20), nullable=False),
        sa.Column("target_identifier", sa.Text(), nullable=False),
        sa.Column("role", sa.String(20), nullable=False),
        sa.Column("created_by", sa.Text(), nullable=False),
        sa.Column("created_at", sa.String(50), nullable=False),
        sa.Column("expires_at", sa.String(50), nullable=True),
    )
    # Non-unique: duplicate grants to one target are allowed
    op.create_index("idx_prompt_shares_prompt", "prompt_shares", ["prompt_id", "tenant_id"])


def downgrade() -> None:
    op.drop_index("idx_prompt_shares_prompt", table_name="prompt_shares")
    op.drop_table("prompt_shares")
    op.drop_index("idx_notifications_recipient", table_name="notifications")
    op.drop_table("notifications")
    op.drop_index("idx_prompt_comment_activity_comment", table_name="prompt_comment_activity")
    op.drop_table("prompt_comment_activity")
    op.drop_index("idx_prompt_activity_prompt", table_name="prompt_activity_log")
    op.drop_table("prompt_activity_log")
    op.drop_table("tenants")
