"""Prompt share model."""

from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from prompthub.database import Base


class PromptShare(Base):
    """Role grant on a prompt to a user, email or tenant."""

    __tablename__ = "prompt_shares"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    prompt_id: Mapped[str] = mapped_column(Text, nullable=False)
    tenant_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("tenants.tenant_id", ondelete="CASCADE"), nullable=False
    )
    target_type: Mapped[str] = mapped_column(String(20), nullable=False)  # user|email|tenant
    target_identifier: Mapped[str] = mapped_column(Text, nullable=False)
    role: Mapped[str] = mapped_column(String(20), nullable=False)  # viewer|editor|approver
    created_by: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[str] = mapped_column(String(50), nullable=False)
    expires_at: Mapped[str | None] = mapped_column(String(50), nullable=True)

    # Not unique: duplicate grants are resolved by consumers
    __table_args__ = (Index("idx_prompt_shares_prompt", "prompt_id", "tenant_id"),)
