"""Prompt and comment activity models - append-only audit trails."""

from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from prompthub.database import Base


class PromptActivity(Base):
    """Actions taken on a prompt."""

    __tablename__ = "prompt_activity_log"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    prompt_id: Mapped[str] = mapped_column(Text, nullable=False)
    tenant_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("tenants.tenant_id", ondelete="CASCADE"), nullable=False
    )
    actor: Mapped[str | None] = mapped_column(Text, nullable=True)
    action: Mapped[str] = mapped_column(Text, nullable=False)
    # "metadata" is reserved on declarative classes
    metadata_json: Mapped[str | None] = mapped_column("metadata", Text, nullable=True)
    created_at: Mapped[str] = mapped_column(String(50), nullable=False)


class PromptCommentActivity(Base):
    """Actions taken on comments attached to a prompt."""

    __tablename__ = "prompt_comment_activity"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    comment_id: Mapped[str] = mapped_column(Text, nullable=False)
    prompt_id: Mapped[str] = mapped_column(Text, nullable=False)
    tenant_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("tenants.tenant_id", ondelete="CASCADE"), nullable=False
    )
    action: Mapped[str] = mapped_column(Text, nullable=False)
    actor: Mapped[str] = mapped_column(Text, nullable=False)
    metadata_json: Mapped[str | None] = mapped_column("metadata", Text, nullable=True)
    created_at: Mapped[str] = mapped_column(String(50), nullable=False)


Index(
    "idx_prompt_activity_prompt",
    PromptActivity.prompt_id,
    PromptActivity.created_at.desc(),
)
Index(
    "idx_prompt_comment_activity_comment",
    PromptCommentActivity.comment_id,
    PromptCommentActivity.created_at.desc(),
)
