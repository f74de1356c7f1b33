"""Comment activity repository. Write-only at this layer."""

from sqlalchemy.ext.asyncio import AsyncSession

from prompthub.models import PromptCommentActivity
from prompthub.schemas.records import CommentActivityRecord
from prompthub.utils.canonical import encode_metadata


async def log_comment_activity(db: AsyncSession, record: CommentActivityRecord) -> None:
    """Append an activity entry for a comment."""
    db.add(
        PromptCommentActivity(
            id=record.id,
            comment_id=record.comment_id,
            prompt_id=record.prompt_id,
            tenant_id=record.tenant_id,
            action=record.action,
            actor=record.actor,
            metadata_json=encode_metadata(record.metadata),
            created_at=record.created_at,
        )
    )
    await db.flush()
