"""Prompt activity log repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from prompthub.models import PromptActivity
from prompthub.schemas.records import ActivityRecord
from prompthub.utils.canonical import decode_metadata, encode_metadata


def _to_record(row: PromptActivity) -> ActivityRecord:
    return ActivityRecord(
        id=row.id,
        prompt_id=row.prompt_id,
        tenant_id=row.tenant_id,
        actor=row.actor,
        action=row.action,
        metadata=decode_metadata(row.metadata_json),
        created_at=row.created_at,
    )


async def log_activity(db: AsyncSession, record: ActivityRecord) -> None:
    """Append an activity entry for a prompt."""
    db.add(
        PromptActivity(
            id=record.id,
            prompt_id=record.prompt_id,
            tenant_id=record.tenant_id,
            actor=record.actor,
            action=record.action,
            metadata_json=encode_metadata(record.metadata),
            created_at=record.created_at,
        )
    )
    await db.flush()


async def list_activity(
    db: AsyncSession, prompt_id: str, tenant_id: str, limit: int = 100
) -> list[ActivityRecord]:
    """Newest-first activity for a prompt (tenant-scoped)."""
    result = await db.execute(
        select(PromptActivity)
        .where(
            PromptActivity.prompt_id == prompt_id,
            PromptActivity.tenant_id == tenant_id,
        )
        .order_by(PromptActivity.created_at.desc())
        .limit(max(limit, 0))
    )
    return [_to_record(row) for row in result.scalars().all()]
