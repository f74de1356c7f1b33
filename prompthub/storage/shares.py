"""Prompt share registry."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from prompthub.models import PromptShare
from prompthub.schemas.records import ShareRecord


def _to_record(row: PromptShare) -> ShareRecord:
    return ShareRecord(
        id=row.id,
        prompt_id=row.prompt_id,
        tenant_id=row.tenant_id,
        target_type=row.target_type,
        target_identifier=row.target_identifier,
        role=row.role,
        created_by=row.created_by,
        created_at=row.created_at,
        expires_at=row.expires_at,
    )


async def add_share(db: AsyncSession, record: ShareRecord) -> None:
    """Insert a share. Existing grants to the same target are not checked."""
    db.add(
        PromptShare(
            id=record.id,
            prompt_id=record.prompt_id,
            tenant_id=record.tenant_id,
            target_type=record.target_type,
            target_identifier=record.target_identifier,
            role=record.role,
            created_by=record.created_by,
            created_at=record.created_at,
            expires_at=record.expires_at,
        )
    )
    await db.flush()


async def list_shares(db: AsyncSession, prompt_id: str, tenant_id: str) -> list[ShareRecord]:
    """All shares on a prompt (tenant-scoped, unordered)."""
    result = await db.execute(
        select(PromptShare).where(
            PromptShare.prompt_id == prompt_id,
            PromptShare.tenant_id == tenant_id,
        )
    )
    return [_to_record(row) for row in result.scalars().all()]


async def remove_share(db: AsyncSession, share_id: str, tenant_id: str) -> bool:
    """
    Delete a share owned by tenant_id.

    Returns False when nothing matched, which covers both an unknown id and
    an id that belongs to another tenant.
    """
    result = await db.execute(
        delete(PromptShare)
        .where(
            PromptShare.id == share_id,
            PromptShare.tenant_id == tenant_id,
        )
    )
    return result.rowcount > 0
