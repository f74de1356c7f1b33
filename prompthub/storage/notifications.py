"""Notification inbox repository."""

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from prompthub.models import Notification
from prompthub.schemas.records import NotificationRecord
from prompthub.utils.canonical import decode_metadata, encode_metadata
from prompthub.utils.timestamps import now_iso


def _to_record(row: Notification) -> NotificationRecord:
    return NotificationRecord(
        id=row.id,
        tenant_id=row.tenant_id,
        recipient=row.recipient,
        type=row.type,
        message=row.message,
        metadata=decode_metadata(row.metadata_json),
        read_at=row.read_at,
        created_at=row.created_at,
    )


async def _get_for_recipient(
    db: AsyncSession, notification_id: str, recipient: str, refresh: bool = False
) -> Notification | None:
    stmt = select(Notification).where(
        Notification.id == notification_id,
        Notification.recipient == recipient,
    )
    if refresh:
        stmt = stmt.execution_options(populate_existing=True)
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def create_notification(db: AsyncSession, record: NotificationRecord) -> None:
    """Insert a notification. read_at may be preset by the caller."""
    db.add(
        Notification(
            id=record.id,
            tenant_id=record.tenant_id,
            recipient=record.recipient,
            type=record.type,
            message=record.message,
            metadata_json=encode_metadata(record.metadata),
            read_at=record.read_at,
            created_at=record.created_at,
        )
    )
    await db.flush()


async def list_notifications(
    db: AsyncSession, recipient: str, limit: int = 50
) -> list[NotificationRecord]:
    """Newest-first notifications for a recipient across all tenants."""
    result = await db.execute(
        select(Notification)
        .where(Notification.recipient == recipient)
        .order_by(Notification.created_at.desc())
        .limit(max(limit, 0))
    )
    return [_to_record(row) for row in result.scalars().all()]


async def mark_notification_read(
    db: AsyncSession, notification_id: str, recipient: str
) -> NotificationRecord | None:
    """
    Set the read receipt on a notification, first read wins.

    Returns None when the notification does not exist for this recipient.
    An existing read_at is returned unchanged. The update only applies while
    read_at is still NULL, so a concurrent caller that lost the race re-reads
    the winner's timestamp instead of overwriting it.
    """
    existing = await _get_for_recipient(db, notification_id, recipient)
    if existing is None:
        return None
    if existing.read_at is not None:
        return _to_record(existing)

    read_at = now_iso()
    result = await db.execute(
        update(Notification)
        .where(
            Notification.id == notification_id,
            Notification.recipient == recipient,
            Notification.read_at.is_(None),
        )
        .values(read_at=read_at)
    )
    if result.rowcount == 0:
        existing = await _get_for_recipient(db, notification_id, recipient, refresh=True)
        if existing is None:
            return None
        return _to_record(existing)

    return _to_record(existing).model_copy(update={"read_at": read_at})
