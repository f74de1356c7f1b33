"""Collaboration workflows composed from the storage repositories."""

import logging
from typing import Any
from uuid import uuid4

from sqlalchemy.ext.asyncio import AsyncSession

from prompthub.config import settings
from prompthub.errors import NotFoundError
from prompthub.schemas.records import (
    ActivityRecord,
    CommentActivityRecord,
    NotificationRecord,
    ShareRecord,
    ShareRole,
    ShareTargetType,
)
from prompthub.storage.activity import list_activity, log_activity
from prompthub.storage.comment_activity import log_comment_activity
from prompthub.storage.notifications import (
    create_notification,
    list_notifications,
    mark_notification_read,
)
from prompthub.storage.shares import add_share, list_shares, remove_share
from prompthub.utils.timestamps import now_iso

logger = logging.getLogger(__name__)


async def append_activity(
    db: AsyncSession,
    prompt_id: str,
    tenant_id: str,
    action: str,
    actor: str | None = None,
    metadata: dict[str, Any] | None = None,
    created_at: str | None = None,
) -> ActivityRecord:
    """Log a prompt activity with a generated id and timestamp."""
    record = ActivityRecord(
        id=str(uuid4()),
        prompt_id=prompt_id,
        tenant_id=tenant_id,
        actor=actor,
        action=action,
        metadata=metadata,
        created_at=created_at or now_iso(),
    )
    await log_activity(db, record)
    return record


async def list_prompt_shares(db: AsyncSession, prompt_id: str, tenant_id: str) -> list[ShareRecord]:
    return await list_shares(db, prompt_id, tenant_id)


async def add_prompt_share(
    db: AsyncSession,
    prompt_id: str,
    tenant_id: str,
    target_type: ShareTargetType,
    target_identifier: str,
    role: ShareRole,
    actor: str,
    expires_at: str | None = None,
) -> list[ShareRecord]:
    """
    Grant a role on a prompt and record a share_added activity.
    Returns the prompt's shares after the insert.
    """
    now = now_iso()
    record = ShareRecord(
        id=str(uuid4()),
        prompt_id=prompt_id,
        tenant_id=tenant_id,
        target_type=target_type,
        target_identifier=target_identifier,
        role=role,
        created_by=actor,
        created_at=now,
        expires_at=expires_at,
    )
    await add_share(db, record)
    await append_activity(
        db,
        prompt_id=prompt_id,
        tenant_id=tenant_id,
        action="share_added",
        actor=actor,
        metadata={
            "target_type": record.target_type,
            "target_identifier": record.target_identifier,
            "role": record.role,
        },
        created_at=now,
    )
    logger.info(
        "Share %s added on prompt %s: %s %s as %s",
        record.id, prompt_id, target_type, target_identifier, role,
    )
    return await list_shares(db, prompt_id, tenant_id)


async def remove_prompt_share(
    db: AsyncSession, prompt_id: str, tenant_id: str, share_id: str, actor: str
) -> list[ShareRecord]:
    """Revoke a share. Raises NotFoundError when the tenant owns no such share."""
    removed = await remove_share(db, share_id, tenant_id)
    if not removed:
        logger.warning("Share %s not found for tenant %s", share_id, tenant_id)
        raise NotFoundError("Share", share_id)

    await append_activity(
        db,
        prompt_id=prompt_id,
        tenant_id=tenant_id,
        action="share_removed",
        actor=actor,
        metadata={"share_id": share_id},
    )
    logger.info("Share %s removed from prompt %s", share_id, prompt_id)
    return await list_shares(db, prompt_id, tenant_id)


async def record_comment_activity(
    db: AsyncSession,
    comment_id: str,
    prompt_id: str,
    tenant_id: str,
    action: str,
    actor: str,
    metadata: dict[str, Any] | None = None,
) -> CommentActivityRecord:
    """Log a comment action and mirror it onto the prompt's activity feed."""
    now = now_iso()
    record = CommentActivityRecord(
        id=str(uuid4()),
        comment_id=comment_id,
        prompt_id=prompt_id,
        tenant_id=tenant_id,
        action=f"comment.{action}",
        actor=actor,
        metadata=metadata,
        created_at=now,
    )
    await log_comment_activity(db, record)
    await append_activity(
        db,
        prompt_id=prompt_id,
        tenant_id=tenant_id,
        action=f"comment_{action}",
        actor=actor,
        metadata={"comment_id": comment_id},
        created_at=now,
    )
    return record


async def list_prompt_activity(db: AsyncSession, prompt_id: str, tenant_id: str) -> list[ActivityRecord]:
    return await list_activity(db, prompt_id, tenant_id, settings.activity_page_size)


async def notify(
    db: AsyncSession,
    recipient: str,
    type: str,
    message: str,
    tenant_id: str | None = None,
    metadata: dict[str, Any] | None = None,
) -> NotificationRecord:
    """Create an unread notification."""
    record = NotificationRecord(
        id=str(uuid4()),
        tenant_id=tenant_id,
        recipient=recipient,
        type=type,
        message=message,
        metadata=metadata,
        read_at=None,
        created_at=now_iso(),
    )
    await create_notification(db, record)
    logger.info("Notification %s (%s) queued for %s", record.id, type, recipient)
    return record


async def list_user_notifications(db: AsyncSession, recipient: str) -> list[NotificationRecord]:
    return await list_notifications(db, recipient, settings.notification_page_size)


async def mark_notification_as_read(
    db: AsyncSession, notification_id: str, recipient: str
) -> NotificationRecord:
    """Mark read for the recipient. Raises NotFoundError when it isn't theirs."""
    note = await mark_notification_read(db, notification_id, recipient)
    if note is None:
        logger.warning("Notification %s not found for %s", notification_id, recipient)
        raise NotFoundError("Notification", notification_id)
    return note
