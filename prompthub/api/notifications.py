"""Notification inbox endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from prompthub.auth.middleware import ActorDep, TenantDep
from prompthub.database import get_db
from prompthub.errors import NotFoundError
from prompthub.schemas.collaboration import DataResponse
from prompthub.schemas.records import NotificationRecord
from prompthub.services.collaboration import list_user_notifications, mark_notification_as_read

router = APIRouter()


@router.get("/notifications", response_model=DataResponse[list[NotificationRecord]])
async def get_notifications(
    tenant: TenantDep,
    actor: ActorDep,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """
    Notifications addressed to the actor.
    Recipient identity alone scopes the inbox, so global notifications show up too.
    """
    notifications = await list_user_notifications(db, actor)
    return {"data": notifications}


@router.patch("/notifications/{notification_id}", response_model=DataResponse[NotificationRecord])
async def read_notification(
    notification_id: str,
    tenant: TenantDep,
    actor: ActorDep,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Mark a notification as read. Repeated calls keep the first read_at."""
    try:
        notification = await mark_notification_as_read(db, notification_id, actor)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)
    return {"data": notification}
