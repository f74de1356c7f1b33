"""Typed records returned by the storage layer."""

from typing import Any, Literal

from pydantic import BaseModel

ShareTargetType = Literal["user", "email", "tenant"]
ShareRole = Literal["viewer", "editor", "approver"]


class ActivityRecord(BaseModel):
    """Action taken on a prompt."""

    id: str
    prompt_id: str
    tenant_id: str
    actor: str | None = None
    action: str
    metadata: dict[str, Any] | None = None
    created_at: str


class CommentActivityRecord(BaseModel):
    """Action taken on a prompt comment. Actor is required."""

    id: str
    comment_id: str
    prompt_id: str
    tenant_id: str
    action: str
    actor: str
    metadata: dict[str, Any] | None = None
    created_at: str


class NotificationRecord(BaseModel):
    """Inbox entry. tenant_id is None for global notifications."""

    id: str
    tenant_id: str | None = None
    recipient: str
    type: str
    message: str
    metadata: dict[str, Any] | None = None
    read_at: str | None = None
    created_at: str


class ShareRecord(BaseModel):
    """Role grant on a prompt."""

    id: str
    prompt_id: str
    tenant_id: str
    target_type: ShareTargetType
    target_identifier: str
    role: ShareRole
    created_by: str
    created_at: str
    expires_at: str | None = None
