"""Prompt collaboration endpoints - shares and activity."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from prompthub.auth.middleware import ActorDep, TenantDep
from prompthub.database import get_db
from prompthub.errors import NotFoundError
from prompthub.schemas.collaboration import CreateShareRequest, DataResponse
from prompthub.schemas.records import ActivityRecord, ShareRecord
from prompthub.services.collaboration import (
    add_prompt_share,
    list_prompt_activity,
    list_prompt_shares,
    remove_prompt_share,
)
from prompthub.utils.timestamps import to_iso

router = APIRouter()


@router.get("/prompts/{prompt_id}/shares", response_model=DataResponse[list[ShareRecord]])
async def get_shares(
    prompt_id: str,
    tenant: TenantDep,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """List shares on a prompt."""
    shares = await list_prompt_shares(db, prompt_id, tenant.tenant_id)
    return {"data": shares}


@router.post(
    "/prompts/{prompt_id}/shares",
    response_model=DataResponse[list[ShareRecord]],
    status_code=status.HTTP_201_CREATED,
)
async def create_share(
    prompt_id: str,
    body: CreateShareRequest,
    tenant: TenantDep,
    actor: ActorDep,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Grant a role on a prompt. Duplicate grants are accepted."""
    shares = await add_prompt_share(
        db,
        prompt_id=prompt_id,
        tenant_id=tenant.tenant_id,
        target_type=body.target_type,
        target_identifier=body.target_identifier,
        role=body.role,
        actor=actor,
        expires_at=to_iso(body.expires_at) if body.expires_at else None,
    )
    return {"data": shares}


@router.delete(
    "/prompts/{prompt_id}/shares/{share_id}",
    response_model=DataResponse[list[ShareRecord]],
)
async def delete_share(
    prompt_id: str,
    share_id: str,
    tenant: TenantDep,
    actor: ActorDep,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Revoke a share owned by the caller's tenant."""
    try:
        shares = await remove_prompt_share(db, prompt_id, tenant.tenant_id, share_id, actor)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)
    return {"data": shares}


@router.get("/prompts/{prompt_id}/activity", response_model=DataResponse[list[ActivityRecord]])
async def get_activity(
    prompt_id: str,
    tenant: TenantDep,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Newest-first activity feed for a prompt."""
    activity = await list_prompt_activity(db, prompt_id, tenant.tenant_id)
    return {"data": activity}
