"""Collaboration API schemas."""

from typing import Generic, TypeVar

from pydantic import AwareDatetime, BaseModel, Field

from prompthub.schemas.records import ShareRole, ShareTargetType

T = TypeVar("T")


class CreateShareRequest(BaseModel):
    """POST /v1/prompts/{prompt_id}/shares request."""

    target_type: ShareTargetType
    target_identifier: str = Field(min_length=1, max_length=256)
    role: ShareRole
    expires_at: AwareDatetime | None = None


class DataResponse(BaseModel, Generic[T]):
    """Envelope for collaboration responses."""

    data: T
