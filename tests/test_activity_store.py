"""Tests for the prompt and comment activity repositories."""

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from prompthub.models import PromptCommentActivity
from prompthub.schemas.records import ActivityRecord, CommentActivityRecord
from prompthub.storage.activity import list_activity, log_activity
from prompthub.storage.comment_activity import log_comment_activity
from prompthub.utils.canonical import decode_metadata


def _activity(id, created_at, prompt_id="p1", tenant_id="t1", **kwargs):
    return ActivityRecord(
        id=id,
        prompt_id=prompt_id,
        tenant_id=tenant_id,
        actor=kwargs.get("actor", "alice@example.com"),
        action=kwargs.get("action", "updated"),
        metadata=kwargs.get("metadata"),
        created_at=created_at,
    )


def test_logged_activity_is_listed(run_db):
    """A logged record comes back unchanged, metadata included."""
    record = _activity(
        "a1",
        "2026-01-01T10:00:00.000Z",
        metadata={"field": "body", "versions": [1, 2], "nested": {"ok": True}},
    )

    async def scenario(db):
        await log_activity(db, record)
        return await list_activity(db, "p1", "t1")

    assert run_db(scenario) == [record]


def test_activity_without_actor_or_metadata(run_db):
    """Actor and metadata are optional."""
    record = _activity("a1", "2026-01-01T10:00:00.000Z", actor=None)

    async def scenario(db):
        await log_activity(db, record)
        return await list_activity(db, "p1", "t1")

    listed = run_db(scenario)
    assert listed[0].actor is None
    assert listed[0].metadata is None


def test_list_activity_newest_first_and_limited(run_db):
    """Results are ordered by created_at descending and capped at limit."""
    timestamps = [f"2026-01-0{day}T09:00:00.000Z" for day in (3, 1, 5, 2, 4)]

    async def scenario(db):
        for i, ts in enumerate(timestamps):
            await log_activity(db, _activity(f"a{i}", ts))
        return await list_activity(db, "p1", "t1", limit=3)

    listed = run_db(scenario)
    assert [r.created_at for r in listed] == [
        "2026-01-05T09:00:00.000Z",
        "2026-01-04T09:00:00.000Z",
        "2026-01-03T09:00:00.000Z",
    ]


def test_list_activity_scoped_to_prompt_and_tenant(run_db):
    """Other prompts and other tenants are filtered out."""

    async def scenario(db):
        await log_activity(db, _activity("a1", "2026-01-01T00:00:00.000Z"))
        await log_activity(db, _activity("a2", "2026-01-01T00:00:01.000Z", prompt_id="p2"))
        await log_activity(db, _activity("a3", "2026-01-01T00:00:02.000Z", tenant_id="t2"))
        return await list_activity(db, "p1", "t1")

    assert [r.id for r in run_db(scenario)] == ["a1"]


def test_list_activity_empty(run_db):
    """No rows yields an empty list, not None."""

    async def scenario(db):
        return await list_activity(db, "missing", "t1")

    assert run_db(scenario) == []


def test_duplicate_activity_id_raises(run_db):
    """Duplicate ids surface as the store's integrity error."""

    async def scenario(db):
        await log_activity(db, _activity("a1", "2026-01-01T00:00:00.000Z"))
        await db.commit()
        db.expunge_all()
        with pytest.raises(IntegrityError):
            await log_activity(db, _activity("a1", "2026-01-02T00:00:00.000Z"))

    run_db(scenario)


def test_comment_activity_metadata_persists(run_db):
    """Comment activity metadata is stored as JSON text and reads back equal."""
    record = CommentActivityRecord(
        id="c-act-1",
        comment_id="c1",
        prompt_id="p1",
        tenant_id="t1",
        action="updated",
        actor="bob@example.com",
        metadata={"reason": "edit"},
        created_at="2026-01-01T00:00:00.000Z",
    )

    async def scenario(db):
        await log_comment_activity(db, record)
        result = await db.execute(
            select(PromptCommentActivity).where(PromptCommentActivity.id == "c-act-1")
        )
        return result.scalar_one()

    row = run_db(scenario)
    assert row.comment_id == "c1"
    assert row.actor == "bob@example.com"
    assert row.metadata_json == '{"reason":"edit"}'
    assert decode_metadata(row.metadata_json) == {"reason": "edit"}


def test_comment_activity_requires_actor():
    """Comment activity records cannot be built without an actor."""
    with pytest.raises(ValueError):
        CommentActivityRecord(
            id="x",
            comment_id="c1",
            prompt_id="p1",
            tenant_id="t1",
            action="created",
            actor=None,
            created_at="2026-01-01T00:00:00.000Z",
        )


def test_list_activity_negative_limit_returns_nothing(run_db):
    """A negative limit is clamped to zero rather than meaning unlimited."""

    async def scenario(db):
        for i in range(3):
            await log_activity(db, _activity(f"a{i}", f"2026-01-01T00:00:0{i}.000Z"))
        return await list_activity(db, "p1", "t1", limit=-1)

    assert run_db(scenario) == []
