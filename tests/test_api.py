"""API tests over ASGI with an in-memory database."""

import asyncio

import httpx
import pytest

from prompthub.auth.middleware import hash_api_key
from prompthub.database import get_db
from prompthub.main import app
from prompthub.models import Tenant
from prompthub.services.collaboration import notify

API_KEY = "sk_test_key"
OTHER_KEY = "sk_other_key"


@pytest.fixture
def api(run_db):
    """Run scenario(client, db) with two tenants and get_db bound to the test session."""

    def _run(scenario):
        async def with_client(db):
            for tenant_id, key in (("t1", API_KEY), ("t2", OTHER_KEY)):
                db.add(
                    Tenant(
                        tenant_id=tenant_id,
                        name=f"Tenant {tenant_id}",
                        api_key_hash=hash_api_key(key),
                        created_at="2026-01-01T00:00:00.000Z",
                    )
                )
            await db.flush()

            async def override_get_db():
                yield db

            app.dependency_overrides[get_db] = override_get_db
            try:
                transport = httpx.ASGITransport(app=app)
                async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
                    return await scenario(client, db)
            finally:
                app.dependency_overrides.clear()

        return run_db(with_client)

    return _run


def _headers(key=API_KEY, actor="alice@example.com"):
    return {"Authorization": f"Bearer {key}", "X-Actor": actor}


def test_health():
    """Health endpoint needs no auth."""

    async def call():
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            return await client.get("/health")

    response = asyncio.run(call())
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_metrics_route_not_exposed():
    """Only /health is served for monitoring."""

    async def call():
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            return await client.get("/metrics")

    assert asyncio.run(call()).status_code == 404


def test_share_lifecycle(api):
    """Create, list and delete a share, then read the activity feed."""

    async def scenario(client, db):
        created = await client.post(
            "/v1/prompts/p1/shares",
            json={
                "target_type": "email",
                "target_identifier": "carol@example.com",
                "role": "editor",
                "expires_at": "2026-12-31T00:00:00+02:00",
            },
            headers=_headers(),
        )
        listed = await client.get("/v1/prompts/p1/shares", headers=_headers())
        share_id = created.json()["data"][0]["id"]
        deleted = await client.delete(f"/v1/prompts/p1/shares/{share_id}", headers=_headers())
        activity = await client.get("/v1/prompts/p1/activity", headers=_headers())
        return created, listed, deleted, activity

    created, listed, deleted, activity = api(scenario)
    assert created.status_code == 201
    share = created.json()["data"][0]
    assert share["tenant_id"] == "t1"
    assert share["created_by"] == "alice@example.com"
    assert share["expires_at"] == "2026-12-30T22:00:00.000Z"
    assert listed.json()["data"] == created.json()["data"]
    assert deleted.status_code == 200
    assert deleted.json() == {"data": []}
    assert {a["action"] for a in activity.json()["data"]} == {"share_added", "share_removed"}


def test_delete_share_from_other_tenant_is_404(api):
    """Tenant two cannot delete tenant one's share."""

    async def scenario(client, db):
        created = await client.post(
            "/v1/prompts/p1/shares",
            json={"target_type": "user", "target_identifier": "u1", "role": "viewer"},
            headers=_headers(),
        )
        share_id = created.json()["data"][0]["id"]
        return await client.delete(
            f"/v1/prompts/p1/shares/{share_id}", headers=_headers(key=OTHER_KEY)
        )

    response = api(scenario)
    assert response.status_code == 404


def test_invalid_share_payload_is_422(api):
    """Unknown target types and empty identifiers are rejected."""

    async def scenario(client, db):
        bad_type = await client.post(
            "/v1/prompts/p1/shares",
            json={"target_type": "group", "target_identifier": "g1", "role": "viewer"},
            headers=_headers(),
        )
        empty_target = await client.post(
            "/v1/prompts/p1/shares",
            json={"target_type": "user", "target_identifier": "", "role": "viewer"},
            headers=_headers(),
        )
        return bad_type, empty_target

    bad_type, empty_target = api(scenario)
    assert bad_type.status_code == 422
    assert empty_target.status_code == 422


def test_auth_errors(api):
    """Missing bearer is 401, unknown key is 403, missing actor is 401."""

    async def scenario(client, db):
        no_auth = await client.get("/v1/prompts/p1/shares")
        bad_key = await client.get("/v1/prompts/p1/shares", headers=_headers(key="sk_wrong"))
        no_actor = await client.get(
            "/v1/notifications", headers={"Authorization": f"Bearer {API_KEY}"}
        )
        return no_auth, bad_key, no_actor

    no_auth, bad_key, no_actor = api(scenario)
    assert no_auth.status_code == 401
    assert bad_key.status_code == 403
    assert no_actor.status_code == 401


def test_notifications_read_flow(api):
    """The actor sees their inbox and can mark an entry read once."""

    async def scenario(client, db):
        note = await notify(db, "alice@example.com", "share", "Prompt shared with you")
        inbox = await client.get("/v1/notifications", headers=_headers())
        first = await client.patch(f"/v1/notifications/{note.id}", headers=_headers())
        second = await client.patch(f"/v1/notifications/{note.id}", headers=_headers())
        stranger = await client.patch(
            f"/v1/notifications/{note.id}", headers=_headers(actor="bob@example.com")
        )
        return inbox, first, second, stranger

    inbox, first, second, stranger = api(scenario)
    assert [n["message"] for n in inbox.json()["data"]] == ["Prompt shared with you"]
    assert first.status_code == 200
    assert first.json()["data"]["read_at"] is not None
    assert second.json()["data"]["read_at"] == first.json()["data"]["read_at"]
    assert stranger.status_code == 404
