#!/usr/bin/env python3
"""
Seed script: creates a demo tenant with an API key, a sample share and a welcome notification.
Run after migrations: python scripts/seed.py
"""

import asyncio
import os
import sys
from uuid import uuid4

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from prompthub.auth.middleware import hash_api_key
from prompthub.database import get_engine_url_and_connect_args
from prompthub.services.collaboration import add_prompt_share, list_prompt_shares, notify
from prompthub.utils.timestamps import now_iso


API_KEY = "sk_demo_prompthub_12345"  # Demo API key - print this for user
DEMO_PROMPT_ID = "demo-prompt"
DEMO_ACTOR = "owner@example.com"


async def seed():
    url, connect_args = get_engine_url_and_connect_args()
    engine = create_async_engine(url, connect_args=connect_args)
    async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with async_session() as session:
        tenant_id = str(uuid4())
        api_key_hash = hash_api_key(API_KEY)

        # Check if tenant exists
        result = await session.execute(
            text("SELECT tenant_id FROM tenants WHERE api_key_hash = :hash"),
            {"hash": api_key_hash},
        )
        row = result.fetchone()
        if row:
            tenant_id = str(row[0])
            print("Tenant already exists, using existing.")
        else:
            await session.execute(
                text("""
                    INSERT INTO tenants (tenant_id, name, api_key_hash, created_at)
                    VALUES (:tid, :name, :hash, :now)
                """),
                {"tid": tenant_id, "name": "Demo Tenant", "hash": api_key_hash, "now": now_iso()},
            )
            await session.commit()

        if await list_prompt_shares(session, DEMO_PROMPT_ID, tenant_id):
            print("Demo share already exists.")
        else:
            await add_prompt_share(
                session,
                prompt_id=DEMO_PROMPT_ID,
                tenant_id=tenant_id,
                target_type="email",
                target_identifier="reviewer@example.com",
                role="viewer",
                actor=DEMO_ACTOR,
            )
            await notify(
                session,
                recipient="reviewer@example.com",
                type="share",
                message=f"{DEMO_ACTOR} shared prompt {DEMO_PROMPT_ID} with you",
                tenant_id=tenant_id,
                metadata={"prompt_id": DEMO_PROMPT_ID, "role": "viewer"},
            )
            await session.commit()

    await engine.dispose()

    print("Seed complete!")
    print(f"API Key: {API_KEY}")
    print(f"Use: Authorization: Bearer {API_KEY}")
    print(f"Example: curl http://localhost:8000/v1/prompts/{DEMO_PROMPT_ID}/shares \\")
    print('  -H "Authorization: Bearer ' + API_KEY + '" \\')
    print('  -H "X-Actor: ' + DEMO_ACTOR + '"')


if __name__ == "__main__":
    asyncio.run(seed())
