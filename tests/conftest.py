"""Shared fixtures: in-memory SQLite database per test."""

import asyncio
import os

# Must be set before prompthub.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from prompthub.database import Base
import prompthub.models  # noqa: F401 - register tables on Base.metadata


@pytest.fixture
def run_db():
    """Run an async scenario(session) against a fresh in-memory database."""

    def _run(scenario):
        async def _main():
            engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            session_maker = async_sessionmaker(
                engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
            )
            try:
                async with session_maker() as session:
                    return await scenario(session)
            finally:
                await engine.dispose()

        return asyncio.run(_main())

    return _run
