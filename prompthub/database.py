"""Database connection and session management."""

import ssl
from collections.abc import AsyncGenerator
from urllib.parse import parse_qs, urlencode, urlparse, urlunparse

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from prompthub.config import settings


def _make_permissive_ssl_context():
    """SSL context that skips cert verification. Only used when explicitly opted in."""
    ctx = ssl.create_default_context()
    ctx.check_hostname = False
    ctx.verify_mode = ssl.CERT_NONE
    return ctx


def ssl_for_mode(mode: str, insecure: bool = False):
    """Map a libpq sslmode to asyncpg's ssl argument."""
    if mode == "disable":
        return False
    if mode in ("allow", "prefer"):
        return mode
    if insecure:
        return _make_permissive_ssl_context()
    ctx = ssl.create_default_context()
    # verify-ca checks the chain but not the host name
    ctx.check_hostname = mode != "verify-ca"
    return ctx


def get_engine_url_and_connect_args(url: str | None = None, insecure: bool | None = None):
    """Strip sslmode from URL (asyncpg doesn't accept it) and pass SSL via connect_args."""
    url = url or settings.database_url
    if insecure is None:
        insecure = settings.database_ssl_insecure
    connect_args = {}
    if "sslmode=" in url or "ssl=" in url:
        parsed = urlparse(url)
        query = parse_qs(parsed.query)
        mode = (query.pop("sslmode", None) or [""])[0].lower()
        legacy = (query.pop("ssl", None) or [""])[0].lower()
        if not mode:
            mode = "require" if legacy in ("true", "1", "require") else "disable"
        new_query = urlencode(query, doseq=True)
        url = urlunparse(parsed._replace(query=new_query))
        connect_args["ssl"] = ssl_for_mode(mode, insecure)
    return url, connect_args


_db_url, _connect_args = get_engine_url_and_connect_args()


class Base(DeclarativeBase):
    """SQLAlchemy declarative base."""

    pass


engine = create_async_engine(
    _db_url,
    echo=settings.log_level == "DEBUG",
    connect_args=_connect_args,
)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency for database sessions."""
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
