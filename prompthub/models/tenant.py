"""Tenant model."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from prompthub.database import Base


class Tenant(Base):
    """Tenant table - one per API key."""

    __tablename__ = "tenants"

    tenant_id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    api_key_hash: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    created_at: Mapped[str] = mapped_column(String(50), nullable=False)
