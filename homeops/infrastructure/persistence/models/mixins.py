"""SQLAlchemy mixins for common model patterns.

Provides: CuidMixin, TenantMixin, TimestampMixin and the combined
MultiTenantModel. Tenants live in the surrounding platform, so tenant_id is
an indexed string without a foreign key here.
"""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from homeops.shared.utils.generators import generate_cuid


class CuidMixin:
    """Mixin for models using CUID as primary key. Provides id with default generate_cuid."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String, primary_key=True, default=generate_cuid)


class TenantMixin:
    """Mixin for multi-tenant (household-scoped) models."""

    @declared_attr
    def tenant_id(cls) -> Mapped[str]:
        return mapped_column(String, nullable=False, index=True)


class TimestampMixin:
    """Mixin for created_at and updated_at (server defaults, timezone-aware)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class MultiTenantModel(CuidMixin, TenantMixin, TimestampMixin):
    """Combined mixin: CUID + tenant_id + created_at/updated_at."""

    __abstract__ = True
