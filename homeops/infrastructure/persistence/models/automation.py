"""Automation and AutomationRun ORM models. Trigger -> condition -> action definitions."""

from datetime import datetime
from typing import Any

import sqlalchemy as sa
from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column

from homeops.infrastructure.persistence.database import Base
from homeops.infrastructure.persistence.models.mixins import (
    CuidMixin,
    MultiTenantModel,
    TenantMixin,
)
from homeops.shared.enums import AutomationRunStatus


def _status_check(column: str) -> str:
    return "{} IN ({})".format(
        column,
        ", ".join(
            "'{}'".format(v.replace("'", "''")) for v in AutomationRunStatus.values()
        ),
    )


class Automation(MultiTenantModel, Base):
    """Automation definition. Table: automation. Trigger + conditions + actions JSON."""

    __tablename__ = "automation"

    property_id: Mapped[str | None] = mapped_column(String, nullable=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    trigger: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    trigger_config: Mapped[dict[str, Any]] = mapped_column(
        JSON, nullable=False, default=dict
    )
    conditions: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    actions: Mapped[list[dict[str, Any]]] = mapped_column(
        JSON, nullable=False, default=list
    )
    is_enabled: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=sa.text("true")
    )
    is_paused: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=sa.text("false")
    )
    pause_until: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    run_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default=sa.text("0")
    )
    last_run_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    last_run_status: Mapped[str | None] = mapped_column(String(16), nullable=True)
    last_run_error: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_by: Mapped[str | None] = mapped_column(String, nullable=True)

    __table_args__ = (
        Index(
            "ix_automation_tenant_trigger_active",
            "tenant_id",
            "trigger",
            "is_enabled",
            "is_paused",
        ),
        CheckConstraint(
            "last_run_status IS NULL OR " + _status_check("last_run_status"),
            name="automation_last_run_status_check",
        ),
    )


class AutomationRun(CuidMixin, TenantMixin, Base):
    """Automation run history. Table: automation_run. Append-only audit record."""

    __tablename__ = "automation_run"

    automation_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("automation.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    triggered_by: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    status: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=AutomationRunStatus.RUNNING.value,
        index=True,
    )
    actions_executed: Mapped[list[dict[str, Any]]] = mapped_column(
        JSON, nullable=False, default=list
    )
    error: Mapped[str | None] = mapped_column(Text, nullable=True)
    started_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    completed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    __table_args__ = (
        Index(
            "ix_automation_run_automation_started",
            "automation_id",
            "started_at",
        ),
        CheckConstraint(_status_check("status"), name="automation_run_status_check"),
    )
