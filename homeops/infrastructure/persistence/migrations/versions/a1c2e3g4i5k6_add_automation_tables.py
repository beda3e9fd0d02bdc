"""add automation, automation_run and household action tables

Revision ID: a1c2e3g4i5k6
Revises:
Create Date: 2026-10-18

Automation definitions (trigger + conditions + actions JSON), run history,
and the task / approval / calendar_event / smart_lock records actions touch.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "a1c2e3g4i5k6"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_RUN_STATUSES = "'RUNNING', 'SUCCESS', 'FAILED'"


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "automation",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("tenant_id", sa.String(), nullable=False),
        sa.Column("property_id", sa.String(), nullable=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("trigger", sa.String(length=128), nullable=False),
        sa.Column("trigger_config", sa.JSON(), nullable=False),
        sa.Column("conditions", sa.JSON(), nullable=True),
        sa.Column("actions", sa.JSON(), nullable=False),
        sa.Column("is_enabled", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        sa.Column("is_paused", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.Column("pause_until", sa.DateTime(timezone=True), nullable=True),
        sa.Column("run_count", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.Column("last_run_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("last_run_status", sa.String(length=16), nullable=True),
        sa.Column("last_run_error", sa.Text(), nullable=True),
        sa.Column("created_by", sa.String(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            f"last_run_status IS NULL OR last_run_status IN ({_RUN_STATUSES})",
            name="automation_last_run_status_check",
        ),
    )
    op.create_index("ix_automation_tenant_id", "automation", ["tenant_id"])
    op.create_index("ix_automation_property_id", "automation", ["property_id"])
    op.create_index("ix_automation_trigger", "automation", ["trigger"])
    op.create_index(
        "ix_automation_tenant_trigger_active",
        "automation",
        ["tenant_id", "trigger", "is_enabled", "is_paused"],
    )

    op.create_table(
        "automation_run",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("tenant_id", sa.String(), nullable=False),
        sa.Column("automation_id", sa.String(), nullable=False),
        sa.Column("triggered_by", sa.JSON(), nullable=False),
        sa.Column("status", sa.String(length=16), nullable=False),
        sa.Column("actions_executed", sa.JSON(), nullable=False),
        sa.Column("error", sa.Text(), nullable=True),
        sa.Column("started_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["automation_id"], ["automation.id"], ondelete="CASCADE"
        ),
        sa.CheckConstraint(
            f"status IN ({_RUN_STATUSES})", name="automation_run_status_check"
        ),
    )
    op.create_index("ix_automation_run_tenant_id", "automation_run", ["tenant_id"])
    op.create_index(
        "ix_automation_run_automation_id", "automation_run", ["automation_id"]
    )
    op.create_index("ix_automation_run_status", "automation_run", ["status"])
    op.create_index(
        "ix_automation_run_automation_started",
        "automation_run",
        ["automation_id", "started_at"],
    )

    op.create_table(
        "task",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("tenant_id", sa.String(), nullable=False),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("status", sa.String(length=32), nullable=False),
        sa.Column("urgency", sa.String(length=16), nullable=False),
        sa.Column("created_by", sa.String(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_task_tenant_id", "task", ["tenant_id"])
    op.create_index("ix_task_tenant_status", "task", ["tenant_id", "status"])

    op.create_table(
        "approval",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("tenant_id", sa.String(), nullable=False),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("details", sa.Text(), nullable=True),
        sa.Column("status", sa.String(length=32), nullable=False),
        sa.Column("created_by", sa.String(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_approval_tenant_id", "approval", ["tenant_id"])
    op.create_index("ix_approval_tenant_status", "approval", ["tenant_id", "status"])

    op.create_table(
        "calendar_event",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("tenant_id", sa.String(), nullable=False),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("start_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_at", sa.DateTime(timezone=True), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_calendar_event_tenant_id", "calendar_event", ["tenant_id"])

    op.create_table(
        "smart_lock",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("tenant_id", sa.String(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("provider", sa.String(length=32), nullable=False),
        sa.Column("external_id", sa.String(), nullable=True),
        sa.Column("access_token", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_smart_lock_tenant_id", "smart_lock", ["tenant_id"])


def downgrade() -> None:
    op.drop_index("ix_smart_lock_tenant_id", table_name="smart_lock")
    op.drop_table("smart_lock")
    op.drop_index("ix_calendar_event_tenant_id", table_name="calendar_event")
    op.drop_table("calendar_event")
    op.drop_index("ix_approval_tenant_status", table_name="approval")
    op.drop_index("ix_approval_tenant_id", table_name="approval")
    op.drop_table("approval")
    op.drop_index("ix_task_tenant_status", table_name="task")
    op.drop_index("ix_task_tenant_id", table_name="task")
    op.drop_table("task")
    op.drop_index("ix_automation_run_automation_started", table_name="automation_run")
    op.drop_index("ix_automation_run_status", table_name="automation_run")
    op.drop_index("ix_automation_run_automation_id", table_name="automation_run")
    op.drop_index("ix_automation_run_tenant_id", table_name="automation_run")
    op.drop_table("automation_run")
    op.drop_index("ix_automation_tenant_trigger_active", table_name="automation")
    op.drop_index("ix_automation_trigger", table_name="automation")
    op.drop_index("ix_automation_property_id", table_name="automation")
    op.drop_index("ix_automation_tenant_id", table_name="automation")
    op.drop_table("automation")
