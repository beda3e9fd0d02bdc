"""Action executor: typed handler registry for automation actions (implements IActionExecutor).

Each action type maps to a pydantic config model and a handler coroutine.
Config is validated at the boundary; handlers raise on failure and execute()
turns every failure into ActionResult(success=False), so a run loop never
sees an exception from an action.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from datetime import datetime, timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from homeops.application.dtos.automation import ActionConfig, ActionResult, TriggerEvent
from homeops.application.dtos.household import LockCommand
from homeops.application.interfaces.repositories import (
    IApprovalStore,
    ICalendarEventStore,
    ISmartLockStore,
    ITaskStore,
)
from homeops.application.interfaces.services import (
    INotificationService,
    IWebhookTransport,
)
from homeops.application.services.condition_matcher import data_value
from homeops.domain.entities.automation import AutomationEntity
from homeops.domain.exceptions import (
    ActionConfigurationException,
    LockProviderException,
)
from homeops.infrastructure.external.smart_locks import LockProviderRegistry
from homeops.infrastructure.services.notification_service import (
    LogOnlyNotificationService,
)
from homeops.shared.enums import (
    ApprovalStatus,
    AutomationActionType,
    TaskPriority,
    TaskStatus,
)
from homeops.shared.telemetry.logging import get_logger
from homeops.shared.utils.datetime import ensure_utc, utc_now
from homeops.shared.utils.templating import interpolate, render_value

logger = get_logger(__name__)

DEFAULT_NOTIFICATION_TITLE = "Automation Alert"
DEFAULT_TASK_TITLE = "Auto-created task"
DEFAULT_APPROVAL_TITLE = "Auto-created approval"
DEFAULT_EVENT_TITLE = "Auto-created event"
DEFAULT_EVENT_DURATION = timedelta(hours=1)


class _ActionConfigModel(BaseModel):
    """Base for action configs: snake_case or camelCase keys, unknown keys ignored."""

    model_config = ConfigDict(
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


class NotificationConfig(_ActionConfigModel):
    user_id: str | None = None
    title: str | None = None
    body: str | None = None


class CreateTaskConfig(_ActionConfigModel):
    title: str | None = None
    description: str | None = None
    priority: TaskPriority = TaskPriority.MEDIUM


class CompleteTaskConfig(_ActionConfigModel):
    task_id: str | None = None


class CreateApprovalConfig(_ActionConfigModel):
    title: str | None = None
    description: str | None = None


class AutoApproveConfig(_ActionConfigModel):
    approval_id: str | None = None


class LockConfig(_ActionConfigModel):
    lock_id: str | None = None


class CalendarEventConfig(_ActionConfigModel):
    title: str | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None


class WebhookConfig(_ActionConfigModel):
    url: str | None = None
    headers: dict[str, str] = {}


class LogEventConfig(_ActionConfigModel):
    message: Any = None


class SendEmailConfig(_ActionConfigModel):
    to: Any = None
    subject: Any = None


class SendSmsConfig(_ActionConfigModel):
    to: Any = None
    message: Any = None


class UpdateBudgetConfig(_ActionConfigModel):
    budget_id: Any = None
    adjustment: Any = None


_Handler = Callable[[Any, TriggerEvent, AutomationEntity], Awaitable[ActionResult]]


def _first_error(e: ValidationError) -> str:
    err = e.errors()[0]
    loc = ".".join(str(part) for part in err.get("loc", ()))
    msg = err.get("msg", str(e))
    return f"{loc}: {msg}" if loc else msg


def _text(value: Any) -> str | None:
    """Free-form config value as a template string (log and stub actions never fail)."""
    if value is None or isinstance(value, str):
        return value
    return render_value(value)


def _resolve_id(configured: str | None, event: TriggerEvent, key: str) -> str | None:
    """Id from action config, else from event data (snake_case then camelCase)."""
    if configured:
        return configured
    value = data_value(event.data, key)
    return str(value) if value not in (None, "") else None


class ActionExecutor:
    """Runs one action of an automation against the household stores and adapters."""

    def __init__(
        self,
        task_store: ITaskStore,
        approval_store: IApprovalStore,
        calendar_store: ICalendarEventStore,
        lock_store: ISmartLockStore,
        *,
        notification_service: INotificationService | None = None,
        lock_registry: LockProviderRegistry | None = None,
        webhook_transport: IWebhookTransport | None = None,
    ) -> None:
        self._task_store = task_store
        self._approval_store = approval_store
        self._calendar_store = calendar_store
        self._lock_store = lock_store
        self._notification_service = notification_service or LogOnlyNotificationService()
        self._lock_registry = lock_registry or LockProviderRegistry()
        self._webhook_transport = webhook_transport
        self._handlers: dict[str, tuple[type[_ActionConfigModel], _Handler]] = {
            AutomationActionType.SEND_NOTIFICATION.value: (
                NotificationConfig,
                self._send_notification,
            ),
            AutomationActionType.CREATE_TASK.value: (CreateTaskConfig, self._create_task),
            AutomationActionType.COMPLETE_TASK.value: (
                CompleteTaskConfig,
                self._complete_task,
            ),
            AutomationActionType.CREATE_APPROVAL.value: (
                CreateApprovalConfig,
                self._create_approval,
            ),
            AutomationActionType.AUTO_APPROVE.value: (
                AutoApproveConfig,
                self._auto_approve,
            ),
            AutomationActionType.LOCK_DOOR.value: (LockConfig, self._lock_door),
            AutomationActionType.UNLOCK_DOOR.value: (LockConfig, self._unlock_door),
            AutomationActionType.ADD_CALENDAR_EVENT.value: (
                CalendarEventConfig,
                self._add_calendar_event,
            ),
            AutomationActionType.TRIGGER_WEBHOOK.value: (
                WebhookConfig,
                self._trigger_webhook,
            ),
            AutomationActionType.LOG_EVENT.value: (LogEventConfig, self._log_event),
            AutomationActionType.SEND_EMAIL.value: (SendEmailConfig, self._send_email),
            AutomationActionType.SEND_SMS.value: (SendSmsConfig, self._send_sms),
            AutomationActionType.UPDATE_BUDGET.value: (
                UpdateBudgetConfig,
                self._update_budget,
            ),
        }

    @property
    def supported_types(self) -> list[str]:
        return list(self._handlers)

    async def execute(
        self,
        action: ActionConfig,
        event: TriggerEvent,
        automation: AutomationEntity,
    ) -> ActionResult:
        """Validate config and run the handler. Never raises."""
        entry = self._handlers.get(action.type)
        if entry is None:
            return ActionResult.fail(f"unknown action type: {action.type}")
        model, handler = entry
        try:
            config = model.model_validate(action.config)
        except ValidationError as e:
            return ActionResult.fail(
                f"invalid config for {action.type}: {_first_error(e)}"
            )
        try:
            return await handler(config, event, automation)
        except ActionConfigurationException as e:
            return ActionResult.fail(e.message)
        except Exception as e:
            logger.warning(
                "Action failed: type=%s automation_id=%s tenant_id=%s error=%s",
                action.type,
                automation.id,
                automation.tenant_id,
                e,
            )
            return ActionResult.fail(str(e) or type(e).__name__)

    async def _send_notification(
        self, config: NotificationConfig, event: TriggerEvent, automation: AutomationEntity
    ) -> ActionResult:
        user_id = _resolve_id(config.user_id, event, "user_id")
        if not user_id:
            raise ActionConfigurationException(
                AutomationActionType.SEND_NOTIFICATION.value,
                "missing user id for notification",
            )
        title = interpolate(config.title or DEFAULT_NOTIFICATION_TITLE, event.data)
        body = interpolate(config.body, event.data)
        await self._notification_service.send(user_id, title, body)
        return ActionResult.ok({"user_id": user_id, "title": title})

    async def _create_task(
        self, config: CreateTaskConfig, event: TriggerEvent, automation: AutomationEntity
    ) -> ActionResult:
        task = await self._task_store.create_task(
            automation.tenant_id,
            interpolate(config.title or DEFAULT_TASK_TITLE, event.data),
            description=interpolate(config.description, event.data),
            urgency=config.priority.value,
            created_by=automation.created_by,
        )
        return ActionResult.ok({"task_id": task.id})

    async def _complete_task(
        self, config: CompleteTaskConfig, event: TriggerEvent, automation: AutomationEntity
    ) -> ActionResult:
        task_id = _resolve_id(config.task_id, event, "task_id")
        if not task_id:
            raise ActionConfigurationException(
                AutomationActionType.COMPLETE_TASK.value, "missing task id to complete"
            )
        updated = await self._task_store.update_status(
            task_id, automation.tenant_id, TaskStatus.DONE.value
        )
        if not updated:
            return ActionResult.fail(f"task {task_id} not found")
        return ActionResult.ok({"task_id": task_id})

    async def _create_approval(
        self,
        config: CreateApprovalConfig,
        event: TriggerEvent,
        automation: AutomationEntity,
    ) -> ActionResult:
        approval = await self._approval_store.create_approval(
            automation.tenant_id,
            interpolate(config.title or DEFAULT_APPROVAL_TITLE, event.data),
            details=interpolate(config.description, event.data),
            created_by=automation.created_by,
        )
        return ActionResult.ok({"approval_id": approval.id})

    async def _auto_approve(
        self, config: AutoApproveConfig, event: TriggerEvent, automation: AutomationEntity
    ) -> ActionResult:
        approval_id = _resolve_id(config.approval_id, event, "approval_id")
        if not approval_id:
            raise ActionConfigurationException(
                AutomationActionType.AUTO_APPROVE.value, "missing approval id to approve"
            )
        updated = await self._approval_store.update_status(
            approval_id, automation.tenant_id, ApprovalStatus.APPROVED.value
        )
        if not updated:
            return ActionResult.fail(f"approval {approval_id} not found")
        return ActionResult.ok({"approval_id": approval_id})

    async def _lock_door(
        self, config: LockConfig, event: TriggerEvent, automation: AutomationEntity
    ) -> ActionResult:
        return await self._operate_lock(
            AutomationActionType.LOCK_DOOR, config, event, automation
        )

    async def _unlock_door(
        self, config: LockConfig, event: TriggerEvent, automation: AutomationEntity
    ) -> ActionResult:
        return await self._operate_lock(
            AutomationActionType.UNLOCK_DOOR, config, event, automation
        )

    async def _operate_lock(
        self,
        action_type: AutomationActionType,
        config: LockConfig,
        event: TriggerEvent,
        automation: AutomationEntity,
    ) -> ActionResult:
        lock_id = _resolve_id(config.lock_id, event, "lock_id")
        if not lock_id:
            raise ActionConfigurationException(action_type.value, "missing lock id")
        lock = await self._lock_store.get_by_id_and_tenant(lock_id, automation.tenant_id)
        if lock is None:
            return ActionResult.fail(f"lock {lock_id} not found")
        provider = self._lock_registry.get_provider(lock.provider)
        cmd = LockCommand(
            lock_id=lock.id,
            external_id=lock.external_id or "",
            access_token=lock.access_token or "",
        )
        if action_type is AutomationActionType.LOCK_DOOR:
            done = await provider.lock(cmd)
        else:
            done = await provider.unlock(cmd)
        if not done:
            raise LockProviderException(provider.name, lock.id, "command rejected")
        return ActionResult.ok({"lock_id": lock.id, "action": action_type.value})

    async def _add_calendar_event(
        self,
        config: CalendarEventConfig,
        event: TriggerEvent,
        automation: AutomationEntity,
    ) -> ActionResult:
        now = utc_now()
        start_at = ensure_utc(config.start_time) or now
        end_at = ensure_utc(config.end_time) or now + DEFAULT_EVENT_DURATION
        created = await self._calendar_store.create_event(
            automation.tenant_id,
            interpolate(config.title or DEFAULT_EVENT_TITLE, event.data),
            start_at,
            end_at,
        )
        return ActionResult.ok({"event_id": created.id})

    async def _trigger_webhook(
        self, config: WebhookConfig, event: TriggerEvent, automation: AutomationEntity
    ) -> ActionResult:
        if not config.url:
            raise ActionConfigurationException(
                AutomationActionType.TRIGGER_WEBHOOK.value, "missing webhook URL"
            )
        if self._webhook_transport is None:
            raise ActionConfigurationException(
                AutomationActionType.TRIGGER_WEBHOOK.value,
                "webhook transport not configured",
            )
        envelope = {
            "event": event.to_dict(),
            "automation": {"id": automation.id, "name": automation.name},
            "timestamp": utc_now().isoformat(),
        }
        status = await self._webhook_transport.post(
            config.url, dict(config.headers), envelope
        )
        if not 200 <= status < 300:
            return ActionResult.fail(
                f"webhook returned HTTP {status}", result={"status": status}
            )
        return ActionResult.ok({"status": status})

    async def _log_event(
        self, config: LogEventConfig, event: TriggerEvent, automation: AutomationEntity
    ) -> ActionResult:
        logger.info(
            "Automation log-event: automation_id=%s message=%s data=%s",
            automation.id,
            interpolate(_text(config.message), event.data),
            event.data,
        )
        return ActionResult.ok()

    async def _send_email(
        self, config: SendEmailConfig, event: TriggerEvent, automation: AutomationEntity
    ) -> ActionResult:
        logger.info(
            "Automation send-email (stub): automation_id=%s to=%s subject=%s",
            automation.id,
            config.to,
            interpolate(_text(config.subject), event.data),
        )
        return ActionResult.ok({"stub": True})

    async def _send_sms(
        self, config: SendSmsConfig, event: TriggerEvent, automation: AutomationEntity
    ) -> ActionResult:
        logger.info(
            "Automation send-sms (stub): automation_id=%s to=%s message=%s",
            automation.id,
            config.to,
            interpolate(_text(config.message), event.data),
        )
        return ActionResult.ok({"stub": True})

    async def _update_budget(
        self, config: UpdateBudgetConfig, event: TriggerEvent, automation: AutomationEntity
    ) -> ActionResult:
        logger.info(
            "Automation update-budget (stub): automation_id=%s budget_id=%s adjustment=%s",
            automation.id,
            _text(config.budget_id),
            _text(config.adjustment),
        )
        return ActionResult.ok({"stub": True})
