"""
Schedule command handler.

Translates schedule CLI subcommands into schedule-registration port calls
and turns the results into user-facing messages.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from core.application.dtos import (
    ExecutionHistoryEntry,
    Platform,
    ScheduleRegisterOptions,
)
from core.application.interfaces import IScheduleManager
from core.domain.errors import (
    AlreadyRegistered,
    ExecutionFailed,
    InvalidCronExpression,
    NotRegistered,
    PermissionDenied,
    PlatformNotSupported,
    ScheduleError,
)
from core.domain.result import Err, Ok, Result


@dataclass(frozen=True)
class CommandError:
    message: str


@dataclass(frozen=True)
class RegisterCommandResult:
    message: str
    cron_expression: str
    next_execution: datetime
    config_path: str


@dataclass(frozen=True)
class UnregisterCommandResult:
    message: str


@dataclass(frozen=True)
class StatusCommandResult:
    registered: bool
    message: str
    cron_expression: Optional[str] = None
    next_execution: Optional[datetime] = None
    last_execution: Optional[ExecutionHistoryEntry] = None


@dataclass(frozen=True)
class PlatformConfigCommandResult:
    message: str
    config_content: str
    config_path: str
    install_instructions: tuple[str, ...] = field(default_factory=tuple)


def format_schedule_error(error: ScheduleError) -> str:
    """Map every schedule error kind to its fixed message template."""
    if isinstance(error, InvalidCronExpression):
        return (
            f"invalid cron expression: {error.expression}. "
            'Specify a valid cron expression (e.g. "0 19 * * 0")'
        )
    if isinstance(error, AlreadyRegistered):
        return (
            f"a schedule is already registered: {error.existing_expression}. "
            "Use --force to overwrite it"
        )
    if isinstance(error, NotRegistered):
        return 'no schedule is registered. Register one first with "schedule register"'
    if isinstance(error, PlatformNotSupported):
        return (
            f'platform "{error.platform}" is not supported. '
            "Use macOS (launchd) or Linux (systemd/cron)"
        )
    if isinstance(error, PermissionDenied):
        return f"permission denied: {error.path}. Re-run with sufficient permissions"
    if isinstance(error, ExecutionFailed):
        return f"schedule operation failed: {error.message}"
    raise TypeError(f"Unknown schedule error: {error!r}")


def format_datetime(value: datetime) -> str:
    return value.strftime("%Y-%m-%d %H:%M %Z").strip()


class ScheduleCommandHandler:
    """Handler for the ``schedule`` subcommands."""

    def __init__(self, schedule_manager: IScheduleManager):
        self.schedule_manager = schedule_manager

    def handle_register(
        self, cron: Optional[str] = None, force: bool = False
    ) -> Result[RegisterCommandResult, CommandError]:
        """Register the schedule, falling back to the configured default cron."""
        cron_expression = cron or self.schedule_manager.get_default_cron_expression()

        result = self.schedule_manager.register(
            ScheduleRegisterOptions(cron_expression=cron_expression, force=force)
        )
        if isinstance(result, Err):
            return Err(CommandError(message=format_schedule_error(result.error)))

        registration = result.value
        return Ok(
            RegisterCommandResult(
                message=(
                    f"schedule registered: {registration.cron_expression} "
                    f"(next run: {format_datetime(registration.next_execution)})"
                ),
                cron_expression=registration.cron_expression,
                next_execution=registration.next_execution,
                config_path=registration.config_path,
            )
        )

    def handle_unregister(self) -> Result[UnregisterCommandResult, CommandError]:
        result = self.schedule_manager.unregister()
        if isinstance(result, Err):
            return Err(CommandError(message=format_schedule_error(result.error)))
        return Ok(UnregisterCommandResult(message="schedule unregistered"))

    def handle_status(self) -> Result[StatusCommandResult, CommandError]:
        result = self.schedule_manager.get_status()
        if isinstance(result, Err):
            return Err(
                CommandError(
                    message=f"could not read schedule status: {format_schedule_error(result.error)}"
                )
            )

        status = result.value
        if not status.registered:
            return Ok(StatusCommandResult(registered=False, message="no schedule is registered"))

        message = f"schedule registered: {status.cron_expression}"
        if status.next_execution:
            message += f" (next run: {format_datetime(status.next_execution)})"
        if status.last_execution:
            last = status.last_execution
            outcome = "succeeded" if last.success else f"failed: {last.error}"
            message += f"\nlast run {format_datetime(last.timestamp)} {outcome}"

        return Ok(
            StatusCommandResult(
                registered=True,
                message=message,
                cron_expression=status.cron_expression,
                next_execution=status.next_execution,
                last_execution=status.last_execution,
            )
        )

    def handle_platform_config(
        self, platform: Platform, cron: Optional[str] = None
    ) -> Result[PlatformConfigCommandResult, CommandError]:
        cron_expression = cron or self.schedule_manager.get_default_cron_expression()
        result = self.schedule_manager.generate_platform_config(platform, cron_expression)
        if isinstance(result, Err):
            return Err(CommandError(message=format_schedule_error(result.error)))

        config = result.value
        return Ok(
            PlatformConfigCommandResult(
                message=f"{config.platform.value} configuration for: {cron_expression}",
                config_content=config.config_content,
                config_path=config.config_path,
                install_instructions=config.install_instructions,
            )
        )
