"""
Schedule Manager.

File-backed implementation of the schedule-registration port.
"""
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Literal, Optional, Union
from zoneinfo import ZoneInfo

from croniter import croniter

from core.application.dtos import (
    ExecutionHistoryEntry,
    Platform,
    PlatformConfig,
    ScheduleRegisterOptions,
    ScheduleRegistration,
    ScheduleStatus,
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
from core.infrastructure.audit.redaction import RedactionEngine
from core.infrastructure.schedule.platform_config import build_platform_config
from core.settings import ScheduleSettings
from reflection_sdk.utils.datetime import utc_now


logger = logging.getLogger(__name__)

SCHEDULE_FILE_NAME = "schedule.json"
SYSTEMD_RUNTIME_DIR = Path("/run/systemd/system")


def detect_platform(
    system: Optional[str] = None, systemd_dir: Path = SYSTEMD_RUNTIME_DIR
) -> Result[Platform, ScheduleError]:
    """
    Detect which OS scheduler is available.

    Args:
        system: Override for ``sys.platform``
        systemd_dir: Directory whose presence marks a running systemd

    Returns:
        Ok with the platform, or Err(PlatformNotSupported)
    """
    system = system or sys.platform
    if system == "darwin":
        return Ok(Platform.MACOS_LAUNCHD)
    if system.startswith("linux"):
        if systemd_dir.exists():
            return Ok(Platform.LINUX_SYSTEMD)
        return Ok(Platform.LINUX_CRON)
    return Err(PlatformNotSupported(platform=system))


class ScheduleManager(IScheduleManager):
    """
    Registers the reflection schedule in a local state file.

    The state file ``<config_dir>/schedule.json`` records the cron expression,
    the registration time and the last execution. Installing the actual OS
    scheduler entry is left to the user, guided by ``generate_platform_config``.
    """

    def __init__(
        self,
        settings: ScheduleSettings,
        config_dir: Optional[Union[str, Path]] = None,
        platform_detector: Callable[[], Result[Platform, ScheduleError]] = detect_platform,
        now: Callable[[], datetime] = utc_now,
        redaction_engine: Optional[RedactionEngine] = None,
    ):
        """
        Initialize schedule manager.

        Args:
            settings: Schedule settings (default cron, timezone, config dir)
            config_dir: Override for the state directory
            platform_detector: Platform detection strategy
            now: Clock used for registration time and next execution
            redaction_engine: Masking applied to persisted error text
        """
        self.settings = settings
        self.config_dir = Path(config_dir or settings.config_dir).expanduser()
        self.config_file_path = self.config_dir / SCHEDULE_FILE_NAME
        self._detect_platform = platform_detector
        self._now = now
        self._timezone = ZoneInfo(settings.timezone)
        self._redaction = redaction_engine or RedactionEngine()

    def validate_cron_expression(
        self, expression: str
    ) -> Result[Literal[True], ScheduleError]:
        if not expression or not expression.strip():
            return Err(
                InvalidCronExpression(expression=expression or "", message="cron expression is empty")
            )
        if not croniter.is_valid(expression):
            return Err(
                InvalidCronExpression(
                    expression=expression,
                    message=f"invalid cron expression: {expression}",
                )
            )
        return Ok(True)

    def register(
        self, options: ScheduleRegisterOptions
    ) -> Result[ScheduleRegistration, ScheduleError]:
        validation = self.validate_cron_expression(options.cron_expression)
        if isinstance(validation, Err):
            return validation

        platform = self._detect_platform()
        if isinstance(platform, Err):
            return platform

        existing = self._load_state()
        if existing and existing.get("registered") and not options.force:
            return Err(AlreadyRegistered(existing_expression=existing.get("cronExpression", "")))

        saved = self._save_state(
            {
                "cronExpression": options.cron_expression,
                "registered": True,
                "registeredAt": self._now().isoformat(),
            }
        )
        if isinstance(saved, Err):
            return saved

        logger.info(f"Schedule registered: {options.cron_expression} ({platform.value.value})")
        return Ok(
            ScheduleRegistration(
                cron_expression=options.cron_expression,
                next_execution=self.next_execution(options.cron_expression),
                platform=platform.value,
                config_path=str(self.config_file_path),
            )
        )

    def unregister(self) -> Result[None, ScheduleError]:
        existing = self._load_state()
        if not existing or not existing.get("registered"):
            return Err(NotRegistered())

        try:
            self.config_file_path.unlink(missing_ok=True)
        except PermissionError:
            return Err(PermissionDenied(path=str(self.config_file_path)))
        except OSError as e:
            return Err(ExecutionFailed(message=str(e)))

        logger.info("Schedule unregistered")
        return Ok(None)

    def get_status(self) -> Result[ScheduleStatus, ScheduleError]:
        platform = self._detect_platform()
        if isinstance(platform, Err):
            return platform

        existing = self._load_state()
        if not existing or not existing.get("registered"):
            return Ok(ScheduleStatus(registered=False, platform=platform.value))

        cron_expression = existing.get("cronExpression", "")
        next_execution = None
        if croniter.is_valid(cron_expression):
            next_execution = self.next_execution(cron_expression)

        return Ok(
            ScheduleStatus(
                registered=True,
                platform=platform.value,
                cron_expression=cron_expression,
                next_execution=next_execution,
                last_execution=self._parse_last_execution(existing.get("lastExecution")),
            )
        )

    def get_default_cron_expression(self) -> str:
        return self.settings.cron_expression

    def record_last_execution(
        self, entry: ExecutionHistoryEntry
    ) -> Result[None, ScheduleError]:
        existing = self._load_state()
        if not existing or not existing.get("registered"):
            return Err(NotRegistered())

        last_execution = entry.to_dict()
        if entry.error:
            last_execution["error"] = self._redaction.mask(entry.error)
        existing["lastExecution"] = last_execution
        return self._save_state(existing)

    def generate_platform_config(
        self, platform: Platform, cron_expression: str
    ) -> Result[PlatformConfig, ScheduleError]:
        """
        Generate the OS scheduler configuration for a cron expression.

        Args:
            platform: Target OS scheduler
            cron_expression: Five-field cron expression

        Returns:
            Ok with the generated config, or Err(InvalidCronExpression)
        """
        validation = self.validate_cron_expression(cron_expression)
        if isinstance(validation, Err):
            return validation
        return Ok(build_platform_config(platform, cron_expression, now=self._now()))

    def next_execution(self, cron_expression: str) -> datetime:
        """Next fire time of ``cron_expression`` in the configured timezone."""
        base = self._now().astimezone(self._timezone)
        return croniter(cron_expression, base).get_next(datetime)

    def _load_state(self) -> Optional[dict[str, Any]]:
        if not self.config_file_path.exists():
            return None
        try:
            state = json.loads(self.config_file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable schedule state {self.config_file_path}: {e}")
            return None
        return state if isinstance(state, dict) else None

    def _save_state(self, state: dict[str, Any]) -> Result[None, ScheduleError]:
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            self.config_file_path.write_text(json.dumps(state, indent=2), encoding="utf-8")
        except PermissionError:
            return Err(PermissionDenied(path=str(self.config_file_path)))
        except OSError as e:
            return Err(ExecutionFailed(message=str(e)))
        return Ok(None)

    @staticmethod
    def _parse_last_execution(data: Any) -> Optional[ExecutionHistoryEntry]:
        if not isinstance(data, dict):
            return None
        try:
            return ExecutionHistoryEntry.from_dict(data)
        except (KeyError, TypeError, ValueError):
            return None
