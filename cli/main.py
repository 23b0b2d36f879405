"""
reflection-weekly command line entry point.

Subcommands:
    run                 run one reflection attempt now
    schedule register   register the cron schedule
    schedule unregister remove the registered schedule
    schedule status     show the registered schedule
    schedule config     print OS scheduler configuration
    logs                show recent audit log entries
"""
import argparse
import asyncio
import json
import sys
from typing import Optional, TextIO

from dotenv import load_dotenv

from cli.schedule_command import ScheduleCommandHandler
from core.application.dtos import Platform, ScheduleExecutionOptions
from core.application.interfaces import IReflectionUseCase, IScheduleManager
from core.domain.enums.execution_status import TriggerType
from core.domain.errors import NotRegistered
from core.domain.result import Err
from core.domain.value_objects import DateRange
from core.infrastructure.audit import AuditLogger, RedactionEngine
from core.infrastructure.schedule import ScheduleManager
from core.settings import AppSettings, get_app_settings
from orchestration import create_default_orchestrator, load_use_case
from reflection_sdk.logging import get_logger


logger = get_logger("cli")

EXIT_OK = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reflection-weekly",
        description="Generate weekly reflections on a schedule.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    run = commands.add_parser("run", help="run one reflection attempt now")
    run.add_argument("--days", type=int, help="number of days covered (default from settings)")
    run.add_argument("--notification-url", help="webhook notified when the attempt fails")
    run.add_argument(
        "--scheduled",
        action="store_true",
        help="mark the attempt as started by the OS scheduler",
    )

    schedule = commands.add_parser("schedule", help="manage the reflection schedule")
    schedule_commands = schedule.add_subparsers(dest="schedule_command", required=True)

    register = schedule_commands.add_parser("register", help="register the schedule")
    register.add_argument("--cron", help="cron expression (default from settings)")
    register.add_argument("--force", action="store_true", help="overwrite an existing schedule")

    schedule_commands.add_parser("unregister", help="remove the registered schedule")
    schedule_commands.add_parser("status", help="show the registered schedule")

    config = schedule_commands.add_parser("config", help="print OS scheduler configuration")
    config.add_argument(
        "--platform",
        choices=[platform.value for platform in Platform],
        help="target scheduler (default: detected platform)",
    )
    config.add_argument("--cron", help="cron expression (default from settings)")

    logs = commands.add_parser("logs", help="show recent audit log entries")
    logs.add_argument("--limit", type=int, default=20, help="number of entries (default 20)")

    return parser


def main(
    argv: Optional[list[str]] = None,
    settings: Optional[AppSettings] = None,
    schedule_manager: Optional[IScheduleManager] = None,
    use_case: Optional[IReflectionUseCase] = None,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments (defaults to ``sys.argv[1:]``)
        settings: Application settings (defaults to env / .env)
        schedule_manager: Schedule-registration port override
        use_case: Reflection use case override
        out: Stream for normal output
        err: Stream for error output

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    out = out or sys.stdout
    err = err or sys.stderr

    if settings is None:
        load_dotenv()
        settings = get_app_settings()
    schedule_manager = schedule_manager or ScheduleManager(
        settings.schedule,
        redaction_engine=RedactionEngine(
            hex_min_length=settings.logging.redaction_hex_min_length
        ),
    )

    if args.command == "run":
        return _run(args, settings, schedule_manager, use_case, out, err)
    if args.command == "schedule":
        return _schedule(args, schedule_manager, out, err)
    return _logs(args, settings, out)


def _run(
    args: argparse.Namespace,
    settings: AppSettings,
    schedule_manager: IScheduleManager,
    use_case: Optional[IReflectionUseCase],
    out: TextIO,
    err: TextIO,
) -> int:
    use_case = use_case or load_use_case(settings)
    if use_case is None:
        print(
            "no reflection use case configured; set REFLECTION_USE_CASE_FACTORY",
            file=err,
        )
        return EXIT_FAILURE

    try:
        days = args.days if args.days is not None else settings.reflection.default_period_days
        date_range = DateRange.last_days(days)
    except ValueError as e:
        print(str(e), file=err)
        return EXIT_FAILURE

    orchestrator = create_default_orchestrator(use_case, settings)
    options = ScheduleExecutionOptions(
        date_range=date_range,
        notification_url=args.notification_url or settings.schedule.notification_url,
        trigger_type=TriggerType.SCHEDULED if args.scheduled else TriggerType.MANUAL,
    )
    try:
        entry = asyncio.run(orchestrator.run(options))
    finally:
        orchestrator.close()

    recorded = schedule_manager.record_last_execution(entry)
    if isinstance(recorded, Err) and not isinstance(recorded.error, NotRegistered):
        logger.warning(f"Could not record last execution: {recorded.error}")

    if entry.success:
        print(f"reflection generated: {entry.page_url or '-'} ({entry.duration_ms} ms)", file=out)
        return EXIT_OK
    redaction = RedactionEngine(hex_min_length=settings.logging.redaction_hex_min_length)
    print(f"reflection failed: {redaction.mask(entry.error or '')}", file=err)
    return EXIT_FAILURE


def _schedule(
    args: argparse.Namespace,
    schedule_manager: IScheduleManager,
    out: TextIO,
    err: TextIO,
) -> int:
    handler = ScheduleCommandHandler(schedule_manager)

    if args.schedule_command == "register":
        result = handler.handle_register(cron=args.cron, force=args.force)
    elif args.schedule_command == "unregister":
        result = handler.handle_unregister()
    elif args.schedule_command == "status":
        result = handler.handle_status()
    else:
        platform = Platform(args.platform) if args.platform else _current_platform(schedule_manager)
        if platform is None:
            print("could not detect the platform; pass --platform", file=err)
            return EXIT_FAILURE
        result = handler.handle_platform_config(platform, cron=args.cron)

    if isinstance(result, Err):
        print(result.error.message, file=err)
        return EXIT_FAILURE

    print(result.value.message, file=out)
    if args.schedule_command == "config":
        print("", file=out)
        print(result.value.config_content, file=out)
        print("", file=out)
        for line in result.value.install_instructions:
            print(line, file=out)
    return EXIT_OK


def _current_platform(schedule_manager: IScheduleManager) -> Optional[Platform]:
    status = schedule_manager.get_status()
    if isinstance(status, Err):
        return None
    return status.value.platform


def _logs(args: argparse.Namespace, settings: AppSettings, out: TextIO) -> int:
    audit_logger = AuditLogger(
        log_file_path=settings.logging.log_file_path,
        log_level=settings.logging.log_level,
        redaction_engine=RedactionEngine(
            hex_min_length=settings.logging.redaction_hex_min_length
        ),
    )
    try:
        for entry in audit_logger.read_recent(args.limit):
            print(json.dumps(entry.details, ensure_ascii=False, default=str), file=out)
    finally:
        audit_logger.close()
    return EXIT_OK


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
