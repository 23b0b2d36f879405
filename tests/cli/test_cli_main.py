"""Tests for the reflection-weekly command line entry point."""

import io
import json
from datetime import datetime, timezone

import pytest

from cli.main import EXIT_FAILURE, EXIT_OK, main
from core.application.dtos import Platform
from core.domain.errors import DataCollectionFailed
from core.domain.result import Ok
from core.infrastructure.schedule import ScheduleManager
from tests.fakes import FakeReflectionUseCase


@pytest.fixture
def manager(app_settings):
    return ScheduleManager(
        app_settings.schedule,
        platform_detector=lambda: Ok(Platform.LINUX_CRON),
        now=lambda: datetime(2025, 1, 6, 12, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def cli(app_settings, manager):
    """Run the CLI and return (exit code, stdout, stderr)."""

    def _run(*argv, use_case=None):
        out, err = io.StringIO(), io.StringIO()
        code = main(
            list(argv),
            settings=app_settings,
            schedule_manager=manager,
            use_case=use_case,
            out=out,
            err=err,
        )
        return code, out.getvalue(), err.getvalue()

    return _run


def test_requires_a_command(cli):
    with pytest.raises(SystemExit):
        cli()


def test_schedule_register_and_status(cli):
    code, out, _ = cli("schedule", "register", "--cron", "0 9 * * 1")
    assert code == EXIT_OK
    assert out.startswith("schedule registered: 0 9 * * 1")

    code, out, _ = cli("schedule", "status")
    assert code == EXIT_OK
    assert "schedule registered: 0 9 * * 1" in out


def test_schedule_register_twice_fails_without_force(cli):
    cli("schedule", "register")

    code, _, err = cli("schedule", "register")
    assert code == EXIT_FAILURE
    assert "Use --force" in err

    code, _, _ = cli("schedule", "register", "--force")
    assert code == EXIT_OK


def test_schedule_register_invalid_cron(cli):
    code, _, err = cli("schedule", "register", "--cron", "bad")

    assert code == EXIT_FAILURE
    assert err.startswith("invalid cron expression: bad.")


def test_schedule_unregister_without_registration(cli):
    code, _, err = cli("schedule", "unregister")

    assert code == EXIT_FAILURE
    assert "no schedule is registered" in err


def test_schedule_config_prints_content(cli):
    code, out, _ = cli("schedule", "config", "--platform", "linux-cron", "--cron", "0 9 * * 1")

    assert code == EXIT_OK
    assert "0 9 * * 1 cd " in out
    assert "crontab -l" in out


def test_schedule_config_uses_detected_platform(cli):
    code, out, _ = cli("schedule", "config")

    assert code == EXIT_OK
    assert out.startswith("linux-cron configuration for: 0 19 * * 0")


def test_run_without_use_case(cli):
    code, _, err = cli("run")

    assert code == EXIT_FAILURE
    assert "REFLECTION_USE_CASE_FACTORY" in err


def test_run_success_records_last_execution(cli, manager):
    cli("schedule", "register")

    code, out, _ = cli("run", "--scheduled", use_case=FakeReflectionUseCase())

    assert code == EXIT_OK
    assert out.startswith("reflection generated: https://notion.so/reflection-1")
    last = manager.get_status().value.last_execution
    assert last is not None
    assert last.success is True


def test_run_failure_exit_code(cli):
    use_case = FakeReflectionUseCase(DataCollectionFailed(source="toggl", message="401"))

    code, _, err = cli("run", "--days", "3", use_case=use_case)

    assert code == EXIT_FAILURE
    assert "data collection failed (toggl): 401" in err
    [options] = use_case.calls
    assert (options.date_range.end - options.date_range.start).days == 2


def test_run_rejects_zero_days(cli):
    code, _, err = cli("run", "--days", "0", use_case=FakeReflectionUseCase())

    assert code == EXIT_FAILURE
    assert "at least 1" in err


def test_logs_prints_recent_entries(cli):
    cli("run", use_case=FakeReflectionUseCase())

    code, out, _ = cli("logs", "--limit", "5")

    assert code == EXIT_OK
    lines = [json.loads(line) for line in out.splitlines()]
    assert [line["event"] for line in lines] == ["start", "success"]
    assert lines[0]["triggerType"] == "manual"


def test_run_failure_output_is_redacted(cli):
    use_case = FakeReflectionUseCase(RuntimeError("bad token ghp_abcdefghij1234567890"))

    code, _, err = cli("run", use_case=use_case)

    assert code == EXIT_FAILURE
    assert "ghp_abcdefghij" not in err
    assert "bad token ghp_***" in err
