"""
Integration tests for the execution and log endpoints.
"""
import pytest
from fastapi.testclient import TestClient

import api.dependencies as dependencies
from api.main import app
from core.domain.errors import PageCreationFailed
from core.infrastructure.adapters.notifications.mock_notification_sender import (
    MockNotificationSender,
)
from core.infrastructure.audit import AuditLogger
from orchestration import ExecutionOrchestrator
from tests.fakes import FakeReflectionUseCase, successful_result


@pytest.fixture
def audit_logger(app_settings):
    audit = AuditLogger(app_settings.logging.log_file_path)
    yield audit
    audit.close()


@pytest.fixture
def use_case():
    return FakeReflectionUseCase(
        successful_result(page_url="https://notion.so/week-2"),
        PageCreationFailed(message="notion returned 502"),
    )


@pytest.fixture
def notification_sender():
    return MockNotificationSender()


@pytest.fixture
def test_client(app_settings, audit_logger, use_case, notification_sender):
    """FastAPI test client wired to in-process fakes."""
    orchestrator = ExecutionOrchestrator(
        audit_logger=audit_logger,
        use_case=use_case,
        notification_sender=notification_sender,
        max_history_size=app_settings.schedule.history_size,
    )
    app.dependency_overrides[dependencies.get_orchestrator] = lambda: orchestrator
    app.dependency_overrides[dependencies.get_audit_logger] = lambda: audit_logger
    app.dependency_overrides[dependencies.get_settings] = lambda: app_settings

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()


def test_health(test_client):
    response = test_client.get("/health")

    assert response.status_code == 200
    assert response.json()["service"] == "reflection-weekly"


def test_last_execution_before_any_run(test_client):
    response = test_client.get("/executions/last")

    assert response.status_code == 404


def test_history_starts_empty(test_client):
    response = test_client.get("/executions")

    assert response.status_code == 200
    assert response.json() == []


def test_run_and_query_history(test_client, use_case):
    first = test_client.post("/executions", json={"days": 7})
    second = test_client.post(
        "/executions", json={"notification_url": "https://hooks.example.com/x"}
    )

    assert first.status_code == 200
    assert first.json()["success"] is True
    assert first.json()["page_url"] == "https://notion.so/week-2"
    assert second.status_code == 200
    assert second.json()["success"] is False
    assert second.json()["error"] == "page creation failed: notion returned 502"

    history = test_client.get("/executions").json()
    assert [entry["execution_id"] for entry in history] == [
        first.json()["execution_id"],
        second.json()["execution_id"],
    ]
    assert test_client.get("/executions/last").json() == second.json()

    [options, _] = use_case.calls
    assert (options.date_range.end - options.date_range.start).days == 6


def test_failed_run_notifies(test_client, notification_sender):
    test_client.post("/executions", json={})
    test_client.post("/executions", json={"notification_url": "https://hooks.example.com/x"})

    [(url, notification)] = notification_sender.get_notifications()
    assert url == "https://hooks.example.com/x"
    assert notification.error.type == "PAGE_CREATION_FAILED"


def test_run_rejects_invalid_days(test_client):
    response = test_client.post("/executions", json={"days": 0})

    assert response.status_code == 422


def test_recent_logs(test_client):
    test_client.post("/executions", json={})

    response = test_client.get("/logs/recent", params={"limit": 10})

    assert response.status_code == 200
    entries = response.json()
    assert [entry["event"] for entry in entries] == ["start", "success"]
    assert entries[0]["details"]["triggerType"] == "manual"


def test_recent_logs_limit(test_client):
    test_client.post("/executions", json={})
    test_client.post("/executions", json={})

    entries = test_client.get("/logs/recent", params={"limit": 1}).json()

    assert len(entries) == 1
    assert entries[0]["level"] == "error"


def test_executions_unavailable_without_use_case(app_settings, monkeypatch):
    monkeypatch.setattr(dependencies, "get_settings", lambda: app_settings)
    dependencies.reset_dependencies()
    client = TestClient(app)

    try:
        response = client.get("/executions")
    finally:
        dependencies.reset_dependencies()

    assert response.status_code == 503
    assert "REFLECTION_USE_CASE_FACTORY" in response.json()["detail"]
