"""
Execution endpoints.

Trigger reflection attempts and query the in-memory execution history.
"""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from api.dependencies import get_orchestrator, get_settings
from core.application.dtos import ScheduleExecutionOptions
from core.domain.enums.execution_status import TriggerType
from core.domain.value_objects import DateRange
from core.settings import AppSettings
from orchestration import ExecutionOrchestrator


router = APIRouter(prefix="/executions", tags=["executions"])


class RunExecutionRequest(BaseModel):
    """Request body for a manual attempt."""

    days: Optional[int] = Field(default=None, ge=1, description="Days covered, ending today")
    notification_url: Optional[str] = Field(
        default=None, description="Webhook notified when the attempt fails"
    )


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    summary="List execution history",
)
async def list_executions(
    orchestrator: ExecutionOrchestrator = Depends(get_orchestrator),
) -> List[Dict[str, Any]]:
    """Return recorded attempts, oldest first."""
    return [entry.to_dict() for entry in orchestrator.get_execution_history()]


@router.get(
    "/last",
    status_code=status.HTTP_200_OK,
    summary="Get the most recent execution",
)
async def get_last_execution(
    orchestrator: ExecutionOrchestrator = Depends(get_orchestrator),
) -> Dict[str, Any]:
    entry = orchestrator.get_last_execution_record()
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No execution has been recorded yet",
        )
    return entry.to_dict()


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    summary="Run a reflection attempt",
    description="""
    Run one reflection attempt now.

    Failures of the attempt are reported in the returned entry, not as an
    HTTP error.
    """
)
async def run_execution(
    request: RunExecutionRequest,
    orchestrator: ExecutionOrchestrator = Depends(get_orchestrator),
    settings: AppSettings = Depends(get_settings),
) -> Dict[str, Any]:
    """
    Trigger a manual attempt.

    Args:
        request: Period and notification URL
        orchestrator: Orchestrator instance
        settings: Application settings

    Returns:
        History entry of the attempt
    """
    days = request.days or settings.reflection.default_period_days
    entry = await orchestrator.run(
        ScheduleExecutionOptions(
            date_range=DateRange.last_days(days),
            notification_url=request.notification_url or settings.schedule.notification_url,
            trigger_type=TriggerType.MANUAL,
        )
    )
    return entry.to_dict()
