"""
Health check endpoint.
"""
import platform
from pathlib import Path

from fastapi import APIRouter, Depends

from api.dependencies import get_settings
from core.settings import AppSettings
from reflection_sdk.utils.datetime import utc_now


router = APIRouter()


@router.get("/health")
async def health_check(settings: AppSettings = Depends(get_settings)):
    """
    Report liveness plus where the audit log and schedule state live.

    The reflection use case is not loaded here, so a missing factory does
    not make the service look unhealthy.
    """
    log_file = Path(settings.logging.log_file_path).expanduser()
    return {
        "status": "healthy",
        "service": "reflection-weekly",
        "timestamp": utc_now().isoformat(),
        "python_version": platform.python_version(),
        "audit_log": {"path": str(log_file), "exists": log_file.exists()},
        "schedule_state_dir": str(Path(settings.schedule.config_dir).expanduser()),
        "use_case_configured": settings.reflection.use_case_factory is not None,
    }
