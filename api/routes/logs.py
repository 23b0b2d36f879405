"""
Audit log endpoints.
"""
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_audit_logger
from core.infrastructure.audit import AuditLogger


router = APIRouter(prefix="/logs", tags=["logs"])


@router.get("/recent")
async def get_recent_logs(
    limit: int = Query(default=20, ge=0, le=1000),
    audit_logger: AuditLogger = Depends(get_audit_logger),
) -> List[Dict[str, Any]]:
    """Return the last ``limit`` readable audit entries, oldest first."""
    return [entry.to_dict() for entry in audit_logger.read_recent(limit)]
