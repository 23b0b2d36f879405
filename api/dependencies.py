"""
FastAPI Dependencies.

Provides dependency injection for the orchestrator and audit log.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import HTTPException, status

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from core.infrastructure.audit import AuditLogger, RedactionEngine
from core.settings import AppSettings, get_app_settings
from orchestration import ExecutionOrchestrator, create_default_orchestrator, load_use_case

logger = logging.getLogger(__name__)


# =============================================================================
# SINGLETON INSTANCES
# =============================================================================

_audit_logger: Optional[AuditLogger] = None
_orchestrator: Optional[ExecutionOrchestrator] = None


# =============================================================================
# DEPENDENCIES
# =============================================================================

def get_settings() -> AppSettings:
    return get_app_settings()


def get_audit_logger() -> AuditLogger:
    global _audit_logger
    if _audit_logger is None:
        settings = get_settings()
        _audit_logger = AuditLogger(
            log_file_path=settings.logging.log_file_path,
            log_level=settings.logging.log_level,
            redaction_engine=RedactionEngine(
                hex_min_length=settings.logging.redaction_hex_min_length
            ),
        )
        logger.info(f"Created AuditLogger for {_audit_logger.log_file_path}")
    return _audit_logger


def get_orchestrator() -> ExecutionOrchestrator:
    """
    Get the process-wide orchestrator.

    The history lives inside the orchestrator, so one instance serves
    every request.

    Raises:
        HTTPException: 503 when no reflection use case is configured
    """
    global _orchestrator

    if _orchestrator is None:
        settings = get_settings()
        use_case = load_use_case(settings)
        if use_case is None:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="No reflection use case configured (set REFLECTION_USE_CASE_FACTORY)",
            )
        _orchestrator = create_default_orchestrator(use_case, settings)
        logger.info("Created ExecutionOrchestrator instance")

    return _orchestrator


# =============================================================================
# RESET (for testing)
# =============================================================================

def reset_dependencies():
    global _audit_logger, _orchestrator

    if _audit_logger is not None:
        _audit_logger.close()
    _audit_logger = None
    _orchestrator = None

    logger.info("Dependencies reset")
