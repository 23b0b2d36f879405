"""
Reflection Weekly - FastAPI application.

Manual reflection attempts, execution history and audit log inspection
over HTTP.
"""
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api.dependencies import reset_dependencies
from api.routes import executions, health, logs
from reflection_sdk.logging import get_logger


API_VERSION = "1.0.0"

logger = get_logger("api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Reflection Weekly API {API_VERSION} started (docs at /docs)")
    yield
    reset_dependencies()
    logger.info("Reflection Weekly API stopped")


def create_app() -> FastAPI:
    """Build the application with all routers attached."""
    application = FastAPI(
        title="Reflection Weekly API",
        description="Trigger weekly reflection attempts and inspect their outcomes.",
        version=API_VERSION,
        lifespan=lifespan,
    )

    @application.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log every request with its status and timing."""
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"({elapsed_ms:.1f} ms)"
        )
        return response

    @application.exception_handler(Exception)
    async def unhandled_exception(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error", "path": request.url.path},
        )

    application.include_router(health.router, tags=["health"])
    application.include_router(executions.router)
    application.include_router(logs.router)
    return application


app = create_app()
