"""FastAPI application entry point for the anti-fraud API."""

import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from antifraud.api.middleware.error_handler import global_exception_handler
from antifraud.api.middleware.logging import StructuredLoggingMiddleware
from antifraud.api.routes import fraud as fraud_routes
from antifraud.api.routes.health import router as health_router
from antifraud.bootstrap import seed_sample_data
from antifraud.config import settings
from antifraud.domains.fraud.errors import FraudDomainError
from antifraud.shared.logging import setup_logging

logger = structlog.get_logger()

# Track app start time for uptime calculation
APP_START_TIME: float = 0.0


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup and shutdown logic."""
    global APP_START_TIME
    APP_START_TIME = time.time()
    setup_logging(settings.log_level)

    logger.info(
        "antifraud_starting",
        app_name=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
    )

    if settings.seed_sample_data:
        seed_sample_data(fraud_routes.profile_store, fraud_routes.blacklist_store)

    yield

    logger.info("antifraud_shutting_down")


app = FastAPI(
    title="Anti-Fraud API",
    description="Real-time transaction fraud scoring and decisioning",
    version=settings.app_version,
    lifespan=lifespan,
)

# CORS for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.debug else [],
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

# Structured logging middleware
app.add_middleware(StructuredLoggingMiddleware)

# Domain errors are answered directly; everything else falls through to the 500 path
app.add_exception_handler(FraudDomainError, global_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

# Register routers
app.include_router(health_router)
app.include_router(fraud_routes.router)


@app.get("/")
async def index() -> dict:
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "status": "running",
        "endpoints": [
            "GET  /api/v1/health",
            "POST /api/v1/transaction/analyze",
            "GET  /api/v1/analytics/{user_id}",
            "GET  /api/v1/rules",
        ],
    }


def get_uptime() -> int:
    """Get application uptime in seconds."""
    if APP_START_TIME == 0.0:
        return 0
    return int(time.time() - APP_START_TIME)
