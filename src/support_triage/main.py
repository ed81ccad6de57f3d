"""
Support Triage - Main Application
==================================

Keyword triage service for incoming support messages.

Clean Architecture Layers:
- Interfaces: FastAPI controllers
- Application: Services and DTOs
- Domain: Lexicon, classifier, formatter
- Infrastructure: System clock
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

# Configuration and Core
from support_triage.config import settings
from support_triage.core import ApplicationException

# Triage module
from support_triage.triage.application import TriageService
from support_triage.triage.infrastructure import SystemClock
from support_triage.triage.interfaces import triage_router

# Shared
from support_triage.shared.api.middleware import (
    CorrelationIDMiddleware,
    LoggingMiddleware,
    application_exception_handler,
    global_exception_handler
)
from support_triage.shared.infrastructure.logging import setup_logging, get_logger

logger = get_logger(__name__)


def create_triage_service() -> TriageService:
    """Build the triage service with the wall clock."""
    return TriageService(SystemClock())


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan manager.

    STARTUP:
    1. Setup structured logging
    2. Build the triage service

    The service holds no resources, so shutdown only logs.
    """
    setup_logging(settings.log_level, settings.environment)
    logger.info("Starting Support Triage", extra={
        "version": settings.app_version,
        "environment": settings.environment
    })

    if getattr(app.state, "triage_service", None) is None:
        app.state.triage_service = create_triage_service()
    app.state.settings = settings

    logger.info("Support Triage started successfully")

    yield  # Application runs here

    logger.info("Support Triage shutdown complete")


# Create FastAPI application
app = FastAPI(
    title="Support Triage API",
    description="""
    ## Keyword Triage for Support Messages

    Classifies free-text support messages into high, medium or low priority
    by keyword matching and renders the reply posted back to the sender.

    **Endpoints:**
    - `POST /triage/classify` - Classify a message
    - `POST /triage/format` - Format a classification into a reply
    - `POST /triage/analyze` - Classify and format in one call
    - `GET /triage/keywords` - List the keyword lexicon
    """,
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# === CORS Middleware ===
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# CorrelationIDMiddleware must wrap LoggingMiddleware
app.add_middleware(LoggingMiddleware)
app.add_middleware(CorrelationIDMiddleware)
app.add_exception_handler(ApplicationException, application_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

# === Include Module Routers ===
app.include_router(triage_router)


# === Health Check Endpoint ===

@app.get("/health", tags=["Health"])
async def health_check(request: Request):
    """Health check endpoint for load balancers and orchestrators."""
    service_ready = getattr(request.app.state, "triage_service", None) is not None
    return {
        "status": "healthy" if service_ready else "starting",
        "version": settings.app_version,
        "environment": settings.environment,
        "checks": {
            "triage_service": "available" if service_ready else "not_initialized"
        }
    }


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
        "health": "/health",
        "modules": {
            "triage": {
                "prefix": "/triage",
                "endpoints": [
                    "POST /triage/classify - Classify message",
                    "POST /triage/format - Format classification",
                    "POST /triage/analyze - Classify and format",
                    "GET /triage/keywords - List keywords"
                ]
            }
        }
    }


# === Development Entry Point ===

def run() -> None:
    import uvicorn

    uvicorn.run(
        "support_triage.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    run()
