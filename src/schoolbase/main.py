"""
SchoolBase API - Main Application Entry Point

This module initializes and configures the FastAPI application including:
- Logging, database and Supabase connections
- Uniform error envelope handlers
- CORS middleware
- API routing
- Health check endpoints
"""

import asyncio
import logging
import os
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from schoolbase.api import api_router
from schoolbase.core.config import settings
from schoolbase.core.database import close_db, init_db
from schoolbase.core.errors import register_exception_handlers
from schoolbase.core.supabase import close_supabase, init_supabase

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _handle_uncaught_exception(exc_type, exc_value, exc_traceback) -> None:
    """Log an uncaught exception and terminate the process."""
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return

    logger.critical(
        "Uncaught exception, shutting down",
        exc_info=(exc_type, exc_value, exc_traceback),
    )
    os._exit(1)


def _handle_loop_exception(loop: asyncio.AbstractEventLoop, context: dict) -> None:
    """Log an unhandled event-loop fault and terminate the process."""
    exc = context.get("exception")
    if exc is None:
        # Message-only notices (slow callbacks, unclosed transports)
        loop.default_exception_handler(context)
        return

    logger.critical(
        f"Unhandled event loop error: {context.get('message')}",
        exc_info=exc,
    )
    os._exit(1)


def install_fault_handlers() -> None:
    sys.excepthook = _handle_uncaught_exception
    asyncio.get_running_loop().set_exception_handler(_handle_loop_exception)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """
    Application lifespan manager.

    Handles startup and shutdown events including:
    - Logging and process-level fault handlers
    - Database connection
    - Supabase client (identity + object storage)
    """
    # Startup
    configure_logging()
    install_fault_handlers()
    print(f"Starting SchoolBase API in {settings.python_env} mode...")

    # Initialize Database
    try:
        await init_db()
        print("[OK] Database connected")
    except Exception as e:
        print(f"[FAIL] Database connection failed: {e}")
        if settings.is_production:
            raise

    # Initialize Supabase
    try:
        await init_supabase()
        print("[OK] Supabase client initialized")
    except Exception as e:
        print(f"[FAIL] Supabase initialization failed: {e}")
        if settings.is_production:
            raise

    yield  # Application runs here

    # Shutdown
    print("Shutting down SchoolBase API...")

    await close_supabase()
    await close_db()
    print("[OK] Cleanup complete")


app = FastAPI(
    title="SchoolBase API",
    description="Multi-tenant school management API",
    version="0.1.0",
    docs_url="/docs" if settings.is_development else None,
    redoc_url="/redoc" if settings.is_development else None,
    lifespan=lifespan,
)

register_exception_handlers(app)

app.include_router(api_router, prefix="/api/v1")

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/", tags=["Root"])
async def root() -> dict[str, str]:
    """Root endpoint - API welcome message."""
    return {
        "message": "Welcome to SchoolBase API",
        "status": "running",
        "environment": settings.python_env,
    }


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Health check endpoint for container orchestration."""
    return {"status": "healthy"}


@app.get("/ready", tags=["Health"])
async def readiness_check() -> dict[str, str]:
    """Readiness check endpoint."""
    return {"status": "ready"}
