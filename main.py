"""
Snapshot Print Flow - Main FastAPI Application
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Add parent directory to path
sys.path.append(str(Path(__file__).parent))

from api.exceptions import register_exception_handlers  # noqa: E402
from api.routers import snapshot, system  # noqa: E402
from config import get_settings  # noqa: E402
from core.constants import SystemConstants  # noqa: E402
from core.print_dispatcher import PrintDispatcher  # noqa: E402
from core.snapshot_store import SnapshotStore  # noqa: E402

# Get configuration
settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.system.log_level),
    format=SystemConstants.LOG_FORMAT,
)
logger = logging.getLogger(__name__)

# Suppress watchfiles debug messages
logging.getLogger("watchfiles").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle"""
    logger.info("Starting Snapshot Print Flow server...")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Debug mode: {settings.system.debug}")

    app.state.snapshot_store = SnapshotStore(
        output_suffix=settings.snapshot.output_suffix,
        prefix=settings.snapshot.prefix,
    )
    app.state.print_dispatcher = PrintDispatcher()
    app.state.config = settings.to_dict()

    if not app.state.print_dispatcher.is_supported:
        logger.warning(
            f"Printing is not supported on {app.state.print_dispatcher.platform}; "
            "print requests will fail"
        )

    logger.info("Snapshot store and print dispatcher initialized")

    yield

    logger.info("Server shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="Snapshot Print Flow",
    description="Crops black borders from video snapshots, lifts their levels and prints them",
    version="1.0.0",
    lifespan=lifespan,
)

if settings.api.cors_enabled:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Register exception handlers
register_exception_handlers(app)

# Include routers
app.include_router(snapshot.router, prefix="/api/snapshot", tags=["Snapshot"])
app.include_router(system.router, prefix="/api/system", tags=["System"])


# Root endpoint
@app.get("/")
async def root():
    return {
        "name": "Snapshot Print Flow",
        "status": "running",
        "version": "1.0.0",
        "endpoints": {
            "snapshot": "/api/snapshot",
            "system": "/api/system",
            "docs": "/docs",
        },
    }


# Health check endpoint
@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "services": {
            "snapshot_store": getattr(app.state, "snapshot_store", None) is not None,
            "print_dispatcher": getattr(app.state, "print_dispatcher", None) is not None,
        },
    }


# Error handler
@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    logger.error(f"Global exception: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"detail": f"Internal server error: {str(exc)}"})


def run():
    """Run the API server with uvicorn."""
    uvicorn.run(
        "main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.system.debug,
        log_level="info",
    )


if __name__ == "__main__":
    try:
        run()
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt, shutting down...")
