"""
Shared FastAPI dependencies for the Snapshot Print Flow system.
Centralizes common dependencies to eliminate code duplication.
"""

import logging

from fastapi import HTTPException, Request

from core.print_dispatcher import PrintDispatcher
from core.snapshot_store import SnapshotStore
from services.snapshot_service import SnapshotService

logger = logging.getLogger(__name__)


def get_snapshot_store(request: Request) -> SnapshotStore:
    """Get SnapshotStore instance from app state."""
    try:
        return request.app.state.snapshot_store
    except AttributeError as e:
        logger.error(f"Snapshot store not initialized in app state: {e}")
        raise HTTPException(
            status_code=500, detail="Internal server error: Snapshot store not initialized"
        )


def get_print_dispatcher(request: Request) -> PrintDispatcher:
    """Get PrintDispatcher instance from app state."""
    try:
        return request.app.state.print_dispatcher
    except AttributeError as e:
        logger.error(f"Print dispatcher not initialized in app state: {e}")
        raise HTTPException(
            status_code=500, detail="Internal server error: Print dispatcher not initialized"
        )


def get_snapshot_service(request: Request) -> SnapshotService:
    """Create SnapshotService from the app-level store and dispatcher."""
    return SnapshotService(
        store=get_snapshot_store(request),
        printer=get_print_dispatcher(request),
    )


def get_config(request: Request) -> dict:
    """Get settings dictionary from app state."""
    return getattr(request.app.state, "config", {})
