"""
Exception handling for the Snapshot Print Flow API.

Maps domain errors to HTTP responses and provides the safe_endpoint
decorator used by routers.
"""

import functools
import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from core.exceptions import (
    NoContentFoundError,
    OutOfBoundsError,
    PrintNotSupportedError,
    SnapshotFlowError,
    SnapshotNotFoundError,
    SnapshotProcessingError,
)

logger = logging.getLogger(__name__)


def _error_body(exc: SnapshotFlowError, **extra) -> dict:
    detail = {"detail": str(exc), **extra}
    causes = [str(cause) for cause in list(exc.chain())[1:]]
    if causes:
        detail["caused_by"] = causes
    return detail


def status_code_for(exc: SnapshotFlowError) -> int:
    """Pick the HTTP status for a domain error."""
    root = exc.__cause__ if isinstance(exc, SnapshotProcessingError) else exc

    if isinstance(root, SnapshotNotFoundError):
        return 404
    if isinstance(root, NoContentFoundError):
        return 422
    if isinstance(root, PrintNotSupportedError):
        return 501
    return 500


def register_exception_handlers(app: FastAPI) -> None:
    """Register domain exception handlers on the app."""

    @app.exception_handler(SnapshotProcessingError)
    async def processing_error_handler(request: Request, exc: SnapshotProcessingError):
        status_code = status_code_for(exc)
        if status_code >= 500:
            logger.error(f"Snapshot processing failed at {exc.stage.value} stage: {exc}")
        return JSONResponse(
            status_code=status_code, content=_error_body(exc, stage=exc.stage.value)
        )

    @app.exception_handler(OutOfBoundsError)
    async def out_of_bounds_handler(request: Request, exc: OutOfBoundsError):
        logger.critical(f"Crop contract violated: {exc}")
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    @app.exception_handler(SnapshotFlowError)
    async def snapshot_flow_error_handler(request: Request, exc: SnapshotFlowError):
        return JSONResponse(status_code=status_code_for(exc), content=_error_body(exc))


def safe_endpoint(func):
    """
    Decorator for async endpoints.

    HTTP and domain errors pass through to their handlers; anything else is
    logged and turned into a 500.
    """

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except (HTTPException, SnapshotFlowError):
            raise
        except Exception as e:
            logger.error(f"Unhandled error in {func.__name__}: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")

    return wrapper
