"""
Schemas Package

This package contains all Pydantic schemas for data validation and serialization,
organized by domain for better maintainability.

These schemas are shared across all application layers:
- API (routers, dependencies)
- Services (pipeline orchestration)
- Core (infrastructure)
- Vision (border scanning)
"""

# Common models (core data structures)
from .common import BoundingRect, Size

# Snapshot models
from .snapshot import LatestSnapshotResponse, SnapshotProcessRequest, SnapshotProcessResponse

# Explicitly declare public API for re-export
__all__ = [
    # Common models
    "BoundingRect",
    "Size",
    # Snapshot models
    "LatestSnapshotResponse",
    "SnapshotProcessRequest",
    "SnapshotProcessResponse",
]
