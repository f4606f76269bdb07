"""
Snapshot processing API models.

This module contains request and response models for the snapshot pipeline:
- Latest snapshot lookup
- Crop/brighten/print processing
"""

from typing import Optional

from pydantic import BaseModel, Field

from .common import BoundingRect, Size


class LatestSnapshotResponse(BaseModel):
    """Newest candidate snapshot in a directory"""

    path: str
    name: str


class SnapshotProcessRequest(BaseModel):
    """Request to crop, brighten and optionally print the latest snapshot"""

    model_config = {"extra": "forbid"}

    snapshot_dir: Optional[str] = Field(
        default=None, description="Directory to search; defaults to the configured one"
    )
    luma_offset: int = Field(
        ..., ge=0, le=255, description="Brightness lift (0 = unchanged, 255 = white)"
    )
    send_to_printer: bool = Field(default=False, description="Dispatch output to the printer")


class SnapshotProcessResponse(BaseModel):
    """Result of processing a snapshot"""

    source_path: str
    output_path: str
    bounding_rect: BoundingRect
    original_size: Size
    output_size: Size
    luma_offset: int
    printed: bool
    processing_time_ms: int
    thumbnail_base64: str
