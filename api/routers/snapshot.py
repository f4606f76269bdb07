"""
Snapshot API Router - Crop, brighten and print captured snapshots
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_config, get_snapshot_service
from api.exceptions import safe_endpoint
from core.image.processors import create_thumbnail
from schemas import LatestSnapshotResponse, SnapshotProcessRequest, SnapshotProcessResponse
from services.snapshot_service import SnapshotService

logger = logging.getLogger(__name__)

router = APIRouter()


def _resolve_directory(requested: Optional[str], config: dict) -> str:
    directory = requested or config.get("snapshot", {}).get("directory")
    if not directory:
        raise HTTPException(
            status_code=400,
            detail="No snapshot directory given and SNAPSHOT_DIR is not configured",
        )
    return directory


@router.get("/latest")
@safe_endpoint
async def latest_snapshot(
    snapshot_dir: Optional[str] = Query(default=None, description="Directory to search"),
    service: SnapshotService = Depends(get_snapshot_service),
    config: dict = Depends(get_config),
) -> LatestSnapshotResponse:
    """
    Return the snapshot the next processing run would pick.

    Files produced by earlier runs are never returned.
    """
    path = service.latest_snapshot(_resolve_directory(snapshot_dir, config))
    return LatestSnapshotResponse(path=str(path), name=path.name)


@router.post("/process")
@safe_endpoint
async def process_snapshot(
    request: SnapshotProcessRequest,
    service: SnapshotService = Depends(get_snapshot_service),
    config: dict = Depends(get_config),
) -> SnapshotProcessResponse:
    """
    Crop the black borders of the newest snapshot, lift its levels and
    write it next to the source.

    Args:
        request: Directory, luma offset and whether to print
        service: Snapshot service dependency

    Returns:
        SnapshotProcessResponse with output path, crop rectangle and thumbnail
    """
    directory = _resolve_directory(request.snapshot_dir, config)

    if request.send_to_printer and not config.get("printing", {}).get("enabled", True):
        raise HTTPException(status_code=409, detail="Printing is disabled in configuration")

    result = service.process(
        directory,
        request.luma_offset,
        send_to_printer=request.send_to_printer,
    )

    output = service.store.load(result.output_path)
    _, thumbnail = create_thumbnail(output)

    logger.info(
        f"Processed snapshot {result.source_path.name} -> {result.output_path.name} "
        f"({result.output_size.width}x{result.output_size.height})"
    )

    return SnapshotProcessResponse(
        source_path=str(result.source_path),
        output_path=str(result.output_path),
        bounding_rect=result.bounding_rect,
        original_size=result.original_size,
        output_size=result.output_size,
        luma_offset=result.luma_offset,
        printed=result.printed,
        processing_time_ms=result.processing_time_ms,
        thumbnail_base64=thumbnail,
    )
