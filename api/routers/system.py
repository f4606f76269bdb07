"""
System API Router - Status and configuration summary
"""

import logging
import time
from typing import Optional

import psutil
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.dependencies import get_config, get_print_dispatcher
from api.exceptions import safe_endpoint
from core.print_dispatcher import PrintDispatcher

logger = logging.getLogger(__name__)

router = APIRouter()

# Track start time
START_TIME = time.time()


class SystemStatus(BaseModel):
    """System status information"""

    status: str
    uptime: float
    memory_usage: dict
    platform: str
    printing_supported: bool
    printing_enabled: bool
    snapshot_dir: Optional[str]
    output_suffix: str


@router.get("/status")
@safe_endpoint
async def get_status(
    printer: PrintDispatcher = Depends(get_print_dispatcher),
    config: dict = Depends(get_config),
) -> SystemStatus:
    """Get system status"""
    process = psutil.Process()
    memory_info = process.memory_info()
    virtual_memory = psutil.virtual_memory()

    snapshot_config = config.get("snapshot", {})

    return SystemStatus(
        status="healthy",
        uptime=time.time() - START_TIME,
        memory_usage={
            "process_mb": memory_info.rss / 1024 / 1024,
            "system_percent": virtual_memory.percent,
            "available_mb": virtual_memory.available / 1024 / 1024,
        },
        platform=printer.platform,
        printing_supported=printer.is_supported,
        printing_enabled=config.get("printing", {}).get("enabled", True),
        snapshot_dir=snapshot_config.get("directory"),
        output_suffix=snapshot_config.get("output_suffix", ""),
    )
