"""
Snapshot vision algorithms.

- border_scanner: Background classification and bounding rectangle of content
- levels_remap: Per-channel brightness lift
"""

from vision.border_scanner import RowSegment, background_mask, row_bounds, scan_borders
from vision.levels_remap import build_levels_lut, remap_levels

__all__ = [
    "RowSegment",
    "background_mask",
    "build_levels_lut",
    "remap_levels",
    "row_bounds",
    "scan_borders",
]
