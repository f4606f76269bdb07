"""
Border detection for captured snapshots.

Classifies pixels as background (near-black, luma below a fixed threshold)
or content, and computes the tightest rectangle enclosing all content.
Rows are scanned once each and the row results are walked once, in bands
of content rows separated by fully-background rows.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from core.constants import BorderConstants
from core.exceptions import NoContentFoundError
from core.image.buffer import validate_pixel_buffer
from core.image.converters import ImageConverters
from schemas import BoundingRect

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RowSegment:
    """Outermost content extent of one row; `right` is exclusive."""

    left: int
    right: int


def background_mask(pixels: np.ndarray) -> np.ndarray:
    """
    Classify every pixel as background or content.

    Args:
        pixels: RGB pixel buffer

    Returns:
        Boolean array of shape (H, W); True where luma < threshold
    """
    luma = ImageConverters.to_luma(pixels)
    return luma < BorderConstants.BACKGROUND_LUMA_THRESHOLD


def row_bounds(background_row: np.ndarray) -> Optional[RowSegment]:
    """
    Find the outermost content extent of a single row.

    Disjoint content runs separated by background (e.g. black stripes
    inside the picture) are merged: only the first content pixel and the
    end of the last content run are reported.

    Args:
        background_row: 1-D boolean background mask of one row

    Returns:
        RowSegment(left, right), or None if the whole row is background
    """
    content = np.flatnonzero(~background_row)
    if content.size == 0:
        return None

    return RowSegment(left=int(content[0]), right=int(content[-1]) + 1)


def _scan_rows(background: np.ndarray) -> List[Optional[RowSegment]]:
    return [row_bounds(row) for row in background]


def scan_borders(pixels: np.ndarray) -> BoundingRect:
    """
    Compute the bounding rectangle of all non-background pixels.

    Leading background rows set the top edge. Each following band of
    content rows widens the left/right extent and moves the bottom edge
    to the end of the band; runs of background rows between bands are
    skipped. The result is the union of all bands.

    Args:
        pixels: RGB pixel buffer

    Returns:
        BoundingRect with non-zero width and height

    Raises:
        NoContentFoundError: If every pixel is background
    """
    validate_pixel_buffer(pixels)
    height, width = pixels.shape[:2]

    if width == 0 or height == 0:
        raise NoContentFoundError(width, height)

    segments = _scan_rows(background_mask(pixels))

    left_crop = width
    right_crop = 0
    bot_crop = 0
    bands = 0

    row = 0
    while row < height and segments[row] is None:
        row += 1
    top_crop = row

    while row < height:
        # Content band
        while row < height and segments[row] is not None:
            segment = segments[row]
            left_crop = min(left_crop, segment.left)
            right_crop = max(right_crop, segment.right)
            row += 1

        bot_crop = row
        bands += 1

        # Background rows separating this band from the next
        while row < height and segments[row] is None:
            row += 1

    if right_crop <= left_crop or bot_crop <= top_crop:
        raise NoContentFoundError(width, height)

    if bands > 1:
        logger.debug(f"Found {bands} content bands separated by background rows; cropping to their union")

    rect = BoundingRect.from_edges(left_crop, top_crop, right_crop, bot_crop)

    logger.debug(f"Border scan of {width}x{height}: {rect.to_dict()}")

    return rect
