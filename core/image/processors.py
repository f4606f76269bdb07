"""
Image processing operations.

Handles image manipulation tasks:
- Cropping to a bounding rectangle
- Thumbnail creation
"""

import logging
from typing import Tuple

import cv2
import numpy as np

from core.constants import ErrorMessages, SnapshotConstants
from core.exceptions import OutOfBoundsError
from core.image.buffer import validate_pixel_buffer
from core.image.converters import ImageConverters
from schemas import BoundingRect

logger = logging.getLogger(__name__)


def crop(pixels: np.ndarray, rect: BoundingRect) -> np.ndarray:
    """
    Copy the pixels inside a rectangle into a new, independent buffer.

    The result never aliases the source, so the source may be discarded
    afterwards.

    Args:
        pixels: Source RGB pixel buffer
        rect: Rectangle to keep; must be non-empty and fit inside the source

    Returns:
        C-contiguous pixel buffer of shape (rect.height, rect.width, 3)

    Raises:
        OutOfBoundsError: If the rectangle is empty or extends past the source
    """
    validate_pixel_buffer(pixels)
    height, width = pixels.shape[:2]

    if rect.is_empty:
        raise OutOfBoundsError(ErrorMessages.CROP_EMPTY.format(rect=rect.to_dict()))

    if not rect.fits_within(width, height):
        raise OutOfBoundsError(
            ErrorMessages.CROP_OUT_OF_BOUNDS.format(rect=rect.to_dict(), width=width, height=height)
        )

    cropped = pixels[rect.top : rect.bottom, rect.left : rect.right].copy(order="C")

    logger.debug(
        f"Cropped {width}x{height} to {rect.width}x{rect.height} at ({rect.left},{rect.top})"
    )

    return cropped


def create_thumbnail(
    image: np.ndarray, width: int = SnapshotConstants.DEFAULT_THUMBNAIL_WIDTH
) -> Tuple[np.ndarray, str]:
    """
    Create thumbnail from image.

    Args:
        image: Input RGB pixel buffer
        width: Maximum thumbnail width in pixels; smaller images are kept as-is

    Returns:
        Tuple of (thumbnail as NumPy array, thumbnail as base64 JPEG string)
    """
    try:
        h, w = image.shape[:2]

        if w > width:
            height = max(1, int(h * width / w))
            thumb_array = cv2.resize(image, (width, height), interpolation=cv2.INTER_AREA)
        else:
            thumb_array = image

        thumb_base64 = ImageConverters.to_base64(
            thumb_array, format="JPEG", quality=SnapshotConstants.THUMBNAIL_JPEG_QUALITY
        )

        return thumb_array, thumb_base64

    except Exception as e:
        logger.error(f"Failed to create thumbnail: {e}")
        raise
